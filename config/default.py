# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv(override=True)


@dataclass
class Default:
    """Defaults class"""

    # Gemini Developer API key. When unset the client talks to Vertex AI.
    GEMINI_API_KEY: str | None = os.environ.get("GEMINI_API_KEY")
    PROJECT_ID: str | None = os.environ.get("PROJECT_ID")
    LOCATION: str = os.environ.get("LOCATION", "us-central1")

    MODEL_ID: str = os.environ.get("MODEL_ID", "gemini-2.5-flash")
    IMAGEN_MODEL_ID: str = os.environ.get("IMAGEN_MODEL_ID", "imagen-4.0-generate-001")
    VEO_MODEL_VERSION: str = os.environ.get("VEO_MODEL_VERSION", "2.0")
    TTS_MODEL_ID: str = os.environ.get("TTS_MODEL_ID", "gemini-2.5-flash-preview-tts")
    TTS_VOICE: str = os.environ.get("TTS_VOICE", "Kore")

    # Video generation
    VIDEO_POLL_INTERVAL_SECONDS: float = float(
        os.environ.get("VIDEO_POLL_INTERVAL_SECONDS", "10")
    )
    VIDEO_COOLDOWN_MINUTES: int = int(os.environ.get("VIDEO_COOLDOWN_MINUTES", "60"))

    # Local, per-install state
    CLIENT_STORE_PATH: str = os.environ.get(
        "CLIENT_STORE_PATH",
        os.path.join(os.path.expanduser("~"), ".dreamnest", "client_store.json"),
    )
    MEDIA_DIR: str = os.environ.get(
        "MEDIA_DIR", os.path.join(os.path.expanduser("~"), ".dreamnest", "media")
    )
    MEDIA_URL_PREFIX: str = "/media"

    APP_ENV: str = os.environ.get("APP_ENV", "local")
    PORT: int = int(os.environ.get("PORT", "8080"))
