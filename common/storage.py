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


"""Local storage for client-held preferences and session media.

The key-value store keeps exactly the small string values the app needs to
survive a restart (theme preference, last video generation time). Generated
media is written to a scratch directory and served by the host under
``/media``; it is released when the page resets.
"""

import functools
import json
import os
import threading
import uuid

from common.analytics import get_logger
from config.default import Default

logger = get_logger(__name__)

THEME_KEY = "theme"
LAST_VIDEO_GENERATION_KEY = "lastVideoGenerationTimestamp"


class KeyValueStore:
    """String-to-string store with the shape of browser localStorage."""

    def get_item(self, key: str) -> str | None:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError


class InMemoryStore(KeyValueStore):
    def __init__(self, initial: dict[str, str] | None = None):
        self._data = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = str(value)


class JsonFileStore(KeyValueStore):
    """Persists the store as a single JSON object on local disk."""

    def __init__(self, path: str):
        self.path = path
        self._lock = threading.Lock()

    def _read(self) -> dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Client store at {self.path} is unreadable, starting empty: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, str]) -> None:
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, "w") as f:
            json.dump(data, f)
        os.replace(tmp_path, self.path)

    def get_item(self, key: str) -> str | None:
        with self._lock:
            return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read()
            data[key] = str(value)
            self._write(data)


class MediaStore:
    """Writes generated media to a local directory and maps files to URLs."""

    def __init__(self, root_dir: str, url_prefix: str = "/media"):
        self.root_dir = root_dir
        self.url_prefix = url_prefix.rstrip("/")

    def store(self, folder: str, file_name: str, contents: bytes) -> str:
        """Stores contents and returns the URL the host serves them at."""
        relative_path = f"{folder}/{uuid.uuid4().hex}-{file_name}"
        full_path = os.path.join(self.root_dir, relative_path)
        os.makedirs(os.path.dirname(full_path), exist_ok=True)
        with open(full_path, "wb") as f:
            f.write(contents)
        logger.info(f"Stored {len(contents)} bytes at {full_path}")
        return f"{self.url_prefix}/{relative_path}"

    def path_for(self, url: str) -> str | None:
        if not url or not url.startswith(f"{self.url_prefix}/"):
            return None
        relative_path = url[len(self.url_prefix) + 1 :]
        full_path = os.path.normpath(os.path.join(self.root_dir, relative_path))
        if not full_path.startswith(os.path.normpath(self.root_dir) + os.sep):
            return None
        return full_path

    def release(self, url: str) -> bool:
        """Deletes the file behind url. Returns False when there was nothing to delete."""
        full_path = self.path_for(url)
        if not full_path or not os.path.exists(full_path):
            return False
        os.remove(full_path)
        logger.info(f"Released media {url}")
        return True


@functools.lru_cache(maxsize=None)
def get_client_store() -> KeyValueStore:
    return JsonFileStore(Default().CLIENT_STORE_PATH)


@functools.lru_cache(maxsize=None)
def get_media_store() -> MediaStore:
    config = Default()
    return MediaStore(config.MEDIA_DIR, config.MEDIA_URL_PREFIX)


def store_media(folder: str, file_name: str, contents: bytes) -> str:
    """Stores a generated media file for the current session and returns its URL."""
    return get_media_store().store(folder, file_name, contents)


def release_media(url: str | None) -> None:
    if url:
        get_media_store().release(url)
