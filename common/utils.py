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


from __future__ import annotations

import asyncio
import base64
import io
import time

from PIL import Image, UnidentifiedImageError

from common.analytics import get_logger

logger = get_logger(__name__)


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def sniff_image_mime_type(image_bytes: bytes, default: str = "image/png") -> str:
    """Returns the MIME type Pillow detects for image_bytes, or default."""
    try:
        with Image.open(io.BytesIO(image_bytes)) as img:
            detected = Image.MIME.get(img.format or "")
    except (UnidentifiedImageError, OSError) as e:
        logger.info(f"Could not identify image format, assuming {default}: {e}")
        return default
    return detected or default


def image_bytes_to_data_uri(image_bytes: bytes, mime_type: str | None = None) -> str:
    """Embeds image bytes as a self-contained base64 data URI.

    Args:
        image_bytes: The raw image payload returned by Imagen.
        mime_type: The MIME type reported by the API, if any. When missing it is
            sniffed from the bytes.

    Returns:
        A ``data:<mime>;base64,<payload>`` string usable directly as an img src.
    """
    if not mime_type:
        mime_type = sniff_image_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


async def gather_or_cancel(*coros) -> list:
    """Like asyncio.gather, but the first failure cancels and drains the other calls."""
    tasks = [asyncio.ensure_future(coro) for coro in coros]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
