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


"""Imagen still-image generation for renderings and floor plans."""

from google.genai import types

import models.gemini as gemini
from common.analytics import get_logger, track_model_call_async
from common.error_handling import GenerationError
from common.utils import gather_or_cancel, image_bytes_to_data_uri
from config.default import Default
from models.prompts import EXTERIOR_IMAGE_PROMPT, INTERIOR_IMAGE_PROMPT

logger = get_logger(__name__)


async def generate_image(prompt: str, aspect_ratio: str) -> str:
    """Generates one image and returns it as a base64 data URI."""
    model_name = Default().IMAGEN_MODEL_ID
    async with track_model_call_async(model_name, aspect_ratio=aspect_ratio):
        try:
            response = await gemini.get_client().aio.models.generate_images(
                model=model_name,
                prompt=prompt,
                config=types.GenerateImagesConfig(
                    number_of_images=1,
                    aspect_ratio=aspect_ratio,
                ),
            )
        except Exception as e:
            raise GenerationError(f"Image generation failed: {e}") from e

        if not response.generated_images:
            raise GenerationError("Image generation returned no images.")
        image = response.generated_images[0].image
        if image is None or not image.image_bytes:
            reason = getattr(response.generated_images[0], "rai_filtered_reason", None)
            message = "Image generation returned no image data."
            if reason:
                message = f"Image generation returned no image data: {reason}"
            raise GenerationError(message)
    return image_bytes_to_data_uri(image.image_bytes, image.mime_type)


async def generate_house_images(prompt: str) -> list[str]:
    """Renders the exterior and the living area, in that order."""
    exterior, interior = await gather_or_cancel(
        generate_image(EXTERIOR_IMAGE_PROMPT.format(prompt=prompt), "16:9"),
        generate_image(INTERIOR_IMAGE_PROMPT.format(prompt=prompt), "16:9"),
    )
    logger.info("Generated exterior and interior renderings.")
    return [exterior, interior]
