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


"""2D and 3D floor plans: a written description paired with a generated image."""

from common.utils import gather_or_cancel
from models.design import Plan
from models.gemini import generate_text
from models.imagen import generate_image
from models.prompts import (
    PLAN_2D_DESCRIPTION_PROMPT,
    PLAN_2D_IMAGE_PROMPT,
    PLAN_3D_DESCRIPTION_PROMPT,
    PLAN_3D_IMAGE_PROMPT,
)


async def _generate_plan(
    description_prompt: str, image_prompt: str, aspect_ratio: str
) -> Plan:
    description, image_url = await gather_or_cancel(
        generate_text(description_prompt),
        generate_image(image_prompt, aspect_ratio),
    )
    return Plan(description=description, image_url=image_url)


async def generate_2d_plan(prompt: str) -> Plan:
    """Ground floor blueprint, 4:3."""
    return await _generate_plan(
        PLAN_2D_DESCRIPTION_PROMPT.format(prompt=prompt),
        PLAN_2D_IMAGE_PROMPT.format(prompt=prompt),
        "4:3",
    )


async def generate_3d_plan(prompt: str) -> Plan:
    """Furnished dollhouse view, 16:9."""
    return await _generate_plan(
        PLAN_3D_DESCRIPTION_PROMPT.format(prompt=prompt),
        PLAN_3D_IMAGE_PROMPT.format(prompt=prompt),
        "16:9",
    )
