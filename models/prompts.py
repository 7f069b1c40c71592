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


"""Prompt builder for the design brief and the per-asset prompt templates."""

from models.house import HouseSpec

NONE_TOKEN = "None"

DESIGN_BRIEF_TEMPLATE = """
Design a home based on the following specifications:
- Plot Dimensions: {plot_dimensions}
- Plot Orientation (Facing): {orientation}
- Number of Floors: {floors}
- Bedrooms: {bedrooms}
- Bathrooms: {bathrooms}
- Architectural Style: {style}
- Outdoor Features: {outdoor_features}
- Special Rooms: {special_rooms}
- Additional Details: {additional_details}

The design should be cohesive, functional, and aesthetically pleasing, reflecting the specified style and considering the plot's orientation for optimal natural light.
"""

WALKTHROUGH_SCRIPT_PROMPT = "You are a professional and eloquent real estate agent. Write a compelling and descriptive voice-guided walkthrough script for a home with the following features: {prompt}. The script should be around 150 words and highlight the key selling points in an engaging tone."

SHOPPING_LIST_PROMPT = """Based on the following home design, suggest a list of 5 key furniture and decor items that would fit the style perfectly. For each item, provide a name, a brief description, and a price range.
Home Design: {prompt}"""

EXTERIOR_IMAGE_PROMPT = "Photorealistic, ultra-detailed exterior view of a {prompt}. Cinematic lighting, 8k resolution."
INTERIOR_IMAGE_PROMPT = "Photorealistic, ultra-detailed interior view of the living room and kitchen area of a {prompt}. Natural lighting, warm and inviting, 8k resolution."

PLAN_2D_DESCRIPTION_PROMPT = "Provide a detailed textual description of a 2D floor plan for the ground floor of a home with these features: {prompt}. Describe the layout, room placement, approximate dimensions, and flow. Use clear, architectural language."
PLAN_2D_IMAGE_PROMPT = "Create a detailed, black and white 2D architectural floor plan blueprint for a house with the following features: {prompt}. Top-down view, clean lines, room labels, architectural style. Minimalist and clear."

PLAN_3D_DESCRIPTION_PROMPT = "Provide a descriptive overview of a 3D floor plan for a home with these features: {prompt}. Describe the furnished layout from a dollhouse perspective, highlighting the spatial relationships and interior design style."
PLAN_3D_IMAGE_PROMPT = "Generate a photorealistic 3D floor plan of a house with the following features: {prompt}. Dollhouse view, cutaway walls, furnished rooms, realistic lighting, 4K resolution."

VIDEO_WALKTHROUGH_PROMPT = "An aerial and cinematic 3D architectural walkthrough video tour of a {prompt}. Show the exterior, then smoothly transition inside to showcase the main living areas. Hyperrealistic rendering."

NARRATION_PROMPT = "Read the following home tour warmly, at a relaxed pace, like a real estate agent guiding a client: {script}"


def _join_or_none(values) -> str:
    return ", ".join(v.value for v in values) or NONE_TOKEN


def build_prompt(spec: HouseSpec) -> str:
    """Renders a HouseSpec as the natural-language design brief every generator uses."""
    return DESIGN_BRIEF_TEMPLATE.format(
        plot_dimensions=spec.plot_dimensions,
        orientation=spec.orientation.value,
        floors=spec.floors,
        bedrooms=spec.bedrooms,
        bathrooms=spec.bathrooms,
        style=spec.style.value,
        outdoor_features=_join_or_none(spec.outdoor_features),
        special_rooms=_join_or_none(spec.special_rooms),
        additional_details=spec.additional_details or NONE_TOKEN,
    )
