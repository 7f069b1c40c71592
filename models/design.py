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


"""Data structures for a generated design package."""

from dataclasses import asdict, dataclass, field
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

MAX_STATUS_MESSAGES = 5


@dataclass
class GenerationStatus:
    stage: str = ""
    # Sliding window of the most recent progress messages, oldest first.
    messages: list[str] = field(default_factory=list)


class ShoppingListItem(BaseModel):
    """A furniture or decor suggestion, in the JSON shape Gemini is asked for."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str
    price_range: str = Field(..., alias="priceRange")


ShoppingList = TypeAdapter(List[ShoppingListItem])


@dataclass(frozen=True)
class Plan:
    description: str
    image_url: str


@dataclass(frozen=True)
class DesignPackage:
    """Everything produced by one successful generation run."""

    images: List[str]  # [exterior, interior] data URIs
    walkthrough_script: str
    shopping_list: List[ShoppingListItem]
    plan_2d: Plan
    plan_3d: Plan
    # None when the hourly video limit was active.
    video_url: Optional[str] = None

    def to_dict(self) -> dict:
        """Plain JSON-compatible form, suitable for Mesop page state."""
        return {
            "images": list(self.images),
            "video_url": self.video_url,
            "walkthrough_script": self.walkthrough_script,
            "shopping_list": [
                item.model_dump(by_alias=True) for item in self.shopping_list
            ],
            "plan_2d": asdict(self.plan_2d),
            "plan_3d": asdict(self.plan_3d),
        }
