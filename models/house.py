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


"""The structured description of the house a user asks us to design."""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Orientation(str, Enum):
    NORTH = "North"
    SOUTH = "South"
    EAST = "East"
    WEST = "West"


class ArchitecturalStyle(str, Enum):
    MODERN = "Modern"
    TRADITIONAL = "Traditional"
    ECO_FRIENDLY = "Eco-Friendly"
    MINIMALIST = "Minimalist"
    LUXURY = "Luxury"
    SCANDINAVIAN = "Scandinavian"
    BOHEMIAN = "Bohemian"


class OutdoorFeature(str, Enum):
    GARDEN = "Garden"
    SWIMMING_POOL = "Swimming Pool"
    PATIO = "Patio"
    ROOFTOP_TERRACE = "Rooftop Terrace"
    BALCONY = "Balcony"
    OUTDOOR_KITCHEN = "Outdoor Kitchen"


class SpecialRoom(str, Enum):
    HOME_OFFICE = "Home Office"
    GYM = "Gym"
    HOME_THEATRE = "Home Theatre"
    PRAYER_ROOM = "Prayer Room"
    MAIDS_ROOM = "Maid's Room"
    LIBRARY = "Library"
    KIDS_PLAYROOM = "Kids Playroom"


class HouseSpec(BaseModel):
    """
    The submitted house description form.
    Frozen once built, so a generation run always sees the values it started with.
    """

    model_config = ConfigDict(frozen=True)

    plot_dimensions: str
    orientation: Orientation
    floors: int = Field(..., gt=0)
    bedrooms: int = Field(..., gt=0)
    bathrooms: int = Field(..., gt=0)
    style: ArchitecturalStyle
    outdoor_features: List[OutdoorFeature] = Field(default_factory=list)
    special_rooms: List[SpecialRoom] = Field(default_factory=list)
    additional_details: str = ""

    @field_validator("outdoor_features", "special_rooms")
    @classmethod
    def _no_duplicates(cls, values: list) -> list:
        if len(set(values)) != len(values):
            raise ValueError("must not contain duplicate entries")
        return values
