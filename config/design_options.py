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


"""Catalogs backing the house description form."""

ORIENTATIONS = ["North", "South", "East", "West"]

ARCHITECTURAL_STYLES = [
    "Modern",
    "Traditional",
    "Eco-Friendly",
    "Minimalist",
    "Luxury",
    "Scandinavian",
    "Bohemian",
]

OUTDOOR_FEATURES = [
    "Garden",
    "Swimming Pool",
    "Patio",
    "Rooftop Terrace",
    "Balcony",
    "Outdoor Kitchen",
]

SPECIAL_ROOMS = [
    "Home Office",
    "Gym",
    "Home Theatre",
    "Prayer Room",
    "Maid's Room",
    "Library",
    "Kids Playroom",
]

# Values the form starts with.
DEFAULT_FORM_VALUES = {
    "plot_dimensions": "40x60 feet",
    "orientation": "North",
    "floors": 2,
    "bedrooms": 3,
    "bathrooms": 3,
    "style": "Modern",
    "outdoor_features": ["Garden", "Swimming Pool"],
    "special_rooms": ["Home Office"],
    "additional_details": "",
}
