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


"""State for the Dream Home page."""

from dataclasses import field

import mesop as me

from config.design_options import DEFAULT_FORM_VALUES


@me.stateclass
class PageState:
    """State for the Dream Home page."""

    # pylint: disable=E3701:invalid-field-call

    # House description form. Counts are kept as the raw input strings and
    # validated when the form is submitted.
    plot_dimensions: str = DEFAULT_FORM_VALUES["plot_dimensions"]
    orientation: str = DEFAULT_FORM_VALUES["orientation"]
    floors: str = str(DEFAULT_FORM_VALUES["floors"])
    bedrooms: str = str(DEFAULT_FORM_VALUES["bedrooms"])
    bathrooms: str = str(DEFAULT_FORM_VALUES["bathrooms"])
    style: str = DEFAULT_FORM_VALUES["style"]
    outdoor_features: list[str] = field(
        default_factory=lambda: list(DEFAULT_FORM_VALUES["outdoor_features"])
    )
    special_rooms: list[str] = field(
        default_factory=lambda: list(DEFAULT_FORM_VALUES["special_rooms"])
    )
    additional_details: str = DEFAULT_FORM_VALUES["additional_details"]

    # Generation run
    is_loading: bool = False
    status_stage: str = ""
    status_messages: list[str] = field(default_factory=list)
    error_message: str = ""
    form_error: str = ""

    # DesignPackage.to_dict() of the last successful run
    design_package: dict = field(default_factory=dict)

    # Narrated walkthrough
    is_narrating: bool = False
    narration_url: str = ""
    narration_error: str = ""
