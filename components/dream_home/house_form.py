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


from typing import Callable

import mesop as me

from config.design_options import (
    ARCHITECTURAL_STYLES,
    ORIENTATIONS,
    OUTDOOR_FEATURES,
    SPECIAL_ROOMS,
)
from state.dream_home_state import PageState

SECTION_STYLE = me.Style(
    border=me.Border.all(
        me.BorderSide(width=1, style="solid", color=me.theme_var("outline-variant"))
    ),
    border_radius=12,
    padding=me.Padding.all(20),
    display="flex",
    flex_direction="column",
    gap=12,
)


@me.component
def house_form(
    state: PageState,
    on_text_blur: Callable,
    on_select_change: Callable,
    on_outdoor_feature_change: Callable,
    on_special_room_change: Callable,
    on_submit: Callable,
):
    """
    The house description form. Text and select handlers receive the field
    name as the event key.
    """
    with me.box(
        style=me.Style(
            display="flex",
            flex_direction="column",
            gap=24,
            max_width=900,
            width="100%",
            margin=me.Margin.symmetric(horizontal="auto"),
        )
    ):
        with me.box(style=me.Style(text_align="center")):
            me.text("Design Your Dream Home", type="headline-4")
            me.text(
                "Fill in the details below and let our AI bring your vision to life.",
                style=me.Style(color=me.theme_var("on-surface-variant")),
            )

        with me.box(style=SECTION_STYLE):
            me.text("Core Specifications", type="headline-6")
            with me.box(style=me.Style(display="flex", gap=16, flex_wrap="wrap")):
                me.input(
                    key="plot_dimensions",
                    label="Plot Dimensions",
                    value=state.plot_dimensions,
                    on_blur=on_text_blur,
                    style=me.Style(flex_grow=2, min_width=240),
                )
                me.select(
                    key="orientation",
                    label="Plot Orientation",
                    options=[me.SelectOption(label=o, value=o) for o in ORIENTATIONS],
                    value=state.orientation,
                    on_selection_change=on_select_change,
                    style=me.Style(flex_grow=1, min_width=160),
                )
            with me.box(style=me.Style(display="flex", gap=16, flex_wrap="wrap")):
                for key, label in (
                    ("floors", "Floors"),
                    ("bedrooms", "Bedrooms"),
                    ("bathrooms", "Bathrooms"),
                ):
                    me.input(
                        key=key,
                        label=label,
                        type="number",
                        value=getattr(state, key),
                        on_blur=on_text_blur,
                        style=me.Style(flex_grow=1, min_width=120),
                    )

        with me.box(style=SECTION_STYLE):
            me.text("Style & Features", type="headline-6")
            me.select(
                key="style",
                label="Architectural Style",
                options=[me.SelectOption(label=s, value=s) for s in ARCHITECTURAL_STYLES],
                value=state.style,
                on_selection_change=on_select_change,
            )
            _checkbox_group(
                "Outdoor Features",
                OUTDOOR_FEATURES,
                state.outdoor_features,
                on_outdoor_feature_change,
            )
            _checkbox_group(
                "Special Rooms", SPECIAL_ROOMS, state.special_rooms, on_special_room_change
            )

        with me.box(style=SECTION_STYLE):
            me.text("Additional Details", type="headline-6")
            me.textarea(
                key="additional_details",
                label="Anything else? (e.g., specific materials, orientation, etc.)",
                value=state.additional_details,
                on_blur=on_text_blur,
                rows=4,
                style=me.Style(width="100%"),
            )

        if state.form_error:
            me.text(state.form_error, style=me.Style(color=me.theme_var("error")))

        with me.box(style=me.Style(display="flex", justify_content="center")):
            with me.content_button(type="flat", on_click=on_submit):
                with me.box(style=me.Style(display="flex", align_items="center", gap=8)):
                    me.icon("auto_awesome")
                    me.text("Generate My Dream Home")


def _checkbox_group(title: str, options: list[str], selected: list[str], on_change: Callable):
    me.text(title, style=me.Style(font_weight=500))
    with me.box(
        style=me.Style(
            display="grid", grid_template_columns="repeat(2, 1fr)", gap=4
        )
    ):
        for option in options:
            me.checkbox(
                key=option,
                label=option,
                checked=option in selected,
                on_change=on_change,
            )
