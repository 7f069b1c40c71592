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


"""Page header with the app title and the light/dark theme toggle."""

from typing import Callable

import mesop as me


@me.component
def header(title: str, icon: str, theme_mode: str, on_toggle_theme: Callable):
    with me.box(
        style=me.Style(
            display="flex",
            flex_direction="row",
            align_items="center",
            justify_content="space-between",
            padding=me.Padding.symmetric(vertical=12, horizontal=24),
            border=me.Border(
                bottom=me.BorderSide(
                    width=1, style="solid", color=me.theme_var("outline-variant")
                )
            ),
        )
    ):
        with me.box(style=me.Style(display="flex", align_items="center", gap=8)):
            me.icon(icon)
            me.text(title, type="headline-5")
        with me.content_button(type="icon", on_click=on_toggle_theme):
            me.icon("light_mode" if theme_mode == "dark" else "dark_mode")
