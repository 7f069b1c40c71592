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


import mesop as me


@me.component
def product_card(item: dict):
    with me.box(
        style=me.Style(
            background=me.theme_var("surface-container"),
            border_radius=12,
            padding=me.Padding.all(16),
            display="flex",
            flex_direction="column",
            gap=6,
        )
    ):
        me.text(item.get("name", ""), style=me.Style(font_weight=600))
        me.text(
            item.get("description", ""),
            style=me.Style(color=me.theme_var("on-surface-variant"), font_size=14),
        )
        me.text(
            item.get("priceRange", ""),
            style=me.Style(color=me.theme_var("primary"), font_weight=500),
        )
