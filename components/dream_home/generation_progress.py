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
def generation_progress(stage: str, messages: list[str]):
    """Spinner, the current stage and the last few progress messages."""
    with me.box(
        style=me.Style(
            display="flex",
            flex_direction="column",
            align_items="center",
            gap=16,
            padding=me.Padding.all(32),
            max_width=640,
            margin=me.Margin.symmetric(horizontal="auto"),
        )
    ):
        me.progress_spinner()
        me.text(stage or "Getting started...", type="headline-6")
        for index, message in enumerate(messages):
            is_latest = index == len(messages) - 1
            me.text(
                message,
                style=me.Style(
                    color=me.theme_var("on-surface")
                    if is_latest
                    else me.theme_var("on-surface-variant"),
                    font_weight=500 if is_latest else 400,
                ),
            )
