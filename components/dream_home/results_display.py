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


"""Renders a finished design package."""

from typing import Callable

import mesop as me

from components.dream_home.product_card import product_card

CARD_STYLE = me.Style(
    background=me.theme_var("surface-container-low"),
    border_radius=16,
    padding=me.Padding.all(20),
    display="flex",
    flex_direction="column",
    gap=12,
)

MEDIA_STYLE = me.Style(width="100%", border_radius=12, object_fit="cover")


@me.component
def results_display(
    design_package: dict,
    narration_url: str,
    is_narrating: bool,
    narration_error: str,
    on_narrate: Callable,
    on_stop_narration: Callable,
    on_reset: Callable,
):
    with me.box(
        style=me.Style(
            display="flex",
            flex_direction="column",
            gap=24,
            max_width=1100,
            margin=me.Margin.symmetric(horizontal="auto"),
        )
    ):
        with me.box(
            style=me.Style(
                display="flex", justify_content="space-between", align_items="center"
            )
        ):
            me.text("Your Dream Home Design", type="headline-4")
            me.button("Start Over", on_click=on_reset, type="stroked")

        images = design_package.get("images", [])
        with me.box(style=CARD_STYLE):
            me.text("Renderings", type="headline-6")
            with me.box(
                style=me.Style(
                    display="grid", grid_template_columns="repeat(2, 1fr)", gap=16
                )
            ):
                for label, src in zip(["Exterior", "Interior"], images):
                    with me.box(style=me.Style(display="flex", flex_direction="column", gap=4)):
                        me.image(src=src, style=MEDIA_STYLE)
                        me.text(label, style=me.Style(font_size=14))

        with me.box(style=CARD_STYLE):
            me.text("Video Walkthrough", type="headline-6")
            if design_package.get("video_url"):
                me.video(src=design_package["video_url"], style=MEDIA_STYLE)
            else:
                me.text(
                    "Video generation is limited to once per hour. "
                    "Generate another design later to get a video tour.",
                    style=me.Style(color=me.theme_var("on-surface-variant")),
                )

        with me.box(style=CARD_STYLE):
            with me.box(
                style=me.Style(
                    display="flex", justify_content="space-between", align_items="center"
                )
            ):
                me.text("Guided Tour Script", type="headline-6")
                if narration_url:
                    me.button("Stop", on_click=on_stop_narration, type="stroked")
                else:
                    me.button(
                        "Listen",
                        on_click=on_narrate,
                        type="flat",
                        disabled=is_narrating,
                    )
            if is_narrating:
                me.progress_bar()
            if narration_error:
                me.text(narration_error, style=me.Style(color=me.theme_var("error")))
            if narration_url:
                me.audio(src=narration_url, autoplay=True)
            me.markdown(design_package.get("walkthrough_script", ""))

        with me.box(
            style=me.Style(display="grid", grid_template_columns="repeat(2, 1fr)", gap=16)
        ):
            for title, key in (("2D Floor Plan", "plan_2d"), ("3D Floor Plan", "plan_3d")):
                plan = design_package.get(key) or {}
                with me.box(style=CARD_STYLE):
                    me.text(title, type="headline-6")
                    if plan.get("image_url"):
                        me.image(src=plan["image_url"], style=MEDIA_STYLE)
                    me.markdown(plan.get("description", ""))

        with me.box(style=CARD_STYLE):
            me.text("Curated Shopping List", type="headline-6")
            shopping_list = design_package.get("shopping_list", [])
            if not shopping_list:
                me.text(
                    "No shopping suggestions are available for this design.",
                    style=me.Style(color=me.theme_var("on-surface-variant")),
                )
            with me.box(
                style=me.Style(
                    display="grid", grid_template_columns="repeat(3, 1fr)", gap=12
                )
            ):
                for item in shopping_list:
                    product_card(item)
