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


"""Dream Home page: house description form, generation progress and results."""

import asyncio

import mesop as me
from pydantic import ValidationError

from common.analytics import get_logger, log_page_view, log_ui_click, track_click
from common.error_handling import DesignGenerationError, GenerationError
from common.status_reporter import StatusReporter
from common.storage import THEME_KEY, get_client_store, release_media, store_media
from components.dream_home.generation_progress import generation_progress
from components.dream_home.house_form import house_form
from components.dream_home.results_display import results_display
from components.header import header
from models.design import GenerationStatus
from models.gemini_tts import synthesize_speech
from models.house import HouseSpec
from services.design_service import generate_design_package
from state.dream_home_state import PageState
from state.state import AppState

logger = get_logger(__name__)

PAGE_NAME = "dream_home"
# How often the page re-renders while a run is in flight.
STATUS_REFRESH_SECONDS = 1.0


def on_load(e: me.LoadEvent):
    app_state = me.state(AppState)
    app_state.current_page = PAGE_NAME
    if not app_state.theme_loaded:
        app_state.theme_mode = get_client_store().get_item(THEME_KEY) or "light"
        app_state.theme_loaded = True
    me.set_theme_mode(app_state.theme_mode)
    log_page_view(PAGE_NAME, app_state.session_id)
    yield


@me.page(path="/", title="DreamNest Studio", on_load=on_load)
def dream_home_page():
    app_state = me.state(AppState)
    state = me.state(PageState)
    with me.box(
        style=me.Style(
            min_height="100vh",
            display="flex",
            flex_direction="column",
            background=me.theme_var("surface"),
        )
    ):
        header("DreamNest Studio", "home", app_state.theme_mode, on_toggle_theme)
        with me.box(style=me.Style(flex_grow=1, padding=me.Padding.all(32))):
            page_content(state)
        me.text(
            "Designs are AI-generated concepts, not construction documents.",
            style=me.Style(
                text_align="center",
                font_size=12,
                padding=me.Padding.all(16),
                color=me.theme_var("on-surface-variant"),
            ),
        )


def page_content(state: PageState):
    if state.is_loading:
        generation_progress(state.status_stage, state.status_messages)
    elif state.error_message:
        with me.box(
            style=me.Style(
                display="flex",
                flex_direction="column",
                align_items="center",
                gap=16,
                padding=me.Padding.all(32),
            )
        ):
            me.text(
                "Generation Failed",
                type="headline-5",
                style=me.Style(color=me.theme_var("error")),
            )
            me.text(state.error_message)
            me.button("Try Again", on_click=on_click_reset, type="flat")
    elif state.design_package:
        results_display(
            design_package=state.design_package,
            narration_url=state.narration_url,
            is_narrating=state.is_narrating,
            narration_error=state.narration_error,
            on_narrate=on_click_narrate,
            on_stop_narration=on_click_stop_narration,
            on_reset=on_click_reset,
        )
    else:
        house_form(
            state,
            on_text_blur=on_field_change,
            on_select_change=on_field_change,
            on_outdoor_feature_change=on_outdoor_feature_change,
            on_special_room_change=on_special_room_change,
            on_submit=on_click_generate,
        )


# --- Event Handlers ---


def on_toggle_theme(e: me.ClickEvent):
    app_state = me.state(AppState)
    app_state.theme_mode = "dark" if app_state.theme_mode == "light" else "light"
    me.set_theme_mode(app_state.theme_mode)
    get_client_store().set_item(THEME_KEY, app_state.theme_mode)
    log_ui_click(
        element_id="dream_home_theme_toggle",
        page_name=app_state.current_page,
        session_id=app_state.session_id,
        extras={"theme": app_state.theme_mode},
    )
    yield


def on_field_change(e: me.InputBlurEvent | me.SelectSelectionChangeEvent):
    """Stores a text, number or select field; the event key is the field name."""
    state = me.state(PageState)
    setattr(state, e.key, e.value)
    state.form_error = ""


def _toggle(values: list[str], value: str, checked: bool) -> list[str]:
    if checked and value not in values:
        return values + [value]
    if not checked:
        return [v for v in values if v != value]
    return values


def on_outdoor_feature_change(e: me.CheckboxChangeEvent):
    state = me.state(PageState)
    state.outdoor_features = _toggle(state.outdoor_features, e.key, e.checked)


def on_special_room_change(e: me.CheckboxChangeEvent):
    state = me.state(PageState)
    state.special_rooms = _toggle(state.special_rooms, e.key, e.checked)


def _house_spec_from_state(state: PageState) -> HouseSpec:
    return HouseSpec(
        plot_dimensions=state.plot_dimensions,
        orientation=state.orientation,
        floors=state.floors,
        bedrooms=state.bedrooms,
        bathrooms=state.bathrooms,
        style=state.style,
        outdoor_features=state.outdoor_features,
        special_rooms=state.special_rooms,
        additional_details=state.additional_details,
    )


def _apply_status(state: PageState, status: GenerationStatus):
    state.status_stage = status.stage
    state.status_messages = list(status.messages)


def _release_session_media(state: PageState):
    release_media(state.narration_url)
    if state.design_package:
        release_media(state.design_package.get("video_url"))
    state.narration_url = ""
    state.narration_error = ""


async def on_click_generate(e: me.ClickEvent):
    """Validates the form and runs a full design generation."""
    state = me.state(PageState)
    app_state = me.state(AppState)
    log_ui_click(
        element_id="dream_home_generate_button",
        page_name=app_state.current_page,
        session_id=app_state.session_id,
    )

    try:
        spec = _house_spec_from_state(state)
    except ValidationError as ex:
        first_error = ex.errors()[0]
        field_name = ".".join(str(part) for part in first_error["loc"])
        state.form_error = f"Please check {field_name}: {first_error['msg']}"
        yield
        return

    _release_session_media(state)
    state.form_error = ""
    state.error_message = ""
    state.design_package = {}
    state.is_loading = True
    _apply_status(state, GenerationStatus())
    yield

    latest_status = GenerationStatus()

    def on_status(status: GenerationStatus):
        nonlocal latest_status
        latest_status = status

    reporter = StatusReporter(on_update=on_status)
    task = asyncio.create_task(generate_design_package(spec, reporter))
    try:
        while not task.done():
            await asyncio.wait({task}, timeout=STATUS_REFRESH_SECONDS)
            _apply_status(state, latest_status)
            yield
        state.design_package = task.result().to_dict()
    except DesignGenerationError as ex:
        state.error_message = ex.message
    finally:
        state.is_loading = False
        yield


async def on_click_narrate(e: me.ClickEvent):
    """Reads the walkthrough script aloud."""
    state = me.state(PageState)
    app_state = me.state(AppState)
    log_ui_click(
        element_id="dream_home_narrate_button",
        page_name=app_state.current_page,
        session_id=app_state.session_id,
    )
    script = state.design_package.get("walkthrough_script", "")
    if not script:
        return
    state.is_narrating = True
    state.narration_error = ""
    yield

    try:
        audio_bytes = await synthesize_speech(script)
        state.narration_url = store_media("narration", "walkthrough.wav", audio_bytes)
    except GenerationError as ex:
        logger.error(f"Narration failed: {ex.message}")
        state.narration_error = f"Narration is unavailable: {ex.message}"
    finally:
        state.is_narrating = False
        yield


@track_click(element_id="dream_home_stop_narration_button")
def on_click_stop_narration(e: me.ClickEvent):
    state = me.state(PageState)
    release_media(state.narration_url)
    state.narration_url = ""
    yield


@track_click(element_id="dream_home_reset_button")
def on_click_reset(e: me.ClickEvent):
    state = me.state(PageState)
    _release_session_media(state)
    state.is_loading = False
    state.error_message = ""
    state.form_error = ""
    state.design_package = {}
    _apply_status(state, GenerationStatus())
    yield
