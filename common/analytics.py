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


"""Structured logging and usage events.

Every module gets its logger from get_logger. Usage events (page views, clicks,
model calls and whole design runs) go to one analytics logger as JSON payloads
so they can be filtered by ``event_type`` in Cloud Logging.
"""

import functools
import json
import logging
import os
import time
from contextlib import asynccontextmanager, contextmanager

import mesop as me
from google.cloud import logging as cloud_logging

from state.state import AppState


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON."""

    def format(self, record):
        payload = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        event = getattr(record, "event", None)
        if event:
            payload.update(event)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def _make_handler() -> logging.Handler:
    # Cloud Run sets K_SERVICE; the Cloud Logging handler parses JSON payloads.
    if os.environ.get("K_SERVICE"):
        return cloud_logging.Client().get_default_handler()
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    return handler


def get_logger(name: str) -> logging.Logger:
    """Returns a logger with the app's handler attached exactly once."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(logging.INFO)
        logger.addHandler(_make_handler())
    return logger


analytics_logger = get_logger("dreamnest.analytics")


def _page_context() -> tuple[str, str]:
    try:
        state = me.state(AppState)
        return state.current_page, state.session_id
    except Exception:
        # me.state is only available inside a Mesop event or render context.
        return "unknown", "unknown"


def log_event(event_type: str, message: str, **fields):
    """Emits one analytics event. None-valued fields are dropped."""
    event = {"event_type": event_type}
    event.update({k: v for k, v in fields.items() if v is not None})
    analytics_logger.info(message, extra={"event": event})


def log_page_view(page_name: str, session_id: str = None):
    log_event("page_view", f"Page view: {page_name}", page_name=page_name, session_id=session_id)


def log_ui_click(element_id: str, page_name: str, session_id: str = None, extras: dict = None):
    log_event(
        "ui_click",
        f"UI Click: {element_id} on {page_name}",
        element_id=element_id,
        page_name=page_name,
        session_id=session_id,
        **(extras or {}),
    )


def log_model_call(model_name: str, status: str, duration_ms: float = 0, details: dict = None):
    """Logs one Gemini, Imagen or Veo call with its outcome ("success" or "failure")."""
    page_name, session_id = _page_context()
    log_event(
        "model_call",
        f"Model Call: {model_name} ({status})",
        model_name=model_name,
        status=status,
        duration_ms=round(duration_ms, 2),
        page_name=page_name,
        session_id=session_id,
        details=details or {},
    )


def log_design_run(status: str, duration_ms: float, video_included: bool = False, error: str = None):
    """Logs the outcome of a whole design package generation."""
    log_event(
        "design_run",
        f"Design run: {status}",
        status=status,
        duration_ms=round(duration_ms, 2),
        video_included=video_included,
        error=error,
    )


def track_click(element_id: str):
    """Decorator for Mesop handlers that logs the click before running the handler."""

    def decorator(handler_function):
        @functools.wraps(handler_function)
        def wrapper(*args, **kwargs):
            page_name, session_id = _page_context()
            log_ui_click(element_id=element_id, page_name=page_name, session_id=session_id)
            return handler_function(*args, **kwargs)

        return wrapper

    return decorator


def elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


@contextmanager
def track_model_call(model_name: str, **details):
    """Times the enclosed model call and logs it; exceptions are logged and re-raised."""
    start = time.perf_counter()
    try:
        yield
    except Exception as e:
        log_model_call(model_name, "failure", elapsed_ms(start), {"error": str(e), **details})
        raise
    log_model_call(model_name, "success", elapsed_ms(start), details)


@asynccontextmanager
async def track_model_call_async(model_name: str, **details):
    """Async twin of track_model_call for awaited client.aio calls."""
    with track_model_call(model_name, **details):
        yield
