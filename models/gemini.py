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


"""Gemini text generation for the design package."""

import asyncio
import threading

from google import genai
from google.genai import types
from pydantic import ValidationError

from common.analytics import get_logger, track_model_call_async
from common.error_handling import GenerationError
from config.default import Default
from models.design import ShoppingList, ShoppingListItem
from models.prompts import SHOPPING_LIST_PROMPT, WALKTHROUGH_SCRIPT_PROMPT

logger = get_logger(__name__)

SHOPPING_LIST_SCHEMA = types.Schema(
    type=types.Type.ARRAY,
    items=types.Schema(
        type=types.Type.OBJECT,
        properties={
            "name": types.Schema(type=types.Type.STRING),
            "description": types.Schema(type=types.Type.STRING),
            "priceRange": types.Schema(type=types.Type.STRING),
        },
        required=["name", "description", "priceRange"],
    ),
)


def _build_client() -> genai.Client:
    """Uses the Gemini Developer API when GEMINI_API_KEY is set, Vertex AI otherwise."""
    config = Default()
    if config.GEMINI_API_KEY:
        return genai.Client(api_key=config.GEMINI_API_KEY)
    return genai.Client(
        vertexai=True,
        project=config.PROJECT_ID,
        location=config.LOCATION,
    )


# client.aio keeps connection state bound to the event loop that first used it,
# and Mesop drives handlers on a separate loop per worker thread.
_clients: dict[int, tuple[asyncio.AbstractEventLoop | None, genai.Client]] = {}
_clients_lock = threading.Lock()


def get_client() -> genai.Client:
    """Returns the genai client owned by the running event loop."""
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        loop = None
    with _clients_lock:
        for key, (owner, _) in list(_clients.items()):
            if owner is not None and owner.is_closed():
                del _clients[key]
        entry = _clients.get(id(loop))
        if entry is None or entry[0] is not loop:
            entry = (loop, _build_client())
            _clients[id(loop)] = entry
            logger.info(f"Created genai client for event loop {id(loop)}")
        return entry[1]


async def generate_text(
    prompt: str, config: types.GenerateContentConfig | None = None
) -> str:
    """Sends a single prompt to Gemini and returns the response text."""
    model_name = Default().MODEL_ID
    async with track_model_call_async(model_name, prompt_length=len(prompt)):
        try:
            response = await get_client().aio.models.generate_content(
                model=model_name,
                contents=prompt,
                config=config,
            )
        except Exception as e:
            raise GenerationError(f"Text generation failed: {e}") from e

        if response.text is None:
            raise GenerationError("Text generation returned an empty response.")
    return response.text


async def generate_walkthrough_script(prompt: str) -> str:
    """Writes the ~150 word real-estate-agent walkthrough for the house."""
    return await generate_text(WALKTHROUGH_SCRIPT_PROMPT.format(prompt=prompt))


async def generate_shopping_list(prompt: str) -> list[ShoppingListItem]:
    """Suggests furniture and decor items for the design.

    A response that does not parse as the expected JSON yields an empty list
    instead of failing the run. Errors from the call itself still propagate.
    """
    config = types.GenerateContentConfig(
        response_mime_type="application/json",
        response_schema=SHOPPING_LIST_SCHEMA,
    )
    response_text = await generate_text(
        SHOPPING_LIST_PROMPT.format(prompt=prompt), config=config
    )
    try:
        return ShoppingList.validate_json(response_text.strip())
    except ValidationError as e:
        logger.warning(f"Failed to parse shopping list JSON: {e}")
        logger.info(f"Raw shopping list response: {response_text}")
        return []
