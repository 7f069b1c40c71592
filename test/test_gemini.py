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


import asyncio
import json
import os
import sys
from types import SimpleNamespace
from unittest.mock import patch

import pytest

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
sys.path.insert(0, os.path.dirname(__file__))

from common.error_handling import GenerationError
from genai_fakes import SHOPPING_ITEMS, FakeGenaiClient
from models.design import ShoppingList, ShoppingListItem
from models.gemini import (
    SHOPPING_LIST_SCHEMA,
    generate_shopping_list,
    generate_walkthrough_script,
)

PROMPT = "Design a home based on the following specifications: ..."


def test_walkthrough_script_is_returned_verbatim():
    fake = FakeGenaiClient()
    script = "  Welcome home.\n\nThis light-filled Modern residence...  "
    fake.aio.models.generate_content.side_effect = None
    fake.aio.models.generate_content.return_value = SimpleNamespace(text=script)

    with patch("models.gemini.get_client", return_value=fake):
        result = asyncio.run(generate_walkthrough_script(PROMPT))

    assert result == script
    sent = fake.aio.models.generate_content.call_args.kwargs["contents"]
    assert "eloquent real estate agent" in sent
    assert "around 150 words" in sent
    assert PROMPT in sent


def test_empty_text_response_is_an_error():
    fake = FakeGenaiClient()
    fake.aio.models.generate_content.side_effect = None
    fake.aio.models.generate_content.return_value = SimpleNamespace(text=None)

    with patch("models.gemini.get_client", return_value=fake):
        with pytest.raises(GenerationError):
            asyncio.run(generate_walkthrough_script(PROMPT))


def test_shopping_list_is_parsed_in_provider_order():
    fake = FakeGenaiClient()

    with patch("models.gemini.get_client", return_value=fake):
        items = asyncio.run(generate_shopping_list(PROMPT))

    assert [item.name for item in items] == ["Walnut Sofa", "Arc Floor Lamp"]
    assert items[0].price_range == "$1,200 - $1,800"
    config = fake.aio.models.generate_content.call_args.kwargs["config"]
    assert config.response_mime_type == "application/json"
    assert config.response_schema == SHOPPING_LIST_SCHEMA


@pytest.mark.parametrize(
    "raw",
    [
        "Here are five lovely items: a sofa, a lamp...",
        '[{"name": "Sofa", "description": "Comfy"}]',  # priceRange missing
        '{"name": "Sofa"}',
        "",
    ],
)
def test_unparseable_shopping_list_degrades_to_empty(raw):
    fake = FakeGenaiClient(shopping_json=raw)

    with patch("models.gemini.get_client", return_value=fake):
        items = asyncio.run(generate_shopping_list(PROMPT))

    assert items == []


def test_shopping_list_call_failure_still_propagates():
    fake = FakeGenaiClient(fail_when="furniture and decor")

    with patch("models.gemini.get_client", return_value=fake):
        with pytest.raises(GenerationError, match="503 UNAVAILABLE"):
            asyncio.run(generate_shopping_list(PROMPT))


def test_schema_requires_all_three_string_fields():
    item_schema = SHOPPING_LIST_SCHEMA.items
    assert set(item_schema.required) == {"name", "description", "priceRange"}
    assert set(item_schema.properties) == {"name", "description", "priceRange"}


def test_shopping_list_survives_json_round_trip():
    items = [ShoppingListItem.model_validate(item) for item in SHOPPING_ITEMS]

    payload = ShoppingList.dump_json(items, by_alias=True)
    parsed = ShoppingList.validate_json(payload)

    assert json.loads(payload) == SHOPPING_ITEMS
    assert [(i.name, i.description, i.price_range) for i in parsed] == [
        (i.name, i.description, i.price_range) for i in items
    ]
