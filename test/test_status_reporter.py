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


import os
import sys

import pytest

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from common.status_reporter import StatusReporter
from models.design import MAX_STATUS_MESSAGES


def test_report_sets_stage_and_appends_message():
    reporter = StatusReporter()
    reporter.report("Initialization", "Crafting the perfect design brief...")
    reporter.report("Content Generation", "Generating textual descriptions...")

    status = reporter.status
    assert status.stage == "Content Generation"
    assert status.messages == [
        "Crafting the perfect design brief...",
        "Generating textual descriptions...",
    ]


def test_window_keeps_only_latest_five_in_order():
    reporter = StatusReporter()
    for i in range(1, 7):
        reporter.report("Stage", f"message {i}")

    assert MAX_STATUS_MESSAGES == 5
    assert reporter.status.messages == [f"message {i}" for i in range(2, 7)]


def test_observer_receives_snapshots():
    updates = []
    reporter = StatusReporter(on_update=updates.append)

    reporter.report("A", "first")
    reporter.report("B", "second")

    assert [u.stage for u in updates] == ["A", "B"]
    assert updates[0].messages == ["first"]
    assert updates[1].messages == ["first", "second"]
    # Mutating a snapshot must not leak back into the reporter.
    updates[1].messages.append("tampered")
    assert reporter.status.messages == ["first", "second"]


def test_reset_clears_status():
    updates = []
    reporter = StatusReporter(on_update=updates.append)
    reporter.report("A", "first")

    reporter.reset()

    assert reporter.status.stage == ""
    assert reporter.status.messages == []
    assert updates[-1].messages == []
