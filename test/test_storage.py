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

from common.storage import JsonFileStore, MediaStore


def test_json_file_store_persists_between_instances(tmp_path):
    path = str(tmp_path / "nested" / "client_store.json")
    JsonFileStore(path).set_item("theme", "dark")

    store = JsonFileStore(path)
    assert store.get_item("theme") == "dark"
    assert store.get_item("missing") is None

    store.set_item("theme", "light")
    assert JsonFileStore(path).get_item("theme") == "light"


def test_corrupt_store_file_reads_as_empty(tmp_path):
    path = tmp_path / "client_store.json"
    path.write_text("{not json")

    store = JsonFileStore(str(path))
    assert store.get_item("theme") is None

    store.set_item("theme", "light")
    assert store.get_item("theme") == "light"


def test_media_store_round_trip_and_release(tmp_path):
    media = MediaStore(str(tmp_path), "/media")

    url = media.store("walkthrough_videos", "walkthrough.mp4", b"video")

    assert url.startswith("/media/walkthrough_videos/")
    assert url.endswith("walkthrough.mp4")
    with open(media.path_for(url), "rb") as f:
        assert f.read() == b"video"

    assert media.release(url) is True
    assert media.release(url) is False


def test_media_store_refuses_paths_outside_root(tmp_path):
    media = MediaStore(str(tmp_path / "media"), "/media")

    assert media.path_for("/media/../client_store.json") is None
    assert media.path_for("https://example.com/video.mp4") is None
    assert media.release("/media/../../etc/passwd") is False
