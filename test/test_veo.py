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
import os
import sys
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
sys.path.insert(0, os.path.dirname(__file__))

import datetime

import requests

from common.error_handling import VideoOperationError
from common.status_reporter import StatusReporter
from common.storage import LAST_VIDEO_GENERATION_KEY, InMemoryStore
from genai_fakes import FAKE_MP4_BYTES, FakeGenaiClient
from models.veo import VIDEO_PROGRESS_MESSAGES, VideoGenerationJob, VideoJobState
from services.rate_limiter import CooldownRateLimiter
from services.veo_service import generate_walkthrough_video

PROMPT = "Design a home based on the following specifications: ..."
NOW_MS = 1_760_000_000_000


def collecting_reporter():
    updates = []
    return StatusReporter(on_update=updates.append), updates


def test_job_polls_until_done_with_rotating_messages():
    fake = FakeGenaiClient(pending_polls=7)
    reporter, updates = collecting_reporter()

    with patch("models.gemini.get_client", return_value=fake):
        job = VideoGenerationJob(PROMPT, reporter, poll_interval_seconds=0)
        video_bytes = asyncio.run(job.run())

    assert video_bytes == FAKE_MP4_BYTES
    assert job.state is VideoJobState.DONE
    assert fake.aio.operations.get.await_count == 7

    messages = [u.messages[-1] for u in updates]
    assert messages[0] == "Starting video generation... this may take a few minutes."
    assert messages[1:8] == [VIDEO_PROGRESS_MESSAGES[i % 5] for i in range(7)]
    assert messages[-1] == "Video generation complete!"
    assert all(u.stage == "Video Generation" for u in updates)


def test_job_submits_walkthrough_prompt_for_one_video():
    fake = FakeGenaiClient()
    reporter, _ = collecting_reporter()

    with patch("models.gemini.get_client", return_value=fake):
        asyncio.run(VideoGenerationJob(PROMPT, reporter, poll_interval_seconds=0).run())

    call = fake.aio.models.generate_videos.call_args
    assert "architectural walkthrough video tour" in call.kwargs["prompt"]
    assert PROMPT in call.kwargs["prompt"]
    assert call.kwargs["config"].number_of_videos == 1
    fake.aio.operations.get.assert_not_awaited()


def test_job_without_video_fails():
    fake = FakeGenaiClient(video=None)
    reporter, _ = collecting_reporter()

    with patch("models.gemini.get_client", return_value=fake):
        job = VideoGenerationJob(PROMPT, reporter, poll_interval_seconds=0)
        with pytest.raises(VideoOperationError, match="download link"):
            asyncio.run(job.run())

    assert job.state is VideoJobState.FAILED


def test_job_with_operation_error_fails():
    fake = FakeGenaiClient()
    fake.aio.models.generate_videos.side_effect = None
    fake.aio.models.generate_videos.return_value = SimpleNamespace(
        name="operations/x", done=True, error={"code": 3, "message": "bad prompt"}, response=None
    )
    reporter, _ = collecting_reporter()

    with patch("models.gemini.get_client", return_value=fake):
        job = VideoGenerationJob(PROMPT, reporter, poll_interval_seconds=0)
        with pytest.raises(VideoOperationError, match="bad prompt"):
            asyncio.run(job.run())

    assert job.state is VideoJobState.FAILED


def test_job_downloads_video_uri_with_api_key():
    uri = "https://generativelanguage.googleapis.com/v1beta/files/abc:download?alt=media"
    fake = FakeGenaiClient(video=SimpleNamespace(uri=uri, video_bytes=None))
    reporter, _ = collecting_reporter()
    http_response = MagicMock(content=FAKE_MP4_BYTES)

    with patch("models.gemini.get_client", return_value=fake), patch(
        "models.veo.requests.get", return_value=http_response
    ) as mock_get:
        job = VideoGenerationJob(PROMPT, reporter, poll_interval_seconds=0)
        job.api_key = "test-key"
        video_bytes = asyncio.run(job.run())

    assert video_bytes == FAKE_MP4_BYTES
    assert mock_get.call_args.args[0] == uri
    assert mock_get.call_args.kwargs["params"] == {"key": "test-key"}
    http_response.raise_for_status.assert_called_once()


def test_job_download_failure_is_a_video_error():
    uri = "https://generativelanguage.googleapis.com/v1beta/files/abc:download?alt=media"
    fake = FakeGenaiClient(video=SimpleNamespace(uri=uri, video_bytes=None))
    reporter, _ = collecting_reporter()

    with patch("models.gemini.get_client", return_value=fake), patch(
        "models.veo.requests.get", side_effect=requests.ConnectionError("reset")
    ):
        job = VideoGenerationJob(PROMPT, reporter, poll_interval_seconds=0)
        with pytest.raises(VideoOperationError, match="reset"):
            asyncio.run(job.run())

    assert job.state is VideoJobState.FAILED


def _limiter(minutes_ago: int | None) -> tuple[CooldownRateLimiter, InMemoryStore]:
    initial = {}
    if minutes_ago is not None:
        initial[LAST_VIDEO_GENERATION_KEY] = str(NOW_MS - minutes_ago * 60 * 1000)
    store = InMemoryStore(initial)
    limiter = CooldownRateLimiter(store, datetime.timedelta(hours=1), clock=lambda: NOW_MS)
    return limiter, store


def test_rate_limited_video_is_skipped_without_calling_veo():
    fake = FakeGenaiClient()
    reporter, updates = collecting_reporter()
    limiter, store = _limiter(minutes_ago=30)

    with patch("models.gemini.get_client", return_value=fake):
        video_url = asyncio.run(generate_walkthrough_video(PROMPT, reporter, limiter))

    assert video_url is None
    fake.aio.models.generate_videos.assert_not_awaited()
    assert updates[-1].stage == "Video Generation"
    assert updates[-1].messages[-1] == "Skipped: Hourly limit active. Try again in 30 mins."
    assert store.get_item(LAST_VIDEO_GENERATION_KEY) == str(NOW_MS - 30 * 60 * 1000)


@pytest.mark.parametrize("minutes_ago", [90, None])
def test_video_is_stored_and_timestamp_recorded(minutes_ago):
    fake = FakeGenaiClient()
    reporter, _ = collecting_reporter()
    limiter, store = _limiter(minutes_ago=minutes_ago)

    with patch("models.gemini.get_client", return_value=fake), patch(
        "services.veo_service.store_media", return_value="/media/walkthrough_videos/v.mp4"
    ) as mock_store, patch("services.veo_service.now_ms", return_value=NOW_MS + 1234):
        video_url = asyncio.run(generate_walkthrough_video(PROMPT, reporter, limiter))

    assert video_url == "/media/walkthrough_videos/v.mp4"
    fake.aio.models.generate_videos.assert_awaited_once()
    assert mock_store.call_args.args[2] == FAKE_MP4_BYTES
    assert store.get_item(LAST_VIDEO_GENERATION_KEY) == str(NOW_MS + 1234)


def test_failed_video_does_not_record_timestamp():
    fake = FakeGenaiClient(video=None)
    reporter, _ = collecting_reporter()
    limiter, store = _limiter(minutes_ago=None)

    with patch("models.gemini.get_client", return_value=fake):
        with pytest.raises(VideoOperationError):
            asyncio.run(generate_walkthrough_video(PROMPT, reporter, limiter))

    assert store.get_item(LAST_VIDEO_GENERATION_KEY) is None
