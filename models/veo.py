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


"""Veo walkthrough video generation.

A Veo request is a long-running operation: it is submitted once, then polled
until it reports done. VideoGenerationJob models that lifecycle as an explicit
state machine so each transition, and the progress message the user sees for
it, happens in one place.
"""

import asyncio
from enum import Enum

import requests
from google.genai import types

import models.gemini as gemini
from common.analytics import get_logger, track_model_call_async
from common.error_handling import GenerationError, VideoOperationError
from common.status_reporter import StatusReporter
from config.default import Default
from config.veo_models import get_veo_model_config
from models.prompts import VIDEO_WALKTHROUGH_PROMPT

logger = get_logger(__name__)

VIDEO_STAGE = "Video Generation"

VIDEO_PROGRESS_MESSAGES = [
    "The digital architect is sketching the initial concepts...",
    "Rendering the structural framework in high definition...",
    "Applying textures and lighting to bring the design to life...",
    "Polishing the final details for a stunning visual tour...",
    "Almost there! Preparing your video for presentation.",
]

DOWNLOAD_TIMEOUT_SECONDS = 300


class VideoJobState(str, Enum):
    SUBMITTED = "submitted"
    POLLING = "polling"
    DONE = "done"
    FAILED = "failed"


class VideoGenerationJob:
    """Drives one Veo operation from submission to a downloaded video."""

    def __init__(
        self,
        prompt: str,
        reporter: StatusReporter,
        poll_interval_seconds: float | None = None,
    ):
        config = Default()
        model_config = get_veo_model_config(config.VEO_MODEL_VERSION)
        if not model_config:
            raise GenerationError(
                f"Unsupported VEO model version: {config.VEO_MODEL_VERSION}"
            )
        self.model_config = model_config
        self.prompt = VIDEO_WALKTHROUGH_PROMPT.format(prompt=prompt)
        self.reporter = reporter
        self.poll_interval_seconds = (
            config.VIDEO_POLL_INTERVAL_SECONDS
            if poll_interval_seconds is None
            else poll_interval_seconds
        )
        self.api_key = config.GEMINI_API_KEY
        self.state: VideoJobState | None = None
        self.operation = None
        self.ticks = 0

    def _transition(self, new_state: VideoJobState):
        previous = self.state.value if self.state else "new"
        logger.info(f"Video job: {previous} -> {new_state.value}")
        self.state = new_state

    async def submit(self):
        self.reporter.report(
            VIDEO_STAGE, "Starting video generation... this may take a few minutes."
        )
        try:
            self.operation = await gemini.get_client().aio.models.generate_videos(
                model=self.model_config.model_name,
                prompt=self.prompt,
                config=types.GenerateVideosConfig(
                    number_of_videos=self.model_config.default_samples
                ),
            )
        except Exception as e:
            raise GenerationError(f"Video generation request failed: {e}") from e
        self._transition(VideoJobState.SUBMITTED)

    async def poll_once(self):
        """Advances SUBMITTED/POLLING by one tick, or moves to DONE."""
        if self.operation.done:
            self._transition(VideoJobState.DONE)
            return
        if self.state != VideoJobState.POLLING:
            self._transition(VideoJobState.POLLING)
        self.reporter.report(
            VIDEO_STAGE,
            VIDEO_PROGRESS_MESSAGES[self.ticks % len(VIDEO_PROGRESS_MESSAGES)],
        )
        self.ticks += 1
        await asyncio.sleep(self.poll_interval_seconds)
        try:
            self.operation = await gemini.get_client().aio.operations.get(self.operation)
        except Exception as e:
            raise GenerationError(f"Polling the video operation failed: {e}") from e
        logger.info(f"Operation in progress: {self.operation.name}")

    def _generated_video(self) -> types.Video:
        if self.operation.error:
            raise VideoOperationError(f"API Error: {self.operation.error}")
        response = self.operation.response
        videos = response.generated_videos if response else None
        video = videos[0].video if videos else None
        if video is None or not (video.uri or video.video_bytes):
            raise VideoOperationError(
                "Video generation failed to produce a download link."
            )
        return video

    def _download(self, uri: str) -> bytes:
        if not uri.startswith("https://"):
            raise VideoOperationError(f"Cannot download video from {uri}")
        params = {"key": self.api_key} if self.api_key else None
        response = requests.get(uri, params=params, timeout=DOWNLOAD_TIMEOUT_SECONDS)
        response.raise_for_status()
        return response.content

    async def fetch(self, video: types.Video) -> bytes:
        if video.video_bytes:
            return video.video_bytes
        try:
            return await asyncio.to_thread(self._download, video.uri)
        except requests.RequestException as e:
            raise VideoOperationError(f"Downloading the generated video failed: {e}") from e

    async def run(self) -> bytes:
        """Runs the job to completion and returns the MP4 bytes."""
        try:
            async with track_model_call_async(self.model_config.model_name):
                await self.submit()
                while self.state in (VideoJobState.SUBMITTED, VideoJobState.POLLING):
                    await self.poll_once()
                self.reporter.report(VIDEO_STAGE, "Video generation complete!")
                video = self._generated_video()
            return await self.fetch(video)
        except Exception:
            self._transition(VideoJobState.FAILED)
            raise
