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


from common.analytics import get_logger
from common.status_reporter import StatusReporter
from common.storage import store_media
from common.utils import now_ms
from models.veo import VIDEO_STAGE, VideoGenerationJob
from services.rate_limiter import RateLimiter

logger = get_logger(__name__)


async def generate_walkthrough_video(
    prompt: str, reporter: StatusReporter, rate_limiter: RateLimiter
) -> str | None:
    """Generates the walkthrough video unless the hourly limit is active.

    Returns:
        The local media URL of the video, or None when generation was skipped.
        A skip is a normal outcome, not an error.
    """
    if not rate_limiter.try_acquire():
        minutes_remaining = rate_limiter.minutes_remaining()
        logger.info(f"Video generation skipped, {minutes_remaining} minutes of cooldown left.")
        reporter.report(
            VIDEO_STAGE,
            f"Skipped: Hourly limit active. Try again in {minutes_remaining} mins.",
        )
        return None

    job = VideoGenerationJob(prompt, reporter)
    video_bytes = await job.run()
    video_url = store_media("walkthrough_videos", "walkthrough.mp4", video_bytes)
    rate_limiter.record_success(now_ms())
    logger.info(f"Walkthrough video stored at {video_url}")
    return video_url
