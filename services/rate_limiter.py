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


"""Hourly gate for video generation.

The gate is a single timestamp in the client key-value store. It is read once
before a run's video step and overwritten when a video completes, without any
locking: two overlapping runs can both pass the gate, and the last one to
finish wins the write.
"""

import datetime
import math
from typing import Callable

from common.analytics import get_logger
from common.storage import LAST_VIDEO_GENERATION_KEY, KeyValueStore, get_client_store
from common.utils import now_ms
from config.default import Default

logger = get_logger(__name__)


class RateLimiter:
    """Interface the orchestrator uses to decide whether a video may be generated."""

    def try_acquire(self) -> bool:
        raise NotImplementedError

    def minutes_remaining(self) -> int:
        raise NotImplementedError

    def record_success(self, completed_at_ms: int | None = None) -> None:
        raise NotImplementedError


class CooldownRateLimiter(RateLimiter):
    def __init__(
        self,
        store: KeyValueStore,
        cooldown: datetime.timedelta = datetime.timedelta(hours=1),
        key: str = LAST_VIDEO_GENERATION_KEY,
        clock: Callable[[], int] = now_ms,
    ):
        self.store = store
        self.cooldown_ms = int(cooldown.total_seconds() * 1000)
        self.key = key
        self.clock = clock

    def last_success_ms(self) -> int | None:
        raw = self.store.get_item(self.key)
        if raw is None:
            return None
        try:
            return int(raw)
        except ValueError:
            logger.warning(f"Ignoring malformed {self.key} value: {raw!r}")
            return None

    def _elapsed_ms(self) -> int | None:
        last = self.last_success_ms()
        if last is None:
            return None
        return self.clock() - last

    def try_acquire(self) -> bool:
        """True when no video completed within the cooldown window."""
        elapsed = self._elapsed_ms()
        return elapsed is None or elapsed >= self.cooldown_ms

    def minutes_remaining(self) -> int:
        elapsed = self._elapsed_ms()
        if elapsed is None or elapsed >= self.cooldown_ms:
            return 0
        return math.ceil((self.cooldown_ms - elapsed) / 60000)

    def record_success(self, completed_at_ms: int | None = None) -> None:
        timestamp = completed_at_ms if completed_at_ms is not None else self.clock()
        self.store.set_item(self.key, str(timestamp))
        logger.info(f"Recorded video generation at {timestamp}")


def get_video_rate_limiter() -> RateLimiter:
    """The default gate: one walkthrough video per cooldown window per install."""
    return CooldownRateLimiter(
        get_client_store(),
        cooldown=datetime.timedelta(minutes=Default().VIDEO_COOLDOWN_MINUTES),
    )
