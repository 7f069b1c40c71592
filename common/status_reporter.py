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


from typing import Callable, Optional

from common.analytics import get_logger
from models.design import MAX_STATUS_MESSAGES, GenerationStatus

logger = get_logger(__name__)


class StatusReporter:
    """Keeps the stage label and last few progress messages of a generation run.

    Each report replaces the stage, appends the message, drops anything older
    than the last MAX_STATUS_MESSAGES and hands a copy to the observer.
    """

    def __init__(self, on_update: Optional[Callable[[GenerationStatus], None]] = None):
        self.on_update = on_update
        self._stage = ""
        self._messages: list[str] = []

    @property
    def status(self) -> GenerationStatus:
        return GenerationStatus(stage=self._stage, messages=list(self._messages))

    def report(self, stage: str, message: str) -> None:
        self._stage = stage
        self._messages = (self._messages + [message])[-MAX_STATUS_MESSAGES:]
        logger.info(f"[{stage}] {message}")
        if self.on_update:
            self.on_update(self.status)

    def reset(self) -> None:
        self._stage = ""
        self._messages = []
        if self.on_update:
            self.on_update(self.status)
