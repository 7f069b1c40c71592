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


"""Hosts the Mesop UI behind FastAPI and serves session media under /media."""

import logging
import os

import mesop as me
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.wsgi import WSGIMiddleware
from fastapi.staticfiles import StaticFiles

from common.analytics import get_logger
from common.error_handling import UnknownHandlerIdFilter
from config.default import Default

# Registers the page with Mesop.
import pages.dream_home  # noqa: F401  pylint: disable=unused-import

config = Default()
logger = get_logger(__name__)

logging.getLogger().addFilter(UnknownHandlerIdFilter())
logging.getLogger("mesop").addFilter(UnknownHandlerIdFilter())

os.makedirs(config.MEDIA_DIR, exist_ok=True)

app = FastAPI()
app.mount(
    config.MEDIA_URL_PREFIX,
    StaticFiles(directory=config.MEDIA_DIR),
    name="media",
)
app.mount(
    "/",
    WSGIMiddleware(
        me.create_wsgi_app(debug_mode=os.environ.get("DEBUG_MODE", "") == "true")
    ),
)


if __name__ == "__main__":
    logger.info(f"Starting DreamNest Studio ({config.APP_ENV}) on port {config.PORT}")
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=config.PORT,
        reload=config.APP_ENV == "local",
        reload_includes=["*.py"],
        timeout_graceful_shutdown=0,
    )
