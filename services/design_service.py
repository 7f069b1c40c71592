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


"""Orchestrates every generation step of a design package.

The order below is what the progress panel narrates, so it is fixed:
script and shopping list together, then renderings, then the 2D plan, the 3D
plan and finally the video. Steps inside a group run concurrently; groups run
one after another. The first failure ends the run.
"""

import time

from common.analytics import elapsed_ms, get_logger, log_design_run
from common.error_handling import DesignGenerationError, GenerationError
from common.status_reporter import StatusReporter
from common.utils import gather_or_cancel
from models.design import DesignPackage
from models.floor_plans import generate_2d_plan, generate_3d_plan
from models.gemini import generate_shopping_list, generate_walkthrough_script
from models.house import HouseSpec
from models.imagen import generate_house_images
from models.prompts import build_prompt
from services.rate_limiter import RateLimiter, get_video_rate_limiter
from services.veo_service import generate_walkthrough_video

logger = get_logger(__name__)


async def _run_pipeline(
    spec: HouseSpec, reporter: StatusReporter, rate_limiter: RateLimiter
) -> DesignPackage:
    base_prompt = build_prompt(spec)
    reporter.report("Initialization", "Crafting the perfect design brief...")

    reporter.report("Content Generation", "Generating textual descriptions...")
    walkthrough_script, shopping_list = await gather_or_cancel(
        generate_walkthrough_script(base_prompt),
        generate_shopping_list(base_prompt),
    )
    reporter.report("Content Generation", "Descriptions and shopping list are ready!")

    reporter.report("Image Generation", "Generating photorealistic images...")
    images = await generate_house_images(base_prompt)
    reporter.report("Image Generation", "Images generated successfully!")

    reporter.report("Floor Plan Generation", "Designing the 2D blueprint...")
    plan_2d = await generate_2d_plan(base_prompt)
    reporter.report("Floor Plan Generation", "Architecting the 3D floor plan...")
    plan_3d = await generate_3d_plan(base_prompt)
    reporter.report("Floor Plan Generation", "Floor plans are complete!")

    video_url = await generate_walkthrough_video(base_prompt, reporter, rate_limiter)

    reporter.report("Finalizing", "Assembling your complete design package...")
    return DesignPackage(
        images=images,
        walkthrough_script=walkthrough_script,
        shopping_list=shopping_list,
        plan_2d=plan_2d,
        plan_3d=plan_3d,
        video_url=video_url,
    )


async def generate_design_package(
    spec: HouseSpec,
    reporter: StatusReporter,
    rate_limiter: RateLimiter | None = None,
) -> DesignPackage:
    """Runs one full generation and returns the package.

    Raises:
        DesignGenerationError: when any step fails. Nothing generated before the
            failure is returned and nothing is retried.
    """
    if rate_limiter is None:
        rate_limiter = get_video_rate_limiter()
    logger.info(f"Starting design generation: {spec.model_dump_json()}")
    start = time.perf_counter()
    try:
        package = await _run_pipeline(spec, reporter, rate_limiter)
    except GenerationError as e:
        logger.error(f"Design generation failed: {e.message}")
        log_design_run("failure", elapsed_ms(start), error=e.message)
        raise DesignGenerationError(e.message, cause=e) from e
    except Exception as e:
        logger.exception("Unexpected error during design generation")
        log_design_run("failure", elapsed_ms(start), error=str(e))
        raise DesignGenerationError(str(e) or type(e).__name__, cause=e) from e
    log_design_run("success", elapsed_ms(start), video_included=package.video_url is not None)
    return package
