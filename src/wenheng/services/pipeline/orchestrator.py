"""Pipeline orchestrator: runs stages sequentially and records their timing."""

import logging
import time

from wenheng.services.pipeline.base import PipelineContext, Stage

logger = logging.getLogger(__name__)


class PipelineOrchestrator:
    """Runs a sequence of Stage instances, skipping those where should_run is False."""

    def __init__(self) -> None:
        self._stages: list[Stage] = []

    def register(self, stage: Stage) -> "PipelineOrchestrator":
        self._stages.append(stage)
        return self

    async def run(self, ctx: PipelineContext) -> PipelineContext:
        total = len(self._stages)

        for index, stage in enumerate(self._stages, start=1):
            if not stage.should_run(ctx):
                logger.debug("Stage %s skipped (should_run=False)", stage.name)
                continue

            start = time.perf_counter()
            ctx = await stage.execute(ctx)
            elapsed = (time.perf_counter() - start) * 1000
            ctx.processing_times[stage.name] = round(elapsed, 2)

            logger.info("Stage [%d/%d] %s completed in %.0fms", index, total, stage.name, elapsed)

        return ctx
