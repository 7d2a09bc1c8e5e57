"""Stage: run the deterministic grader."""

from wenheng.services.grader import grade
from wenheng.services.pipeline.base import PipelineContext


class GradeStage:
    name = "grade"

    def should_run(self, ctx: PipelineContext) -> bool:
        return ctx.essay is not None

    async def execute(self, ctx: PipelineContext) -> PipelineContext:
        assert ctx.essay is not None
        ctx.result = grade(ctx.submission.exam_type, ctx.essay, ctx.topic)
        return ctx
