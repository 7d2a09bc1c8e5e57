"""Stage: build the normalized EssayInput and TopicInput."""

import logging

from wenheng.schemas.grading import EssayInput, TopicInput
from wenheng.services.pipeline.base import PipelineContext

logger = logging.getLogger(__name__)


class InputBuildStage:
    name = "input_build"

    def should_run(self, ctx: PipelineContext) -> bool:
        return True

    async def execute(self, ctx: PipelineContext) -> PipelineContext:
        sub = ctx.submission

        if sub.essay_text.strip():
            ctx.essay = EssayInput.from_text(sub.essay_text)
        elif ctx.essay_document is not None:
            ctx.essay = EssayInput.from_text(ctx.essay_document.text)

        if sub.topic_text.strip():
            ctx.topic = TopicInput(text=sub.topic_text.strip())
        elif sub.topic_document is not None:
            # 题目文件只做展示，不解析内容
            ctx.topic = TopicInput(document_name=sub.topic_document.filename or None)

        if ctx.essay is not None:
            logger.info(
                "Essay input: %d chars, %d paragraphs",
                ctx.essay.char_count,
                ctx.essay.paragraph_count,
            )
        return ctx
