"""Stage: extract essay text from an uploaded document.

Skipped when the essay was typed in directly.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wenheng.exceptions import MissingInputError, UnsupportedFormatError
from wenheng.schemas.extraction import ExtractionStatus
from wenheng.services.pipeline.base import PipelineContext

if TYPE_CHECKING:
    from wenheng.services.extractor import ExtractorService

logger = logging.getLogger(__name__)


class EssayExtractStage:
    name = "essay_extract"

    def __init__(self, extractor: ExtractorService) -> None:
        self._extractor = extractor

    def should_run(self, ctx: PipelineContext) -> bool:
        sub = ctx.submission
        return not sub.essay_text.strip() and sub.essay_document is not None

    async def execute(self, ctx: PipelineContext) -> PipelineContext:
        upload = ctx.submission.essay_document
        assert upload is not None

        doc = await self._extractor.extract(upload.data, upload.mime_type, upload.filename)
        ctx.essay_document = doc

        if doc.status == ExtractionStatus.UNSUPPORTED:
            raise UnsupportedFormatError(
                f"不支援的檔案格式：{upload.mime_type or upload.filename or '未知'}"
            )
        if not doc.analyzable:
            logger.info(
                "Essay document %s not analyzable (status=%s)", upload.filename, doc.status
            )
            raise MissingInputError("無法從檔案擷取作文內容")
        return ctx
