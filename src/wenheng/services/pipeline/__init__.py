"""Grading service facade.

Validates the submitted form state, then delegates to a Stage-based
orchestrator: essay extraction (uploads only) -> input build -> grade.

Author: afu
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from wenheng.exceptions import MissingInputError
from wenheng.schemas.extraction import ExtractedDocument
from wenheng.schemas.grading import GradeResult
from wenheng.services.extractor import ExtractorService
from wenheng.services.pipeline.base import (
    GradeSubmission,
    PipelineContext,
    UploadedDocument,
)
from wenheng.services.pipeline.orchestrator import PipelineOrchestrator
from wenheng.services.pipeline.stages import (
    EssayExtractStage,
    GradeStage,
    InputBuildStage,
)

logger = logging.getLogger(__name__)

__all__ = [
    "GradeOutcome",
    "GradeSubmission",
    "GradingService",
    "UploadedDocument",
]


@dataclass
class GradeOutcome:
    """Output of the grading pipeline."""

    result: GradeResult
    essay_document: ExtractedDocument | None = None
    processing_time_ms: float = 0.0
    stage_times_ms: dict[str, float] = field(default_factory=dict)


class GradingService:
    """Facade: each submission runs through its own PipelineContext."""

    def __init__(self, extractor: ExtractorService) -> None:
        self._extractor = extractor
        self._pipeline = (
            PipelineOrchestrator()
            .register(EssayExtractStage(extractor))
            .register(InputBuildStage())
            .register(GradeStage())
        )

    @staticmethod
    def validate(submission: GradeSubmission) -> None:
        """Check required fields before any extraction happens."""
        if not submission.topic_text.strip() and submission.topic_document is None:
            raise MissingInputError("請輸入作文題目")
        if not submission.essay_text.strip() and submission.essay_document is None:
            raise MissingInputError("請輸入學生作文內容")

    async def grade_submission(self, submission: GradeSubmission) -> GradeOutcome:
        """Validate, extract (if needed) and grade a single submission."""
        self.validate(submission)
        logger.info("Grading submission: exam_type=%s", submission.exam_type)
        start = time.perf_counter()

        ctx = await self._pipeline.run(PipelineContext(submission=submission))
        assert ctx.result is not None

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "Graded %s essay as %s (%d points) in %.0fms",
            submission.exam_type,
            ctx.result.grade,
            ctx.result.score,
            elapsed_ms,
        )
        return GradeOutcome(
            result=ctx.result,
            essay_document=ctx.essay_document,
            processing_time_ms=round(elapsed_ms, 2),
            stage_times_ms=dict(ctx.processing_times),
        )

    async def extract_preview(self, upload: UploadedDocument) -> ExtractedDocument:
        """Extract a document for preview only; no grading."""
        return await self._extractor.extract(upload.data, upload.mime_type, upload.filename)
