"""Pipeline core abstractions: PipelineContext and Stage protocol."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from wenheng.schemas.extraction import ExtractedDocument
from wenheng.schemas.grading import EssayInput, ExamType, GradeResult, TopicInput


@dataclass(frozen=True)
class UploadedDocument:
    """Raw bytes of an uploaded file plus what the client declared about it."""

    data: bytes
    mime_type: str | None = None
    filename: str = ""


@dataclass(frozen=True)
class GradeSubmission:
    """Form state of a single grading request."""

    exam_type: ExamType
    topic_text: str = ""
    topic_document: UploadedDocument | None = None
    essay_text: str = ""
    essay_document: UploadedDocument | None = None


@dataclass
class PipelineContext:
    """Per-request data bus passed through all stages."""

    submission: GradeSubmission

    # Extraction output
    essay_document: ExtractedDocument | None = None

    # Normalized inputs
    essay: EssayInput | None = None
    topic: TopicInput | None = None

    # Grading output
    result: GradeResult | None = None

    # Timing (stage name -> ms)
    processing_times: dict[str, float] = field(default_factory=dict)


@runtime_checkable
class Stage(Protocol):
    """Protocol that all pipeline stages must implement."""

    name: str

    async def execute(self, ctx: PipelineContext) -> PipelineContext: ...

    def should_run(self, ctx: PipelineContext) -> bool: ...
