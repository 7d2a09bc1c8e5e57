"""Wenheng schemas."""

from wenheng.schemas.extraction import (
    IMAGE_TEXT_SENTINEL,
    ExtractedDocument,
    ExtractionStatus,
    PageImage,
    PageText,
)
from wenheng.schemas.grading import EssayInput, ExamType, GradeResult, TopicInput

__all__ = [
    "IMAGE_TEXT_SENTINEL",
    "EssayInput",
    "ExamType",
    "ExtractedDocument",
    "ExtractionStatus",
    "GradeResult",
    "PageImage",
    "PageText",
    "TopicInput",
]
