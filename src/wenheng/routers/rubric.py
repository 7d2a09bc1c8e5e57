from fastapi import APIRouter

from wenheng.config import settings
from wenheng.schemas.grading import (
    ExamType,
    ExamTypeSchema,
    RubricRowSchema,
    RubricTableResponse,
)
from wenheng.schemas.health import HealthResponse
from wenheng.services.rubrics import ladder_for

router = APIRouter(prefix="/api/v1", tags=["rubric"])


@router.get("/exam-types", response_model=list[ExamTypeSchema])
async def list_exam_types() -> list[ExamTypeSchema]:
    """List the supported exam types with their display labels."""
    return [ExamTypeSchema(value=t, label=t.label) for t in ExamType]


@router.get("/rubrics/{exam_type}", response_model=RubricTableResponse)
async def get_rubric(exam_type: ExamType) -> RubricTableResponse:
    """Return the grading ladder for an exam type, top row first."""
    return RubricTableResponse(
        exam_type=exam_type,
        exam_type_label=exam_type.label,
        rows=[
            RubricRowSchema(
                grade=row.grade,
                min_chars=row.min_chars,
                min_paragraphs=row.min_paragraphs,
                score=row.score_for(exam_type),
                remarks=dict(row.remarks),
            )
            for row in ladder_for(exam_type)
        ],
    )


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", version=settings.app_version)
