from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.responses import HTMLResponse, PlainTextResponse

from wenheng.config import settings
from wenheng.dependencies import get_grading_service
from wenheng.exceptions import MissingInputError, UnsupportedFormatError
from wenheng.schemas.extraction import ExtractionResponse
from wenheng.schemas.grading import ExamType, GradeResponse
from wenheng.services.pipeline import GradeOutcome, GradeSubmission, GradingService
from wenheng.services.renderer import render_html, render_text
from wenheng.utils.request import read_upload

router = APIRouter(prefix="/api/v1", tags=["grading"])


async def get_submission(
    exam_type: ExamType = Form(...),
    topic: str = Form(default=""),
    content: str = Form(default=""),
    topic_file: UploadFile | None = File(default=None),
    content_file: UploadFile | None = File(default=None),
) -> GradeSubmission:
    """Collect the grading form into a GradeSubmission."""
    return GradeSubmission(
        exam_type=exam_type,
        topic_text=topic,
        topic_document=await read_upload(topic_file, settings.max_upload_size_bytes),
        essay_text=content,
        essay_document=await read_upload(content_file, settings.max_upload_size_bytes),
    )


async def _grade(service: GradingService, submission: GradeSubmission) -> GradeOutcome:
    try:
        return await service.grade_submission(submission)
    except MissingInputError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except UnsupportedFormatError as e:
        raise HTTPException(status_code=415, detail=str(e))


@router.post("/grade", response_model=GradeResponse)
async def grade_essay(
    submission: GradeSubmission = Depends(get_submission),
    service: GradingService = Depends(get_grading_service),
) -> GradeResponse:
    """Grade a typed or uploaded essay against the selected exam rubric."""
    outcome = await _grade(service, submission)
    return GradeResponse(
        result=outcome.result,
        processing_time_ms=outcome.processing_time_ms,
        stage_times_ms=outcome.stage_times_ms,
    )


@router.post("/grade/report", response_class=HTMLResponse)
async def grade_essay_report(
    submission: GradeSubmission = Depends(get_submission),
    service: GradingService = Depends(get_grading_service),
) -> HTMLResponse:
    """Grade an essay and return the rendered HTML report fragment."""
    outcome = await _grade(service, submission)
    return HTMLResponse(render_html(outcome.result))


@router.post("/grade/text", response_class=PlainTextResponse)
async def grade_essay_text(
    submission: GradeSubmission = Depends(get_submission),
    service: GradingService = Depends(get_grading_service),
) -> PlainTextResponse:
    """Grade an essay and return the plain-text summary (for copying)."""
    outcome = await _grade(service, submission)
    return PlainTextResponse(render_text(outcome.result))


@router.post("/extract", response_model=ExtractionResponse)
async def extract_document(
    file: UploadFile = File(...),
    service: GradingService = Depends(get_grading_service),
) -> ExtractionResponse:
    """Extract page text (or preview images) from an uploaded document."""
    upload = await read_upload(file, settings.max_upload_size_bytes)
    if upload is None:
        raise HTTPException(status_code=422, detail="File must not be empty")
    doc = await service.extract_preview(upload)
    return ExtractionResponse.from_document(doc)
