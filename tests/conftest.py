from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from wenheng.config import Settings
from wenheng.services.extractor import ExtractorService
from wenheng.services.pipeline import GradingService


def make_essay(char_count: int, paragraph_count: int, fill: str = "文") -> str:
    """Build an essay of exactly ``char_count`` characters (separators included)."""
    separators = 2 * (paragraph_count - 1)
    body = char_count - separators
    assert body >= paragraph_count, "too many paragraphs for the requested length"
    base, extra = divmod(body, paragraph_count)
    paragraphs = [fill * (base + (1 if i < extra else 0)) for i in range(paragraph_count)]
    text = "\n\n".join(paragraphs)
    assert len(text) == char_count
    return text


@pytest.fixture
def settings() -> Settings:
    return Settings(render_zoom=1.5, max_upload_size_mb=1)


@pytest.fixture
def extractor(settings: Settings) -> ExtractorService:
    return ExtractorService(settings)


@pytest.fixture
def grading_service(extractor: ExtractorService) -> GradingService:
    return GradingService(extractor)


@pytest.fixture
def mock_grading() -> MagicMock:
    """Create a mocked GradingService for router tests."""
    service = MagicMock(spec=GradingService)
    service.grade_submission = AsyncMock()
    service.extract_preview = AsyncMock()
    return service


def _build_app(grading):
    from fastapi import FastAPI
    from wenheng.routers.grading import router as grading_router
    from wenheng.routers.rubric import router as rubric_router

    app = FastAPI()
    app.state.grading = grading
    app.include_router(grading_router)
    app.include_router(rubric_router)
    return app


@pytest.fixture
def client(mock_grading: MagicMock) -> TestClient:
    return TestClient(_build_app(mock_grading))


@pytest.fixture
def live_client(grading_service: GradingService) -> TestClient:
    """Router client backed by the real (stateless) services."""
    return TestClient(_build_app(grading_service))
