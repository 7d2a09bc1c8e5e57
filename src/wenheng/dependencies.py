from fastapi import Request

from wenheng.services.pipeline import GradingService


def get_grading_service(request: Request) -> GradingService:
    """Retrieve the GradingService singleton from app state."""
    return request.app.state.grading
