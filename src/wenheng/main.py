import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wenheng.config import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

from wenheng.exceptions import WenhengError
from wenheng.routers import grading, rubric
from wenheng.services.extractor import ExtractorService
from wenheng.services.pipeline import GradingService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the stateless services once at startup."""
    logger.info("Starting Wenheng service ...")
    extractor = ExtractorService(settings)
    app.state.grading = GradingService(extractor)
    logger.info("Wenheng service ready.")
    yield
    logger.info("Shutting down Wenheng service ...")


app = FastAPI(
    title="Wenheng",
    description="Essay grading demo for GSAT / CAP writing rubrics",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(grading.router)
app.include_router(rubric.router)


@app.exception_handler(WenhengError)
async def wenheng_error_handler(request: Request, exc: WenhengError):
    return JSONResponse(status_code=500, content={"detail": str(exc)})
