"""Pipeline stages."""

from wenheng.services.pipeline.stages.essay_extract import EssayExtractStage
from wenheng.services.pipeline.stages.grade import GradeStage
from wenheng.services.pipeline.stages.input_build import InputBuildStage

__all__ = [
    "EssayExtractStage",
    "GradeStage",
    "InputBuildStage",
]
