from enum import StrEnum
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, computed_field

from wenheng.utils.text import count_paragraphs, normalize_text


class ExamType(StrEnum):
    GSAT_INTELLECTUAL = "gsat-intellectual"
    GSAT_EMOTIONAL = "gsat-emotional"
    CAP = "cap"

    @property
    def label(self) -> str:
        return _EXAM_LABELS[self]


_EXAM_LABELS: dict[ExamType, str] = {
    ExamType.GSAT_INTELLECTUAL: "學測知性題",
    ExamType.GSAT_EMOTIONAL: "學測情意題",
    ExamType.CAP: "會考作文",
}


class EssayInput(BaseModel):
    """Normalized essay text with its derived length metrics."""

    model_config = ConfigDict(frozen=True)

    text: str

    @computed_field
    @property
    def char_count(self) -> int:
        return len(self.text)

    @computed_field
    @property
    def paragraph_count(self) -> int:
        return count_paragraphs(self.text)

    @classmethod
    def from_text(cls, raw: str) -> "EssayInput":
        return cls(text=normalize_text(raw))


class TopicInput(BaseModel):
    """Essay topic; only ever displayed, never scored."""

    model_config = ConfigDict(frozen=True)

    text: str = ""
    document_name: str | None = None

    @property
    def descriptor(self) -> str:
        if self.text:
            return self.text
        if self.document_name:
            return f"已上傳題目文件（{self.document_name}）"
        return "已上傳題目文件"


class RemarkMap(dict):
    """Read-only dimension -> remark mapping; keeps insertion (display) order."""

    def _readonly(self, *args, **kwargs):
        raise TypeError("rubric remarks are read-only")

    __setitem__ = __delitem__ = __ior__ = _readonly
    clear = pop = popitem = setdefault = update = _readonly

    def __reduce__(self):
        return (RemarkMap, (dict(self),))


class GradeResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    exam_type: ExamType
    exam_type_label: str
    topic: str = ""
    char_count: int
    paragraph_count: int
    grade: str
    score: int
    dimensions: Annotated[dict[str, str], AfterValidator(RemarkMap)] = Field(
        default_factory=RemarkMap
    )


class ExamTypeSchema(BaseModel):
    value: ExamType
    label: str


class RubricRowSchema(BaseModel):
    grade: str
    min_chars: int
    min_paragraphs: int
    score: int
    remarks: dict[str, str]


class RubricTableResponse(BaseModel):
    exam_type: ExamType
    exam_type_label: str
    rows: list[RubricRowSchema]


class GradeResponse(BaseModel):
    result: GradeResult
    processing_time_ms: float
    stage_times_ms: dict[str, float] = Field(default_factory=dict)
