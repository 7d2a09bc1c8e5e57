"""作文评分阶梯表

两套阶梯：会考（六级分制，示范只用到 2-5 级分）与学测（三等六级制）。
自上而下匹配，首个满足字数与段落门槛的等级生效。每个等级附带固定的四面向评语。

Author: afu
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from wenheng.schemas.grading import ExamType


@dataclass(frozen=True)
class RubricRow:
    grade: str
    min_chars: int
    min_paragraphs: int
    # exam_type -> score；未列出的考试类型使用 default_score
    default_score: int
    remarks: Mapping[str, str]
    scores: Mapping[ExamType, int] = field(default_factory=lambda: MappingProxyType({}))

    def matches(self, char_count: int, paragraph_count: int) -> bool:
        return char_count >= self.min_chars and paragraph_count >= self.min_paragraphs

    def score_for(self, exam_type: ExamType) -> int:
        return self.scores.get(exam_type, self.default_score)


CAP_DIMENSIONS = ("立意取材", "結構組織", "遣詞造句", "錯別字格式標點")
GSAT_DIMENSIONS = ("立意取材", "組織結構", "遣詞造句", "標點錯字")


def _cap_remarks(*texts: str) -> Mapping[str, str]:
    return MappingProxyType(dict(zip(CAP_DIMENSIONS, texts, strict=True)))


def _gsat_remarks(*texts: str) -> Mapping[str, str]:
    return MappingProxyType(dict(zip(GSAT_DIMENSIONS, texts, strict=True)))


def _emotional(score: int) -> Mapping[ExamType, int]:
    return MappingProxyType({ExamType.GSAT_EMOTIONAL: score})


# 会考级分标签沿用中文 "N 級分"，即 Level N，分数与级别数相同
CAP_LADDER: tuple[RubricRow, ...] = (
    RubricRow(
        grade="5 級分",
        min_chars=600,
        min_paragraphs=4,
        default_score=5,
        remarks=_cap_remarks(
            "能適當統整運用材料，闡述主旨",
            "結構完整，偶有轉折不流暢",
            "能正確使用語詞，文句通順",
            "少有錯誤",
        ),
    ),
    RubricRow(
        grade="4 級分",
        min_chars=400,
        min_paragraphs=3,
        default_score=4,
        remarks=_cap_remarks(
            "尚能統整運用材料說明主旨",
            "大致完整，偶有不連貫",
            "文意尚清楚，有冗詞贅句",
            "有一些錯誤",
        ),
    ),
    RubricRow(
        grade="3 級分",
        min_chars=200,
        min_paragraphs=0,
        default_score=3,
        remarks=_cap_remarks(
            "材料運用不甚適當",
            "結構鬆散",
            "用詞不太恰當",
            "有些錯誤造成理解困難",
        ),
    ),
    RubricRow(
        grade="2 級分",
        min_chars=0,
        min_paragraphs=0,
        default_score=2,
        remarks=_cap_remarks(
            "發展有限",
            "結構不完整",
            "遣詞造句常有錯誤",
            "錯別字頗多",
        ),
    ),
)

GSAT_LADDER: tuple[RubricRow, ...] = (
    RubricRow(
        grade="A",
        min_chars=500,
        min_paragraphs=4,
        default_score=17,
        scores=_emotional(20),
        remarks=_gsat_remarks(
            "8/10 - 觀點明確，材料適切",
            "6/7.5 - 結構完整，脈絡分明",
            "5/6.25 - 文辭流暢",
            "1/1.25 - 少有錯誤",
        ),
    ),
    RubricRow(
        grade="B+",
        min_chars=300,
        min_paragraphs=3,
        default_score=13,
        scores=_emotional(15),
        remarks=_gsat_remarks(
            "6/10 - 論述尚稱適當",
            "4.5/7.5 - 結構大致完整",
            "4/6.25 - 文辭通順",
            "0.5/1.25 - 有些錯誤",
        ),
    ),
    RubricRow(
        grade="B",
        min_chars=150,
        min_paragraphs=0,
        default_score=10,
        scores=_emotional(12),
        remarks=_gsat_remarks(
            "4/10 - 論述平平",
            "3/7.5 - 結構尚可",
            "2.5/6.25 - 文辭平順",
            "0.5/1.25 - 有些錯誤",
        ),
    ),
    RubricRow(
        grade="C+",
        min_chars=0,
        min_paragraphs=0,
        default_score=6,
        scores=_emotional(8),
        remarks=_gsat_remarks(
            "2/10 - 發展不足",
            "2/7.5 - 結構鬆散",
            "1.5/6.25 - 文辭欠通順",
            "0.5/1.25 - 錯誤較多",
        ),
    ),
)

_LADDERS: dict[ExamType, tuple[RubricRow, ...]] = {
    ExamType.CAP: CAP_LADDER,
    ExamType.GSAT_INTELLECTUAL: GSAT_LADDER,
    ExamType.GSAT_EMOTIONAL: GSAT_LADDER,
}


def ladder_for(exam_type: ExamType) -> tuple[RubricRow, ...]:
    return _LADDERS[exam_type]


# 结果页固定附上的改进建议与免责声明
IMPROVEMENT_SUGGESTIONS: tuple[str, ...] = (
    "建議增加文章篇幅，充實內容",
    "注意段落之間的銜接與過渡",
    "善用具體事例支撐論點或增添情感",
    "檢查錯別字與標點符號使用",
)

DISCLAIMER = "此為系統初步分析結果，僅供參考。實際評分請以專業教師判斷為準。"
