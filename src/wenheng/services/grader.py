"""Deterministic essay grader.

Only the essay length and paragraph count are inspected; every remark is
canned text attached to the ladder row that matched.
"""

import logging

from wenheng.schemas.grading import EssayInput, ExamType, GradeResult, TopicInput
from wenheng.services.rubrics import RubricRow, ladder_for

logger = logging.getLogger(__name__)


def match_row(exam_type: ExamType, char_count: int, paragraph_count: int) -> RubricRow:
    """Return the first ladder row whose thresholds the essay meets."""
    ladder = ladder_for(exam_type)
    for row in ladder:
        if row.matches(char_count, paragraph_count):
            return row
    # 最后一级门槛为 0，理论上不会走到这里
    return ladder[-1]


def grade(
    exam_type: ExamType,
    essay: EssayInput,
    topic: TopicInput | None = None,
) -> GradeResult:
    """Grade an essay. Pure and total over (exam_type, char_count, paragraph_count)."""
    row = match_row(exam_type, essay.char_count, essay.paragraph_count)
    logger.debug(
        "Graded %s essay: chars=%d paragraphs=%d -> %s",
        exam_type,
        essay.char_count,
        essay.paragraph_count,
        row.grade,
    )
    return GradeResult(
        exam_type=exam_type,
        exam_type_label=exam_type.label,
        topic=topic.descriptor if topic else "",
        char_count=essay.char_count,
        paragraph_count=essay.paragraph_count,
        grade=row.grade,
        score=row.score_for(exam_type),
        dimensions=dict(row.remarks),
    )
