import pytest
from pydantic import ValidationError

from conftest import make_essay
from wenheng.schemas.grading import EssayInput, ExamType, TopicInput
from wenheng.services.grader import grade, match_row
from wenheng.services.rubrics import CAP_DIMENSIONS, GSAT_DIMENSIONS


def _essay(chars: int, paragraphs: int) -> EssayInput:
    return EssayInput.from_text(make_essay(chars, paragraphs))


class TestCapLadder:
    @pytest.mark.parametrize(
        ("chars", "paragraphs", "expected_grade", "expected_score"),
        [
            (600, 4, "5 級分", 5),
            (1200, 8, "5 級分", 5),
            (600, 3, "4 級分", 4),
            (400, 3, "4 級分", 4),
            (599, 4, "4 級分", 4),
            (400, 2, "3 級分", 3),
            (200, 1, "3 級分", 3),
            (199, 1, "2 級分", 2),
            (10, 1, "2 級分", 2),
        ],
    )
    def test_thresholds(self, chars, paragraphs, expected_grade, expected_score):
        result = grade(ExamType.CAP, _essay(chars, paragraphs))
        assert result.grade == expected_grade
        assert result.score == expected_score

    def test_uses_cap_dimensions(self):
        result = grade(ExamType.CAP, _essay(650, 5))
        assert tuple(result.dimensions) == CAP_DIMENSIONS
        assert result.dimensions["立意取材"] == "能適當統整運用材料，闡述主旨"


class TestGsatLadder:
    @pytest.mark.parametrize(
        ("chars", "paragraphs", "grade_label", "intellectual", "emotional"),
        [
            (500, 4, "A", 17, 20),
            (500, 3, "B+", 13, 15),
            (300, 3, "B+", 13, 15),
            (300, 2, "B", 10, 12),
            (150, 1, "B", 10, 12),
            (149, 1, "C+", 6, 8),
        ],
    )
    def test_thresholds(self, chars, paragraphs, grade_label, intellectual, emotional):
        essay = _essay(chars, paragraphs)

        r1 = grade(ExamType.GSAT_INTELLECTUAL, essay)
        r2 = grade(ExamType.GSAT_EMOTIONAL, essay)

        assert r1.grade == r2.grade == grade_label
        assert r1.score == intellectual
        assert r2.score == emotional

    def test_both_gsat_types_share_dimension_keys(self):
        essay = _essay(320, 3)
        r1 = grade(ExamType.GSAT_INTELLECTUAL, essay)
        r2 = grade(ExamType.GSAT_EMOTIONAL, essay)
        assert tuple(r1.dimensions) == tuple(r2.dimensions) == GSAT_DIMENSIONS
        assert r1.dimensions == r2.dimensions


class TestGradeResult:
    def test_empty_essay_gets_lowest_row(self):
        result = grade(ExamType.GSAT_INTELLECTUAL, EssayInput.from_text(""))
        assert result.char_count == 0
        assert result.paragraph_count == 0
        assert result.grade == "C+"
        assert result.score == 6

    @pytest.mark.parametrize("exam_type", list(ExamType))
    def test_always_four_dimensions(self, exam_type):
        for chars, paragraphs in [(10, 1), (160, 1), (350, 3), (700, 5)]:
            result = grade(exam_type, _essay(chars, paragraphs))
            assert len(result.dimensions) == 4

    def test_is_deterministic(self):
        essay = _essay(320, 3)
        first = grade(ExamType.GSAT_INTELLECTUAL, essay)
        second = grade(ExamType.GSAT_INTELLECTUAL, essay)
        assert first == second
        assert list(first.dimensions.items()) == list(second.dimensions.items())

    def test_topic_is_display_only(self):
        essay = _essay(320, 3)
        with_topic = grade(ExamType.CAP, essay, TopicInput(text="我的志願"))
        without_topic = grade(ExamType.CAP, essay)
        assert with_topic.topic == "我的志願"
        assert without_topic.topic == ""
        assert with_topic.score == without_topic.score
        assert with_topic.dimensions == without_topic.dimensions

    def test_carries_exam_label_and_counts(self):
        result = grade(ExamType.GSAT_EMOTIONAL, _essay(140, 1))
        assert result.exam_type_label == "學測情意題"
        assert result.char_count == 140
        assert result.paragraph_count == 1

    def test_result_is_frozen(self):
        result = grade(ExamType.CAP, _essay(650, 5))
        with pytest.raises(ValidationError):
            result.score = 6

    def test_dimension_remarks_are_read_only(self):
        result = grade(ExamType.CAP, _essay(650, 5))

        with pytest.raises(TypeError):
            result.dimensions["立意取材"] = "改寫"
        with pytest.raises(TypeError):
            result.dimensions.pop("結構組織")
        with pytest.raises(TypeError):
            result.dimensions.update({"新面向": "x"})

        assert list(result.dimensions) == list(CAP_DIMENSIONS)
        assert result.dimensions["立意取材"] == "能適當統整運用材料，闡述主旨"

    def test_read_only_remarks_still_serialize(self):
        result = grade(ExamType.GSAT_INTELLECTUAL, _essay(320, 3))
        dumped = result.model_dump()
        assert list(dumped["dimensions"]) == list(GSAT_DIMENSIONS)
        assert "組織結構" in result.model_dump_json()


class TestMonotonicity:
    @pytest.mark.parametrize("exam_type", list(ExamType))
    def test_more_characters_never_lowers_score(self, exam_type):
        for paragraphs in range(1, 7):
            scores = [
                match_row(exam_type, chars, paragraphs).score_for(exam_type)
                for chars in range(0, 801, 10)
            ]
            assert scores == sorted(scores)

    @pytest.mark.parametrize("exam_type", list(ExamType))
    def test_more_paragraphs_never_lowers_score(self, exam_type):
        for chars in range(0, 801, 25):
            scores = [
                match_row(exam_type, chars, paragraphs).score_for(exam_type)
                for paragraphs in range(0, 10)
            ]
            assert scores == sorted(scores)


class TestEndToEndScenarios:
    def test_competency_essay_level_5(self):
        result = grade(ExamType.CAP, _essay(650, 5))
        assert result.grade == "5 級分"
        assert result.score == 5
        assert len(result.dimensions) == 4

    def test_emotional_short_essay(self):
        result = grade(ExamType.GSAT_EMOTIONAL, _essay(140, 1))
        assert result.grade == "C+"
        assert result.score == 8

    def test_intellectual_mid_essay(self):
        result = grade(ExamType.GSAT_INTELLECTUAL, _essay(320, 3))
        assert result.grade == "B+"
        assert result.score == 13
