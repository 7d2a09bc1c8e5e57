from wenheng.schemas.grading import EssayInput
from wenheng.utils.text import count_paragraphs, join_tokens, normalize_text


class TestNormalizeText:
    def test_empty(self):
        assert normalize_text("") == ""

    def test_strips_surrounding_whitespace(self):
        assert normalize_text("  \n作文\n  ") == "作文"

    def test_unifies_line_endings(self):
        assert normalize_text("一\r\n\r\n二\r三") == "一\n\n二\n三"


class TestCountParagraphs:
    def test_empty_text(self):
        assert count_paragraphs("") == 0

    def test_single_paragraph(self):
        assert count_paragraphs("一段文字") == 1

    def test_single_newline_does_not_split(self):
        assert count_paragraphs("第一行\n第二行") == 1

    def test_blank_lines_split(self):
        assert count_paragraphs("一\n\n二\n\n\n\n三") == 3

    def test_whitespace_only_runs_are_ignored(self):
        assert count_paragraphs("一\n\n   \n\n二") == 2


class TestJoinTokens:
    def test_single_space_separator(self):
        assert join_tokens(["春", "眠", "不覺曉"]) == "春 眠 不覺曉"

    def test_drops_empty_tokens(self):
        assert join_tokens(["a", "", "b"]) == "a b"

    def test_no_tokens(self):
        assert join_tokens([]) == ""


class TestEssayInput:
    def test_derived_counts(self):
        essay = EssayInput.from_text("  第一段\n\n第二段  ")
        assert essay.text == "第一段\n\n第二段"
        assert essay.char_count == 8
        assert essay.paragraph_count == 2
