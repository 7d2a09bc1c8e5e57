"""Render a GradeResult as an HTML report fragment or plain text."""

from html import escape

from wenheng.schemas.grading import GradeResult
from wenheng.services.rubrics import DISCLAIMER, IMPROVEMENT_SUGGESTIONS


def render_html(result: GradeResult) -> str:
    """HTML fragment for the result panel. All user-supplied text is escaped."""
    dimension_rows = "".join(
        f"<tr><td><strong>{escape(name)}</strong></td><td>{escape(remark)}</td></tr>"
        for name, remark in result.dimensions.items()
    )
    suggestions = "".join(f"<li>{escape(s)}</li>" for s in IMPROVEMENT_SUGGESTIONS)

    return (
        '<section class="grade-report">'
        "<h4>📊 基本資訊</h4>"
        "<table>"
        f"<tr><th>評分標準</th><td>{escape(result.exam_type_label)}</td></tr>"
        f"<tr><th>作文題目</th><td>{escape(result.topic)}</td></tr>"
        f"<tr><th>字數統計</th><td>{result.char_count} 字</td></tr>"
        f"<tr><th>段落數</th><td>{result.paragraph_count} 段</td></tr>"
        "</table>"
        "<h4>📝 四大面向評分</h4>"
        "<table>"
        "<thead><tr><th>評分面向</th><th>評語</th></tr></thead>"
        f"<tbody>{dimension_rows}</tbody>"
        "</table>"
        "<h4>🏆 評分結果</h4>"
        '<div class="grade-summary">'
        f'<div class="grade-label">{escape(result.grade)}</div>'
        f'<div class="grade-score">{result.score} 分</div>'
        "</div>"
        "<h4>💡 改進建議</h4>"
        f'<ul class="grade-suggestions">{suggestions}</ul>'
        f'<div class="grade-disclaimer"><strong>⚠️ 注意：</strong>{escape(DISCLAIMER)}</div>'
        "</section>"
    )


def render_text(result: GradeResult) -> str:
    """Plain-text version used for copying the result to the clipboard."""
    lines = [
        "基本資訊",
        f"評分標準\t{result.exam_type_label}",
        f"作文題目\t{result.topic}",
        f"字數統計\t{result.char_count} 字",
        f"段落數\t{result.paragraph_count} 段",
        "",
        "四大面向評分",
    ]
    lines.extend(f"{name}\t{remark}" for name, remark in result.dimensions.items())
    lines += [
        "",
        "評分結果",
        result.grade,
        f"{result.score} 分",
        "",
        "改進建議",
    ]
    lines.extend(f"- {s}" for s in IMPROVEMENT_SUGGESTIONS)
    lines += ["", f"注意：{DISCLAIMER}"]
    return "\n".join(lines)
