import re

_PARAGRAPH_BREAK_RE = re.compile(r"\n\n+")


def normalize_text(text: str) -> str:
    """Unify line endings and strip surrounding whitespace."""
    if not text:
        return ""
    return text.replace("\r\n", "\n").replace("\r", "\n").strip()


def count_paragraphs(text: str) -> int:
    """Count non-blank runs separated by one or more blank lines."""
    if not text:
        return 0
    return sum(1 for p in _PARAGRAPH_BREAK_RE.split(text) if p.strip())


def join_tokens(tokens: list[str]) -> str:
    """Join page text tokens with single spaces, dropping empty ones."""
    return " ".join(t for t in tokens if t)
