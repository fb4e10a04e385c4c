import re

MAX_DOCUMENT_CHARS = 20000

_HYPHENATED_BREAK = re.compile(r"-\n")
_TRAILING_SPACE = re.compile(r"[ \t]+\n")
_BLANK_RUN = re.compile(r"\n{3,}")
_SPACE_RUN = re.compile(r"[ \t]{2,}")


def normalize_text(text: str) -> str:
    """Clean PDF-extracted text so the prompt spends fewer tokens on layout."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _HYPHENATED_BREAK.sub("", text)
    text = _TRAILING_SPACE.sub("\n", text)
    text = _BLANK_RUN.sub("\n\n", text)
    text = _SPACE_RUN.sub(" ", text)
    return text.strip()


def truncate(text: str, max_chars: int = MAX_DOCUMENT_CHARS) -> str:
    return text[:max_chars]
