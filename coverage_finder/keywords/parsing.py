import json
import re
from typing import Any

from ..exceptions import KeywordParseError

MAX_KEYWORDS = 20
MALFORMED_KEYWORD = "Malformed keyword"

_CODE_FENCE = re.compile(r"^```[a-zA-Z]*\s*\n?(.*?)\n?```$", re.DOTALL)


def _keyword_from_item(item: Any) -> str:
    if isinstance(item, str):
        return item
    if isinstance(item, dict) and isinstance(item.get("keyword"), str):
        return item["keyword"]
    return MALFORMED_KEYWORD


def parse_keywords(text: str, limit: int = MAX_KEYWORDS) -> list[str]:
    """Read the model reply as a JSON array of keywords.

    Accepts plain strings or ``{"keyword": ...}`` objects; other items are
    kept as a placeholder so the list length still reflects the reply.
    """
    text = text.strip()
    fenced = _CODE_FENCE.match(text)
    if fenced:
        text = fenced.group(1).strip()

    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        raise KeywordParseError("Failed to parse OpenAI JSON. Try again.") from e
    if not isinstance(parsed, list):
        raise KeywordParseError("Failed to parse OpenAI JSON. Try again.")

    return [_keyword_from_item(item) for item in parsed[:limit]]
