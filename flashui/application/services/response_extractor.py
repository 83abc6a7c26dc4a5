"""Best-effort extraction of structured data from complete LLM responses."""

import json
import re
from typing import Any, Optional

_JSON_FENCE_RE = re.compile(r"```json([\s\S]*?)```")
_ARRAY_RE = re.compile(r"\[[\s\S]*\]")


def _try_parse(text: str) -> Optional[Any]:
    try:
        return json.loads(text)
    except (json.JSONDecodeError, TypeError):
        return None


def extract_json(text: Optional[str]) -> Optional[Any]:
    """
    Extract a JSON value from an LLM response that may carry commentary.

    Attempts, first success wins:
      1) Parse the whole text.
      2) Parse the body of a ```json fenced block.
      3) Parse the greedy span from the first '[' to the last ']'.

    Returns None when no structured value is found. A literal ``null``
    document is reported the same way.
    """
    if not text:
        return None

    value = _try_parse(text)
    if value is not None:
        return value

    fence = _JSON_FENCE_RE.search(text)
    if fence:
        value = _try_parse(fence.group(1))
        if value is not None:
            return value

    array = _ARRAY_RE.search(text)
    if array:
        return _try_parse(array.group(0))
    return None


def strip_code_fences(text: str) -> str:
    """Trim surrounding whitespace and a wrapping ```html / ``` fence."""
    cleaned = text.strip()
    if cleaned.startswith("```html"):
        cleaned = cleaned[len("```html") :].lstrip()
    if cleaned.startswith("```"):
        cleaned = cleaned[3:].lstrip()
    if cleaned.endswith("```"):
        cleaned = cleaned[:-3].rstrip()
    return cleaned
