# aushadh_ai/services/llm/sanitize.py
"""
Turn whatever the model put in a "string" field into plain display text.

The model is asked for strings but sometimes answers with an object
({"text": "..."}), a list, a number, or a JSON document encoded inside a
string. `sanitize` collapses all of these to one line of text and never
lets a structural dump or a failed stringification reach the UI.
"""
import json
import math
from typing import Any

from aushadh_ai.core.gemini_config import MAX_SANITIZE_DEPTH

# what a browser prints for String({}); the model copies it back sometimes
DEGENERATE_ARTIFACT = "[object Object]"

# keys models use when they wrap a scalar in an object
PRIORITY_KEYS = ("text", "value", "displayValue", "brand", "name", "message")

_MAX_NESTING = 50


def _number_text(value: Any) -> str:
    if isinstance(value, float):
        if not math.isfinite(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value)


def _sanitize(value: Any, depth: int, reparses: int) -> str:
    if value is None or depth > _MAX_NESTING:
        return ""

    if isinstance(value, str):
        trimmed = value.strip()
        if trimmed == DEGENERATE_ARTIFACT:
            return ""
        if trimmed.startswith(("{", "[")):
            if reparses >= MAX_SANITIZE_DEPTH:
                return ""
            try:
                parsed = json.loads(trimmed)
            except (ValueError, RecursionError):
                return trimmed
            return _sanitize(parsed, depth + 1, reparses + 1)
        return trimmed

    # bool first: it is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"

    if isinstance(value, (int, float)):
        return _number_text(value)

    if isinstance(value, (list, tuple)):
        parts = [_sanitize(v, depth + 1, reparses) for v in value]
        return ", ".join(p for p in parts if p)

    if isinstance(value, dict):
        for key in PRIORITY_KEYS:
            if value.get(key) is not None:
                return _sanitize(value[key], depth + 1, reparses)
        if len(value) == 1:
            only = next(iter(value.values()))
            return _sanitize(only, depth + 1, reparses)
        return ""

    try:
        text = str(value).strip()
    except Exception:
        return ""
    return "" if text == DEGENERATE_ARTIFACT else text


def sanitize(value: Any) -> str:
    """
    Return `value` as clean display text. Never raises.

    Joined list output can itself be valid JSON, so the result is fed back
    until it stops changing; if it never settles the answer is "".
    """
    text = _sanitize(value, 0, 0)
    for _ in range(MAX_SANITIZE_DEPTH):
        again = _sanitize(text, 0, 0)
        if again == text:
            return text
        text = again
    return ""
