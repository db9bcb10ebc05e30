# aushadh_ai/services/llm/json_extract.py
import json
import re
from typing import Any, Dict, Optional

_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)


class ParseError(ValueError):
    pass


def _loads_object(text: str) -> Optional[Dict[str, Any]]:
    try:
        parsed = json.loads(text)
    except (ValueError, RecursionError):
        return None
    return parsed if isinstance(parsed, dict) else None


def extract_json(text: str) -> Dict[str, Any]:
    """Parse a JSON object even if the model wraps it in code fences or extra text."""
    cleaned = _FENCE_RE.sub("", text or "").strip()

    parsed = _loads_object(cleaned)
    if parsed is not None:
        return parsed

    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start != -1 and end != -1 and end > start:
        parsed = _loads_object(cleaned[start : end + 1])
        if parsed is not None:
            return parsed

    raise ParseError(f"No JSON object found in model response: {cleaned[:200]}...")
