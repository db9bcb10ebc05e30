import logging
from typing import Any, Dict, List, Optional

import requests

from aushadh_ai.core.gemini_config import GEMINI_API_BASE, GEMINI_TIMEOUT_S

logger = logging.getLogger(__name__)

class GeminiError(RuntimeError):
    def __init__(self, message: str = "", status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

    @property
    def is_auth_error(self) -> bool:
        return self.status_code in (401, 403)

class NetworkError(GeminiError):
    """The Gemini endpoint could not be reached or did not answer in time."""

def text_part(text: str) -> Dict[str, Any]:
    return {"text": text}

def user_content(*parts: Dict[str, Any]) -> List[Dict[str, Any]]:
    return [{"role": "user", "parts": list(parts)}]

def first_candidate(response: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    candidates = (response or {}).get("candidates") or []
    if not isinstance(candidates, list) or not candidates:
        return None
    first = candidates[0]
    return first if isinstance(first, dict) else None

def response_text(response: Dict[str, Any]) -> str:
    """Concatenated text parts of the first candidate ("" when there are none)."""
    candidate = first_candidate(response)
    if candidate is None:
        return ""
    parts = (candidate.get("content") or {}).get("parts") or []
    texts = [
        p["text"]
        for p in parts
        if isinstance(p, dict) and isinstance(p.get("text"), str) and not p.get("thought")
    ]
    return "".join(texts)

class GeminiClient:
    """
    Thin wrapper over the Gemini REST `generateContent` call.
    Credentials and transport are injected so tests can pass a fake session.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = GEMINI_API_BASE,
        timeout_s: Optional[float] = GEMINI_TIMEOUT_S,
        session: Optional[requests.Session] = None,
    ):
        if not api_key:
            raise GeminiError("GEMINI_API_KEY is missing. Set it in config.env and restart.")
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.session = session or requests.Session()

    def generate_content(
        self,
        model: str,
        contents: List[Dict[str, Any]],
        generation_config: Optional[Dict[str, Any]] = None,
        tools: Optional[List[Dict[str, Any]]] = None,
        tool_config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        url = f"{self.base_url}/models/{model}:generateContent"
        payload: Dict[str, Any] = {"contents": contents}
        if generation_config:
            payload["generationConfig"] = generation_config
        if tools:
            payload["tools"] = tools
        if tool_config:
            payload["toolConfig"] = tool_config

        logger.debug("generateContent model=%s tools=%s", model, bool(tools))
        try:
            r = self.session.post(
                url,
                json=payload,
                headers={"x-goog-api-key": self.api_key},
                timeout=self.timeout_s,
            )
        except (requests.ConnectionError, requests.Timeout) as e:
            raise NetworkError(f"Gemini unreachable: {e}") from e

        if r.status_code >= 400:
            raise GeminiError(f"Gemini {r.status_code}: {r.text[:300]}", status_code=r.status_code)

        try:
            data = r.json()
        except ValueError as e:
            raise GeminiError(f"Gemini returned a non-JSON body: {r.text[:200]}") from e
        if not isinstance(data, dict):
            raise GeminiError("Gemini returned an unexpected body shape.")
        return data

    def close(self) -> None:
        self.session.close()
