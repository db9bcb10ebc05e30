from typing import Iterator

from fastapi import HTTPException
from aushadh_ai.core.gemini_config import gemini_api_key
from aushadh_ai.services.gemini_client import GeminiClient

def get_gemini_client() -> Iterator[GeminiClient]:
    key = gemini_api_key()

    if not key:
        raise HTTPException(
            status_code=500,
            detail="Gemini API key not configured."
        )

    # one client (and connection pool) per request, closed when the request ends
    client = GeminiClient(api_key=key)
    try:
        yield client
    finally:
        client.close()
