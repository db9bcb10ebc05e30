import logging
from typing import Any, Dict, List, Optional

from aushadh_ai.core.gemini_config import (
    GEMINI_MODEL_LOCATE,
    GEMINI_THINKING_BUDGET,
    STORE_PLACEHOLDER_NAME,
)
from aushadh_ai.schemas.models import StoreLocation
from aushadh_ai.services.gemini_client import (
    GeminiClient,
    first_candidate,
    response_text,
    text_part,
    user_content,
)
from aushadh_ai.services.llm.prompts import store_prompt
from aushadh_ai.services.llm.sanitize import sanitize

logger = logging.getLogger(__name__)

NO_STORE_MESSAGE = "Unable to find a store nearby. Please try again or search on Google Maps."
VERIFIED_STORE_LABEL = f"{STORE_PLACEHOLDER_NAME} (Verified Store)"
MIN_ADDRESS_LEN = 5

def map_search_uri(latitude: float, longitude: float) -> str:
    return (
        "https://www.google.com/maps/search/Pradhan+Mantri+Bhartiya+Janaushadhi+Kendra/"
        f"@{latitude},{longitude},15z"
    )

def _grounding_chunks(candidate: Dict[str, Any]) -> List[Dict[str, Any]]:
    metadata = candidate.get("groundingMetadata") or {}
    chunks = metadata.get("groundingChunks") if isinstance(metadata, dict) else None
    if not isinstance(chunks, list):
        return []
    return [c for c in chunks if isinstance(c, dict)]

def extract_store(response: Dict[str, Any], latitude: float, longitude: float) -> Optional[StoreLocation]:
    """
    Pick the store out of a maps-grounded answer.
    Later chunks win for uri/title; review snippets are collected as a
    fallback description. Returns None when there is no candidate at all.
    """
    candidate = first_candidate(response)
    if candidate is None:
        return None

    map_uri = ""
    name = STORE_PLACEHOLDER_NAME
    snippets = ""

    for chunk in _grounding_chunks(candidate):
        maps = chunk.get("maps")
        if not isinstance(maps, dict):
            continue
        if maps.get("uri"):
            map_uri = sanitize(maps["uri"]) or map_uri
        if maps.get("title"):
            name = sanitize(maps["title"]) or name
        sources = maps.get("placeAnswerSources") or {}
        reviews = sources.get("reviewSnippets") if isinstance(sources, dict) else None
        if isinstance(reviews, list):
            texts = [t for t in (sanitize(r) for r in reviews) if t]
            if texts:
                snippets += " " + ". ".join(texts)

    snippets = snippets.strip()
    address = sanitize(response_text(response).replace("*", ""))
    if len(address) < MIN_ADDRESS_LEN:
        address = f"{VERIFIED_STORE_LABEL}: {snippets}" if snippets else VERIFIED_STORE_LABEL

    if not map_uri:
        map_uri = map_search_uri(latitude, longitude)

    return StoreLocation(
        name=sanitize(name) or STORE_PLACEHOLDER_NAME,
        address=sanitize(address),
        mapUri=map_uri,
    )

def find_nearest_store(
    client: GeminiClient,
    latitude: float,
    longitude: float,
    model: str = GEMINI_MODEL_LOCATE,
) -> Optional[StoreLocation]:
    logger.info("Locating nearest store via %s", model)
    response = client.generate_content(
        model=model,
        contents=user_content(text_part(store_prompt(latitude, longitude))),
        generation_config={"thinkingConfig": {"thinkingBudget": GEMINI_THINKING_BUDGET}},
        tools=[{"googleMaps": {}}],
        tool_config={"retrievalConfig": {"latLng": {"latitude": latitude, "longitude": longitude}}},
    )
    store = extract_store(response, latitude, longitude)
    if store is None:
        logger.info("No store candidates returned")
    return store
