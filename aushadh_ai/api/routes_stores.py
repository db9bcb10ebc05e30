# aushadh_ai/api/routes_stores.py
import logging

from fastapi import APIRouter, Depends, Query

from aushadh_ai.api.deps import get_gemini_client
from aushadh_ai.core.gemini_config import GEOLOCATION_TIMEOUT_S
from aushadh_ai.schemas.models import (
    GeolocationErrorInfo,
    GeolocationMessages,
    LocateRequest,
    StoreLookupResponse,
)
from aushadh_ai.services.gemini_client import GeminiClient, GeminiError, NetworkError
from aushadh_ai.services.geolocation import FALLBACK_MESSAGE, MESSAGES, GeolocationError
from aushadh_ai.services.store_locator import NO_STORE_MESSAGE, find_nearest_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/stores", tags=["stores"])

CONNECTION_MESSAGE = "Connection issue. Please check your internet and try again."

@router.post("/nearest", response_model=StoreLookupResponse)
def nearest(req: LocateRequest, client: GeminiClient = Depends(get_gemini_client)):
    # "not found" is an empty result, not an error; the user retries by hand
    try:
        store = find_nearest_store(client, req.latitude, req.longitude)
    except NetworkError:
        logger.exception("Store locator failed")
        return StoreLookupResponse(store=None, message=CONNECTION_MESSAGE)
    except GeminiError:
        logger.exception("Store locator failed")
        return StoreLookupResponse(store=None, message=NO_STORE_MESSAGE)

    if store is None:
        return StoreLookupResponse(store=None, message=NO_STORE_MESSAGE)
    return StoreLookupResponse(store=store)

@router.get("/geolocation-messages", response_model=GeolocationMessages)
def geolocation_messages():
    return GeolocationMessages(
        timeout_s=GEOLOCATION_TIMEOUT_S,
        messages={
            **{kind: GeolocationError(kind).user_message for kind in MESSAGES},
            "DEFAULT": FALLBACK_MESSAGE,
        },
    )

@router.get("/geolocation-error", response_model=GeolocationErrorInfo)
def geolocation_error(code: int = Query(..., description="GeolocationPositionError.code from the browser"),
                      detail: str = Query("", max_length=300)):
    err = GeolocationError.from_code(code, detail)
    return GeolocationErrorInfo(kind=err.kind or "UNKNOWN", message=err.user_message, retryable=err.retryable)
