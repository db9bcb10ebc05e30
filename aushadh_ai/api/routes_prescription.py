# aushadh_ai/api/routes_prescription.py
import logging

from fastapi import APIRouter, Depends, HTTPException

from aushadh_ai.api.deps import get_gemini_client
from aushadh_ai.schemas.models import AnalysisResult, AnalyzeRequest
from aushadh_ai.services.gemini_client import GeminiClient, GeminiError, NetworkError
from aushadh_ai.services.image_encoder import ImageError, decode_image
from aushadh_ai.services.llm.json_extract import ParseError
from aushadh_ai.services.prescription import analyze_prescription

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/prescription", tags=["prescription"])

CONNECTION_MESSAGE = "Connection issue. Please check your internet and try again."
UNREADABLE_MESSAGE = "Could not read the AI response. Please try again with a clearer photo."
SERVICE_CONFIG_MESSAGE = "The AI service rejected this server's credentials. Please contact support."

@router.post("/analyze", response_model=AnalysisResult)
def analyze(req: AnalyzeRequest, client: GeminiClient = Depends(get_gemini_client)):
    try:
        image, mime_type = decode_image(req.image_base64, req.mime_type)
    except ImageError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        return analyze_prescription(client, image, mime_type)
    except NetworkError:
        raise HTTPException(status_code=503, detail=CONNECTION_MESSAGE)
    except GeminiError as e:
        if e.is_auth_error:
            logger.error("Gemini rejected the API key (HTTP %s); check GEMINI_API_KEY", e.status_code)
            raise HTTPException(status_code=500, detail=SERVICE_CONFIG_MESSAGE)
        raise HTTPException(status_code=502, detail=UNREADABLE_MESSAGE)
    except ParseError:
        raise HTTPException(status_code=502, detail=UNREADABLE_MESSAGE)
