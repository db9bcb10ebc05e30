import logging

from aushadh_ai.core.gemini_config import GEMINI_MODEL_ANALYZE, GEMINI_THINKING_BUDGET
from aushadh_ai.schemas.models import AnalysisResult
from aushadh_ai.services.gemini_client import GeminiClient, response_text, text_part, user_content
from aushadh_ai.services.image_encoder import encode_image_part
from aushadh_ai.services.llm.json_extract import ParseError, extract_json
from aushadh_ai.services.llm.normalize import normalize_analysis
from aushadh_ai.services.llm.prompts import analysis_prompt
from aushadh_ai.services.llm.schemas import ANALYSIS_SCHEMA

logger = logging.getLogger(__name__)

def analyze_prescription(
    client: GeminiClient,
    image: bytes,
    mime_type: str = "image/jpeg",
    model: str = GEMINI_MODEL_ANALYZE,
) -> AnalysisResult:
    """Image -> Gemini transcription + generic mapping -> sanitized AnalysisResult."""
    logger.info("Analyzing prescription image (%d bytes, %s) with %s", len(image), mime_type, model)
    try:
        response = client.generate_content(
            model=model,
            contents=user_content(encode_image_part(image, mime_type), text_part(analysis_prompt())),
            generation_config={
                "responseMimeType": "application/json",
                "responseSchema": ANALYSIS_SCHEMA,
                "thinkingConfig": {"thinkingBudget": GEMINI_THINKING_BUDGET},
            },
        )

        text = response_text(response)
        if not text.strip():
            raise ParseError("No response text from AI")

        result = normalize_analysis(extract_json(text))
    except Exception:
        logger.exception("Gemini analysis failed")
        raise

    logger.info("Analysis complete: %d medication(s)", len(result.medications))
    return result
