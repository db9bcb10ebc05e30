# aushadh_ai/api/routes_speech.py
import base64
import logging

from fastapi import APIRouter, Depends, HTTPException

from aushadh_ai.api.deps import get_gemini_client
from aushadh_ai.schemas.models import SpeechRequest, SpeechResponse
from aushadh_ai.services.gemini_client import GeminiClient, GeminiError, NetworkError
from aushadh_ai.services.speech import TTS_SAMPLE_RATE, SpeechError, base64_pcm_to_wav, generate_speech

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/speech", tags=["speech"])

AUDIO_FAILED_MESSAGE = "Could not generate audio for this summary."

@router.post("", response_model=SpeechResponse)
def speak(req: SpeechRequest, client: GeminiClient = Depends(get_gemini_client)):
    try:
        audio = generate_speech(client, req.text)
    except NetworkError:
        raise HTTPException(status_code=503, detail="Connection issue. Please check your internet and try again.")
    except GeminiError as e:
        if e.is_auth_error:
            logger.error("Gemini rejected the API key (HTTP %s); check GEMINI_API_KEY", e.status_code)
        raise HTTPException(status_code=502, detail=AUDIO_FAILED_MESSAGE)
    except SpeechError:
        raise HTTPException(status_code=502, detail=AUDIO_FAILED_MESSAGE)

    if req.format == "wav":
        try:
            wav = base64_pcm_to_wav(audio)
        except ValueError:
            raise HTTPException(status_code=502, detail=AUDIO_FAILED_MESSAGE)
        return SpeechResponse(
            audio_base64=base64.b64encode(wav).decode("ascii"),
            mime_type="audio/wav",
            sample_rate=TTS_SAMPLE_RATE,
        )
    return SpeechResponse(audio_base64=audio, sample_rate=TTS_SAMPLE_RATE)
