import base64
import io
import logging
import wave

from aushadh_ai.core.gemini_config import GEMINI_MODEL_TTS, GEMINI_TTS_VOICE
from aushadh_ai.services.gemini_client import GeminiClient, first_candidate, text_part, user_content

logger = logging.getLogger(__name__)

# Gemini TTS returns mono 16-bit little-endian PCM at 24 kHz
TTS_SAMPLE_RATE = 24000
TTS_SAMPLE_WIDTH = 2
TTS_CHANNELS = 1

class SpeechError(RuntimeError):
    pass

def generate_speech(
    client: GeminiClient,
    text: str,
    voice: str = GEMINI_TTS_VOICE,
    model: str = GEMINI_MODEL_TTS,
) -> str:
    """Return base64 raw PCM audio of `text` read aloud."""
    try:
        response = client.generate_content(
            model=model,
            contents=user_content(text_part(text)),
            generation_config={
                "responseModalities": ["AUDIO"],
                "speechConfig": {"voiceConfig": {"prebuiltVoiceConfig": {"voiceName": voice}}},
            },
        )
        candidate = first_candidate(response) or {}
        parts = (candidate.get("content") or {}).get("parts") or [{}]
        first = parts[0] if isinstance(parts[0], dict) else {}
        audio = (first.get("inlineData") or {}).get("data")
        if not audio or not isinstance(audio, str):
            raise SpeechError("No audio content returned")
    except Exception:
        logger.exception("Cloud TTS failed")
        raise
    return audio

def pcm_to_wav(pcm: bytes, sample_rate: int = TTS_SAMPLE_RATE) -> bytes:
    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(TTS_CHANNELS)
        wf.setsampwidth(TTS_SAMPLE_WIDTH)
        wf.setframerate(sample_rate)
        wf.writeframes(pcm)
    return buf.getvalue()

def base64_pcm_to_wav(audio_base64: str, sample_rate: int = TTS_SAMPLE_RATE) -> bytes:
    return pcm_to_wav(base64.b64decode(audio_base64), sample_rate)
