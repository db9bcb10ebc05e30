import os

from aushadh_ai.core.env import load_env

load_env()

GEMINI_API_BASE = os.getenv("GEMINI_API_BASE", "https://generativelanguage.googleapis.com/v1beta")
GEMINI_MODEL_ANALYZE = os.getenv("GEMINI_MODEL_ANALYZE", "gemini-flash-lite-latest")
GEMINI_MODEL_LOCATE = os.getenv("GEMINI_MODEL_LOCATE", "gemini-2.5-flash")
GEMINI_MODEL_TTS = os.getenv("GEMINI_MODEL_TTS", "gemini-2.5-flash-preview-tts")
GEMINI_TTS_VOICE = os.getenv("GEMINI_TTS_VOICE", "Kore")

GEMINI_THINKING_BUDGET = int(os.getenv("GEMINI_THINKING_BUDGET", "0"))
GEMINI_TIMEOUT_S = int(os.getenv("GEMINI_TIMEOUT_S", "120"))
GEOLOCATION_TIMEOUT_S = int(os.getenv("GEOLOCATION_TIMEOUT_S", "15"))

# prompt-level policy, kept out of the prompt literals
ESTIMATED_SAVINGS_PCT = int(os.getenv("ESTIMATED_SAVINGS_PCT", "80"))
ILLEGIBLE_MARKER = os.getenv("ILLEGIBLE_MARKER", "Not provided in image")
DEFAULT_CURRENCY = os.getenv("DEFAULT_CURRENCY", "INR")
STORE_PLACEHOLDER_NAME = os.getenv("STORE_PLACEHOLDER_NAME", "Jan Aushadhi Kendra")

MAX_SANITIZE_DEPTH = int(os.getenv("MAX_SANITIZE_DEPTH", "5"))
MAX_IMAGE_BYTES = int(os.getenv("MAX_IMAGE_BYTES", str(10 * 1024 * 1024)))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def gemini_api_key() -> str:
    # read at call time so a restarted worker picks up an edited config.env
    return os.getenv("GEMINI_API_KEY", "").strip()
