# aushadh_ai/services/llm/prompts.py
from aushadh_ai.core.gemini_config import ESTIMATED_SAVINGS_PCT, ILLEGIBLE_MARKER

STORE_KIND = "Pradhan Mantri Bhartiya Janaushadhi Kendra"

def analysis_prompt(
    savings_pct: int = ESTIMATED_SAVINGS_PCT,
    illegible_marker: str = ILLEGIBLE_MARKER,
) -> str:
    return (
        "Role: You are an expert Indian Medical Pharmacist and Digital Health Architect "
        "for the 'Aushadh-AI' mission supporting PMBJP.\n"
        "Task: Analyze the medical prescription image. Digitize data and map to "
        "Jan Aushadhi (PMBJP) equivalents.\n"
        "\n"
        "Instructions:\n"
        "1. Handwriting Analysis: Transcribe ALL Doctor names visible. Transcribe Date and "
        "Medications with dosages.\n"
        "2. Generic Mapping: Identify the active chemical salt for every brand.\n"
        "3. Jan Aushadhi Match: Match the salt to the standard Jan Aushadhi generic equivalent.\n"
        "4. Financial Insight: Compare Branded vs. Jan Aushadhi prices "
        f"(Estimate {savings_pct}% saving if data missing). Use UTF-8 for ₹ (INR) symbols.\n"
        "5. DPI Ready: Ensure output is compatible with ABDM (FHIR R4) structures.\n"
        "6. Summary: Write bhashini_summary in English (en) and, where you can, Hindi (hi), "
        "Telugu (te), Tamil (ta), Kannada (kn), Bengali (bn) and Marathi (mr).\n"
        "\n"
        "Constraint: Strictly JSON. No conversational text. Every field is a plain string. "
        f"Mark illegible text as '{illegible_marker}'.\n"
    )

def store_prompt(latitude: float, longitude: float) -> str:
    return (
        f"Find the nearest '{STORE_KIND}' near coordinates {latitude}, {longitude}. "
        "Provide the full address and a maps link."
    )
