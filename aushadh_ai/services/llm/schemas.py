# aushadh_ai/services/llm/schemas.py
# Gemini responseSchema (OpenAPI subset, upper-case type names)

_STRING = {"type": "STRING"}

MEDICATION_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "prescribed_brand": _STRING,
        "active_salt": _STRING,
        "jan_aushadhi_generic": _STRING,
        "brand_price_est": _STRING,
        "jan_aushadhi_price_est": _STRING,
        "savings_est": _STRING,
    },
    "required": [
        "prescribed_brand",
        "active_salt",
        "jan_aushadhi_generic",
        "brand_price_est",
        "jan_aushadhi_price_est",
        "savings_est",
    ],
}

ANALYSIS_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "metadata": {
            "type": "OBJECT",
            "properties": {
                "doctor": _STRING,
                "date": _STRING,
                "currency": _STRING,
            },
            "required": ["doctor", "date", "currency"],
        },
        "medications": {"type": "ARRAY", "items": MEDICATION_SCHEMA},
        "bhashini_summary": {
            "type": "OBJECT",
            "properties": {
                "en": _STRING,
                "hi": _STRING,
                "te": _STRING,
                "ta": _STRING,
                "kn": _STRING,
                "bn": _STRING,
                "mr": _STRING,
            },
            "required": ["en"],
        },
        "disclaimer": _STRING,
    },
    "required": ["metadata", "medications", "bhashini_summary", "disclaimer"],
}
