# aushadh_ai/services/llm/normalize.py
from typing import Any, Dict, List

from aushadh_ai.core.gemini_config import DEFAULT_CURRENCY, ILLEGIBLE_MARKER
from aushadh_ai.schemas.models import (
    AnalysisResult,
    BhashiniSummary,
    Medication,
    PrescriptionMetadata,
    SUMMARY_LANGUAGES,
)
from aushadh_ai.services.llm.sanitize import sanitize

DEFAULT_SUMMARY = "Analysis complete."

MEDICATION_FIELDS = (
    "prescribed_brand",
    "active_salt",
    "jan_aushadhi_generic",
    "brand_price_est",
    "jan_aushadhi_price_est",
    "savings_est",
)

# a row whose brand carries one of these was not actually read off the image
EXCLUDED_BRAND_MARKERS = tuple(
    dict.fromkeys(("not provided", "illegible", ILLEGIBLE_MARKER.strip().lower()))
)


def _section(raw: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = raw.get(key)
    return value if isinstance(value, dict) else {}


def is_valid_brand(brand: str) -> bool:
    b = (brand or "").strip().lower()
    if len(b) <= 1:
        return False
    return not any(marker and marker in b for marker in EXCLUDED_BRAND_MARKERS)


def normalize_medications(raw_meds: Any) -> List[Medication]:
    if not isinstance(raw_meds, list):
        return []

    out: List[Medication] = []
    for m in raw_meds:
        entry = m if isinstance(m, dict) else {}
        fields = {f: sanitize(entry.get(f)) for f in MEDICATION_FIELDS}
        if not is_valid_brand(fields["prescribed_brand"]):
            continue
        out.append(Medication(**fields))
    return out


def normalize_analysis(raw: Any) -> AnalysisResult:
    """
    Repair an untrusted model answer into an AnalysisResult:
    - every missing section gets a typed empty default
    - every leaf goes through sanitize()
    - medications with an unread brand are dropped, not defaulted
    - bhashini_summary.en is never empty
    """
    raw = raw if isinstance(raw, dict) else {}

    metadata = _section(raw, "metadata")
    summary = _section(raw, "bhashini_summary")
    medications = normalize_medications(raw.get("medications"))

    meta = PrescriptionMetadata(
        doctor=sanitize(metadata.get("doctor")) or ILLEGIBLE_MARKER,
        date=sanitize(metadata.get("date")) or ILLEGIBLE_MARKER,
        currency=sanitize(metadata.get("currency")) or DEFAULT_CURRENCY,
    )

    translations = {lang: sanitize(summary.get(lang)) for lang in SUMMARY_LANGUAGES}
    translations["en"] = translations["en"] or DEFAULT_SUMMARY

    return AnalysisResult(
        metadata=meta,
        medications=medications,
        bhashini_summary=BhashiniSummary(**translations),
        disclaimer=sanitize(raw.get("disclaimer")),
    )
