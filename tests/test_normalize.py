import json

from aushadh_ai.core.gemini_config import DEFAULT_CURRENCY, ILLEGIBLE_MARKER
from aushadh_ai.services.llm.normalize import (
    DEFAULT_SUMMARY,
    is_valid_brand,
    normalize_analysis,
    normalize_medications,
)
from aushadh_ai.services.llm.sanitize import DEGENERATE_ARTIFACT


def _med(brand, **extra):
    return {
        "prescribed_brand": brand,
        "active_salt": "Paracetamol",
        "jan_aushadhi_generic": "Paracetamol 500mg Tab",
        "brand_price_est": "₹30",
        "jan_aushadhi_price_est": "₹6",
        "savings_est": "80%",
        **extra,
    }


def test_empty_response_gets_typed_defaults():
    result = normalize_analysis({})

    assert result.metadata.doctor == ILLEGIBLE_MARKER
    assert result.metadata.date == ILLEGIBLE_MARKER
    assert result.metadata.currency == DEFAULT_CURRENCY
    assert result.medications == []
    assert result.bhashini_summary.en == DEFAULT_SUMMARY == "Analysis complete."
    assert result.bhashini_summary.hi == ""
    assert result.disclaimer == ""


def test_non_object_response_is_treated_as_empty():
    result = normalize_analysis(["not", "an", "object"])
    assert result.medications == []
    assert result.bhashini_summary.en == "Analysis complete."


def test_wrong_section_types_fall_back():
    result = normalize_analysis({"metadata": "Dr. X", "medications": {"a": 1}, "bhashini_summary": []})
    assert result.metadata.doctor == ILLEGIBLE_MARKER
    assert result.medications == []
    assert result.bhashini_summary.en == "Analysis complete."


def test_medication_filter():
    meds = normalize_medications([
        _med("Not provided in image"),
        _med("Crocin"),
        _med("ILLEGIBLE scrawl"),
        _med("X"),
        _med(""),
        _med(None),
        "Dolo 650",
    ])
    assert [m.prescribed_brand for m in meds] == ["Crocin"]


def test_medication_order_is_preserved():
    meds = normalize_medications([_med("Crocin"), _med("Dolo 650"), _med("Pan 40")])
    assert [m.prescribed_brand for m in meds] == ["Crocin", "Dolo 650", "Pan 40"]


def test_medication_fields_are_sanitized():
    raw = {
        "medications": [
            {
                "prescribed_brand": {"brand": "Dolo 650"},
                "active_salt": '{"text": "Paracetamol"}',
                "jan_aushadhi_generic": ["Paracetamol", "650mg"],
                "brand_price_est": {"value": 30, "currency": "INR"},
                "jan_aushadhi_price_est": 6,
                "savings_est": DEGENERATE_ARTIFACT,
            }
        ]
    }
    med = normalize_analysis(raw).medications[0]

    assert med.prescribed_brand == "Dolo 650"
    assert med.active_salt == "Paracetamol"
    assert med.jan_aushadhi_generic == "Paracetamol, 650mg"
    assert med.brand_price_est == "30"
    assert med.jan_aushadhi_price_est == "6"
    assert med.savings_est == ""


def test_missing_medication_fields_default_to_empty():
    med = normalize_medications([{"prescribed_brand": "Crocin"}])[0]
    assert med.active_salt == ""
    assert med.savings_est == ""


def test_metadata_and_summary():
    raw = {
        "metadata": {"doctor": {"name": "Dr. A. Rao"}, "date": "12/03/2024", "currency": ""},
        "bhashini_summary": {"en": "", "hi": '{"text": "विश्लेषण पूरा"}', "ta": None},
        "disclaimer": ["Consult", "your doctor"],
    }
    result = normalize_analysis(raw)

    assert result.metadata.doctor == "Dr. A. Rao"
    assert result.metadata.date == "12/03/2024"
    assert result.metadata.currency == DEFAULT_CURRENCY
    assert result.bhashini_summary.en == "Analysis complete."
    assert result.bhashini_summary.hi == "विश्लेषण पूरा"
    assert result.bhashini_summary.ta == ""
    assert result.disclaimer == "Consult, your doctor"


def test_no_artifact_anywhere_in_output():
    raw = {
        "metadata": {"doctor": DEGENERATE_ARTIFACT, "date": {"a": 1, "b": 2}},
        "medications": [_med("Crocin", savings_est=DEGENERATE_ARTIFACT)],
        "bhashini_summary": {"en": DEGENERATE_ARTIFACT, "mr": [DEGENERATE_ARTIFACT]},
        "disclaimer": DEGENERATE_ARTIFACT,
    }
    dumped = json.dumps(normalize_analysis(raw).model_dump(), ensure_ascii=False)
    assert DEGENERATE_ARTIFACT not in dumped


def test_is_valid_brand():
    assert is_valid_brand("Crocin")
    assert not is_valid_brand("C")
    assert not is_valid_brand("  ")
    assert not is_valid_brand("Brand not provided")
