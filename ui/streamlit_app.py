import base64
from typing import Any, Dict, Optional

import pandas as pd
import requests
import streamlit as st
from dotenv import load_dotenv

load_dotenv()

st.set_page_config(page_title="Aushadh-AI", layout="wide")

# ---------------------------
# Config
# ---------------------------
DEFAULT_API_BASE = "http://127.0.0.1:8000"
API_BASE = st.sidebar.text_input("API Base URL", value=DEFAULT_API_BASE)

LANGUAGES = {
    "English": "en", "हिन्दी": "hi", "తెలుగు": "te", "தமிழ்": "ta",
    "ಕನ್ನಡ": "kn", "বাংলা": "bn", "मराठी": "mr",
}
FALLBACK_DISCLAIMER = (
    "AI-generated estimate. Confirm generic equivalents and prices with a pharmacist before buying."
)

# ---------------------------
# Helpers (API)
# ---------------------------
def api_post(path: str, payload: Dict[str, Any], timeout: int = 150) -> Dict[str, Any]:
    url = f"{API_BASE}{path}"
    r = requests.post(url, json=payload, timeout=timeout)
    if r.status_code >= 400:
        try:
            detail = r.json().get("detail")
        except ValueError:
            detail = None
        raise RuntimeError(detail if isinstance(detail, str) else f"{r.status_code} {r.text}")
    return r.json()

def api_get(path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    url = f"{API_BASE}{path}"
    r = requests.get(url, params=params or {}, timeout=20)
    if r.status_code >= 400:
        raise RuntimeError(f"{r.status_code} {r.text}")
    return r.json()

# ---------------------------
# Session state
# ---------------------------
if "analysis" not in st.session_state:
    st.session_state.analysis = None
if "store" not in st.session_state:
    st.session_state.store = None
if "store_message" not in st.session_state:
    st.session_state.store_message = ""
if "audio" not in st.session_state:
    st.session_state.audio = None

# ---------------------------
# UI
# ---------------------------
st.title("💊 Aushadh-AI: Prescription to Jan Aushadhi")

col_left, col_right = st.columns([1.2, 1])

with col_left:
    st.subheader("1) Prescription photo")

    taken = st.camera_input("Take a photo")
    uploaded = st.file_uploader("...or upload one", type=["jpg", "jpeg", "png", "webp", "heic"])
    photo = taken or uploaded

    if photo is not None:
        st.image(photo, use_container_width=True)

    if st.button("🔍 Analyze (/prescription/analyze)", disabled=photo is None):
        payload = {
            "image_base64": base64.b64encode(photo.getvalue()).decode("ascii"),
            "mime_type": photo.type or "image/jpeg",
        }
        with st.spinner("Reading prescription..."):
            try:
                st.session_state.analysis = api_post("/prescription/analyze", payload)
                st.session_state.audio = None
                st.success("Analysis complete.")
            except Exception as e:
                st.session_state.analysis = None
                st.error(str(e))

    st.divider()
    st.subheader("2) Result")

    result = st.session_state.analysis
    if result:
        meta = result.get("metadata", {})
        m1, m2, m3 = st.columns(3)
        m1.metric("Doctor", meta.get("doctor", ""))
        m2.metric("Date", meta.get("date", ""))
        m3.metric("Currency", meta.get("currency", ""))

        meds = result.get("medications", [])
        if meds:
            df = pd.DataFrame(meds).rename(columns={
                "prescribed_brand": "Brand",
                "active_salt": "Salt",
                "jan_aushadhi_generic": "Jan Aushadhi generic",
                "brand_price_est": "Brand price",
                "jan_aushadhi_price_est": "Generic price",
                "savings_est": "Savings",
            })
            st.dataframe(df, use_container_width=True, hide_index=True)
        else:
            st.info("No legible medicines were found on this prescription.")

        lang_label = st.selectbox("Summary language", list(LANGUAGES.keys()))
        summary = result.get("bhashini_summary", {})
        text = summary.get(LANGUAGES[lang_label]) or summary.get("en", "")
        st.write(text)

        if st.button("🔊 Read aloud (/speech)"):
            with st.spinner("Generating audio..."):
                try:
                    resp = api_post("/speech", {"text": text, "format": "wav"})
                    st.session_state.audio = base64.b64decode(resp["audio_base64"])
                except Exception as e:
                    st.error(str(e))
        if st.session_state.audio:
            st.audio(st.session_state.audio, format="audio/wav")

        st.caption(result.get("disclaimer") or FALLBACK_DISCLAIMER)
    else:
        st.caption("No analysis yet.")

with col_right:
    st.subheader("3) Nearest Jan Aushadhi Store")
    st.caption(
        "Locate the closest Pradhan Mantri Bhartiya Janaushadhi Kendra to purchase "
        "generic medicines at affordable prices."
    )

    latitude = st.number_input("Latitude", value=28.6139, min_value=-90.0, max_value=90.0, format="%.6f")
    longitude = st.number_input("Longitude", value=77.2090, min_value=-180.0, max_value=180.0, format="%.6f")

    if st.button("📍 Find store (/stores/nearest)"):
        with st.spinner("Finding Nearest Kendra..."):
            try:
                resp = api_post("/stores/nearest", {"latitude": latitude, "longitude": longitude})
                st.session_state.store = resp.get("store")
                st.session_state.store_message = resp.get("message", "")
            except Exception as e:
                st.session_state.store = None
                st.session_state.store_message = str(e)

    store = st.session_state.store
    if store:
        st.markdown(f"#### {store['name']}")
        st.write(store["address"])
        st.link_button("🧭 Navigate", store["mapUri"])
    elif st.session_state.store_message:
        st.warning(st.session_state.store_message)
        st.caption("Use **Find store** again to retry.")

    with st.expander("Location help"):
        try:
            geo = api_get("/stores/geolocation-messages")
            for kind, msg in geo.get("messages", {}).items():
                st.write(f"- `{kind}`: {msg}")
        except Exception:
            st.caption("Backend not reachable.")
