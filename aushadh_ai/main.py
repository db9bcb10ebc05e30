import logging

from fastapi import FastAPI
from aushadh_ai.core.gemini_config import LOG_LEVEL
from aushadh_ai.api.routes_prescription import router as prescription_router
from aushadh_ai.api.routes_stores import router as stores_router
from aushadh_ai.api.routes_speech import router as speech_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Aushadh-AI (Prescription -> Jan Aushadhi)", version="1.0")

app.include_router(prescription_router)
app.include_router(stores_router)
app.include_router(speech_router)

@app.get("/health")
def health():
    return {"ok": True}
@app.get("/")
def root():
    return {"ok": True, "service": "Aushadh-AI (Prescription -> Jan Aushadhi)"}
