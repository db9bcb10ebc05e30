from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, Field

SUMMARY_LANGUAGES = ("en", "hi", "te", "ta", "kn", "bn", "mr")

class PrescriptionMetadata(BaseModel):
    doctor: str = ""
    date: str = ""
    currency: str = ""

class Medication(BaseModel):
    prescribed_brand: str
    active_salt: str = ""
    jan_aushadhi_generic: str = ""
    brand_price_est: str = ""
    jan_aushadhi_price_est: str = ""
    savings_est: str = ""

class BhashiniSummary(BaseModel):
    en: str
    hi: str = ""
    te: str = ""
    ta: str = ""
    kn: str = ""
    bn: str = ""
    mr: str = ""

class AnalysisResult(BaseModel):
    metadata: PrescriptionMetadata
    medications: List[Medication] = Field(default_factory=list)
    bhashini_summary: BhashiniSummary
    disclaimer: str = ""

class StoreLocation(BaseModel):
    name: str
    address: str
    mapUri: str

class AnalyzeRequest(BaseModel):
    image_base64: str = Field(..., description="Base64 image data; a data: URL prefix is accepted")
    mime_type: str = "image/jpeg"

class LocateRequest(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

class StoreLookupResponse(BaseModel):
    store: Optional[StoreLocation] = None
    message: str = ""

class SpeechRequest(BaseModel):
    text: str = Field(..., min_length=1, max_length=5000)
    format: Literal["pcm", "wav"] = "pcm"

class SpeechResponse(BaseModel):
    audio_base64: str
    mime_type: str = "audio/L16"
    sample_rate: int = 24000

class GeolocationMessages(BaseModel):
    timeout_s: int
    messages: Dict[str, str]

class GeolocationErrorInfo(BaseModel):
    kind: str
    message: str
    retryable: bool
