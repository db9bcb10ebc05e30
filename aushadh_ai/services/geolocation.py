from typing import Dict

PERMISSION_DENIED = "PERMISSION_DENIED"
POSITION_UNAVAILABLE = "POSITION_UNAVAILABLE"
TIMEOUT = "TIMEOUT"
UNSUPPORTED = "UNSUPPORTED"

# W3C GeolocationPositionError.code
_CODES = {1: PERMISSION_DENIED, 2: POSITION_UNAVAILABLE, 3: TIMEOUT}

MESSAGES: Dict[str, str] = {
    PERMISSION_DENIED: "Location access is required to find the nearest store.",
    POSITION_UNAVAILABLE: "Position unavailable. Please ensure GPS is enabled and you have a signal.",
    TIMEOUT: "Location request timed out. Please try again.",
    UNSUPPORTED: "Geolocation is not supported by your browser",
}
FALLBACK_MESSAGE = "Location could not be retrieved. Please try again."

class GeolocationError(Exception):
    def __init__(self, kind: str, detail: str = ""):
        self.kind = kind
        self.detail = detail
        super().__init__(self.user_message)

    @property
    def user_message(self) -> str:
        return MESSAGES.get(self.kind) or self.detail or FALLBACK_MESSAGE

    @property
    def retryable(self) -> bool:
        return self.kind != UNSUPPORTED

    @classmethod
    def from_code(cls, code: int, detail: str = "") -> "GeolocationError":
        return cls(_CODES.get(code, ""), detail)
