# src/errors.py
"""
Error types for the pulse service.
"""


class PulseError(Exception):
    """Base class for pulse lookup failures."""


class UpstreamError(PulseError):
    """DexScreener answered with a non-2xx status or could not be reached."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code

    @classmethod
    def from_status(cls, status_code):
        return cls(f"Dexscreener API error: {status_code}", status_code=status_code)


class ValidationError(PulseError):
    """Bad query parameters. Carries the JSON payload returned with the 400."""

    def __init__(self, payload, status_code=400):
        super().__init__(payload.get("message") or payload.get("error"))
        self.payload = payload
        self.status_code = status_code
