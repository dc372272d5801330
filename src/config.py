# src/config.py
import os
from dataclasses import dataclass

@dataclass
class Settings:
    # Core
    PORT: int = int(os.getenv("PORT", "10000"))
    FLASK_ENV: str = os.getenv("FLASK_ENV", "production")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Upstream
    DEXSCREENER_API_BASE: str = os.getenv("DEXSCREENER_API_BASE", "https://api.dexscreener.com")

    # Pulse
    PULSE_TIMEOUT_SECS: int = int(os.getenv("PULSE_TIMEOUT_SECS", "12"))
    PULSE_MAX_WORKERS: int = int(os.getenv("PULSE_MAX_WORKERS", "10"))
    PULSE_MAX_TOKENS: int = int(os.getenv("PULSE_MAX_TOKENS", "10"))
    PULSE_CACHE_SECONDS: int = int(os.getenv("PULSE_CACHE_SECONDS", "30"))

settings = Settings()
