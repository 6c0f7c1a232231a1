"""the beautiful world start from here."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """App Settings"""

    webhook_secret: str = os.getenv("WEBHOOK_SECRET", "")
    shortener_url: str = os.getenv("SHORTENER_URL", "")
    shortener_timeout: float = float(os.getenv("SHORTENER_TIMEOUT", "5"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
