"""
Runtime settings read from the environment (and a .env file, if present).
"""

import os
from pathlib import Path

from pydantic import BaseModel, Field

from .glossary.models import DEFAULT_PERIOD


class Settings(BaseModel):
    """Server settings.

    Attributes:
        log_level: Logging level name for the server logger
        ocr_language: Tesseract language code used for facsimile OCR
        glossary_dir: Optional directory of YAML glossaries preloaded at startup
        default_period: Period tag stamped on parsed glossary entries
    """
    log_level: str = Field(default="INFO", description="Logging level")
    ocr_language: str = Field(default="eng", description="Tesseract language code")
    glossary_dir: Path | None = Field(default=None, description="YAML glossary preload directory")
    default_period: str = Field(default=DEFAULT_PERIOD, description="Default glossary period")

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from HISTRANS_* environment variables."""
        glossary_dir = os.getenv("HISTRANS_GLOSSARY_DIR")
        return cls(
            log_level=os.getenv("HISTRANS_LOG_LEVEL", "INFO").upper(),
            ocr_language=os.getenv("HISTRANS_OCR_LANG", "eng"),
            glossary_dir=Path(glossary_dir).expanduser().resolve() if glossary_dir else None,
            default_period=os.getenv("HISTRANS_DEFAULT_PERIOD", DEFAULT_PERIOD),
        )
