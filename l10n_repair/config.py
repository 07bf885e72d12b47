from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


class ConfigError(ValueError):
    """Invalid startup configuration"""
    pass


def _optional_path(value: Optional[str]) -> Optional[Path]:
    return Path(value) if value else None


@dataclass
class Config:
    """Application configuration"""
    locale: str = os.getenv("L10N_LOCALE", "de-DE")
    currency_marker: str = os.getenv("L10N_CURRENCY_MARKER", "€")
    # Plural-duration word that must never be read as a month name ("3 Wochen")
    duration_marker: str = os.getenv("L10N_DURATION_MARKER", "Wochen")
    blocking_style_property: str = os.getenv("L10N_BLOCKING_STYLE_PROPERTY", "pointer-events")
    dictionary_path: Optional[Path] = _optional_path(os.getenv("L10N_DICTIONARY_PATH"))
    max_batches: int = int(os.getenv("L10N_MAX_BATCHES", "100"))
    enable_debug: bool = os.getenv("L10N_DEBUG", "false").lower() == "true"

    def __post_init__(self):
        from .formatting import LOCALES

        if self.locale not in LOCALES:
            raise ConfigError(
                f"Unsupported locale '{self.locale}'. Available: {sorted(LOCALES)}"
            )
        if not self.currency_marker:
            raise ConfigError("Currency marker must not be empty")
        if self.max_batches < 1:
            raise ConfigError("L10N_MAX_BATCHES must be at least 1")

config = Config()
