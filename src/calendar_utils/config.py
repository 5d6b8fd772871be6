"""Configuration management."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .models import PLACEHOLDER, resolve_style


@dataclass
class Config:
    """CLI configuration."""

    weekday_style: str = "ko-short"
    date_format: str = "yyyy-MM-dd"
    placeholder: str = PLACEHOLDER

    def __post_init__(self) -> None:
        resolve_style(self.weekday_style)

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            weekday_style=os.environ.get("CALENDAR_UTILS_WEEKDAY_STYLE", "").strip() or "ko-short",
            date_format=os.environ.get("CALENDAR_UTILS_DATE_FORMAT", "").strip() or "yyyy-MM-dd",
            placeholder=os.environ.get("CALENDAR_UTILS_PLACEHOLDER") or PLACEHOLDER,
        )

    @classmethod
    def load(cls, env_file: Path | None = None) -> "Config":
        """Load configuration from environment variables."""
        if env_file:
            load_dotenv(env_file, override=True)
        else:
            load_dotenv(override=False)
        return cls.from_env()
