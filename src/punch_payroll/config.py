"""Configuration management for punch payroll."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment."""

    input_path: str | None
    allow_negative_durations: bool
    log_level: str
    output_indent: int

    def __post_init__(self) -> None:
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"log level must be one of {', '.join(LOG_LEVELS)}, "
                f"got {self.log_level!r}"
            )

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment variables."""
        load_dotenv()

        return cls(
            input_path=os.getenv("PAYROLL_INPUT_PATH") or None,
            allow_negative_durations=_env_bool("PAYROLL_ALLOW_NEGATIVE_DURATIONS"),
            log_level=os.getenv("PAYROLL_LOG_LEVEL", "WARNING").strip().upper(),
            output_indent=int(os.getenv("PAYROLL_OUTPUT_INDENT", "2")),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()
