"""Configuration settings for rustcja."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

# Bundled phrase data (English -> Japanese)
DEFAULT_PHRASES_PATH = Path(__file__).resolve().parent / "data" / "translate.json"

DEFAULT_DEBUG_LOG_NAME = "rustc-ja-wrapper-debug.log"

# Environment overrides
PHRASES_ENV = "RUSTC_JA_PHRASES"
EXTRA_PHRASES_ENV = "RUSTC_JA_EXTRA_PHRASES"
DEBUG_LOG_ENV = "RUSTC_JA_DEBUG_LOG"
LOG_LEVEL_ENV = "RUSTC_JA_LOG_LEVEL"

# rustc flag that switches diagnostics to JSON lines
JSON_ERROR_FORMAT_FLAG = "--error-format=json"

# Discriminant for records that carry a compiler diagnostic
DIAGNOSTIC_MESSAGE_TYPE = "diagnostic"


@dataclass
class Settings:
    """Application settings."""

    # Phrase data
    phrases_path: Path = field(default_factory=lambda: DEFAULT_PHRASES_PATH)
    extra_phrase_paths: list[Path] = field(default_factory=list)

    # Debug log (None disables)
    debug_log_path: Path | None = field(
        default_factory=lambda: Path(tempfile.gettempdir()) / DEFAULT_DEBUG_LOG_NAME
    )
    log_level: str = "DEBUG"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings, honouring RUSTC_JA_* environment overrides.

        An empty RUSTC_JA_DEBUG_LOG disables the debug log file.
        """
        settings = cls()

        phrases = os.environ.get(PHRASES_ENV)
        if phrases:
            settings.phrases_path = Path(phrases).expanduser()

        extra = os.environ.get(EXTRA_PHRASES_ENV)
        if extra:
            settings.extra_phrase_paths = [
                Path(p).expanduser() for p in extra.split(os.pathsep) if p
            ]

        if DEBUG_LOG_ENV in os.environ:
            debug_log = os.environ[DEBUG_LOG_ENV]
            settings.debug_log_path = Path(debug_log).expanduser() if debug_log else None

        level = os.environ.get(LOG_LEVEL_ENV)
        if level:
            settings.log_level = level.upper()

        return settings

    @property
    def all_phrase_paths(self) -> list[Path]:
        """Main phrase file followed by any extra files."""
        return [self.phrases_path, *self.extra_phrase_paths]
