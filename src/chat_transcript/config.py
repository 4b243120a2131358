"""Configuration loading for chat-transcript.

Reads settings from environment variables (with .env support via
python-dotenv).  Nothing is required; every variable that *is* set gets
validated, and all problems are reported together.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from chat_transcript.faq import DEFAULT_FAQ_PATHS


class ConfigError(Exception):
    """Raised when configuration values are invalid."""


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Attributes:
        log_level: Logging level (default ``"INFO"``).
        faq_base_url: Base URL the FAQ candidate paths are resolved
            against, or ``None`` when FAQ probing over HTTP is disabled.
        faq_paths: Ordered FAQ candidate paths.
    """

    log_level: str = "INFO"
    faq_base_url: str | None = None
    faq_paths: tuple[str, ...] = DEFAULT_FAQ_PATHS


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Calls :func:`dotenv.load_dotenv` so a ``.env`` file in the project root
    is picked up automatically.

    Returns:
        A validated :class:`Settings` instance.

    Raises:
        ConfigError: If ``LOG_LEVEL`` is not a logging level name or
            ``FAQ_BASE_URL`` is not an http(s) URL.  The message names
            **all** invalid variables.
    """
    load_dotenv()

    values: dict[str, object] = {}
    problems: list[str] = []

    log_level = os.environ.get("LOG_LEVEL", "").strip()
    if log_level:
        if isinstance(logging.getLevelName(log_level.upper()), int):
            values["log_level"] = log_level.upper()
        else:
            problems.append(f"LOG_LEVEL={log_level!r} is not a logging level")

    base_url = os.environ.get("FAQ_BASE_URL", "").strip()
    if base_url:
        if base_url.startswith(("http://", "https://")):
            values["faq_base_url"] = base_url
        else:
            problems.append(f"FAQ_BASE_URL={base_url!r} must be an http(s) URL")

    raw_paths = os.environ.get("FAQ_PATHS", "")
    paths = tuple(p.strip() for p in raw_paths.split(",") if p.strip())
    if paths:
        values["faq_paths"] = paths

    if problems:
        raise ConfigError("Invalid configuration: " + "; ".join(problems))

    return Settings(**values)  # type: ignore[arg-type]
