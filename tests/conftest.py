"""Shared fixtures for chat-transcript tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from typing import Any

import pytest

from chat_transcript.models.transcript import TranscriptItem


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all chat-transcript environment variables.

    Patches ``load_dotenv`` so a real ``.env`` file cannot re-inject values
    that the test explicitly removed.
    """
    monkeypatch.setattr("chat_transcript.config.load_dotenv", lambda *_a, **_kw: None)
    for key in ("LOG_LEVEL", "FAQ_BASE_URL", "FAQ_PATHS"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def make_item() -> Callable[..., TranscriptItem]:
    """Factory for transcript items using transport-style camelCase input."""

    def _make(
        item_id: str = "msg-1",
        version: int = 0,
        item_type: str = "PARTICIPANT_MESSAGE",
        content_type: str = "text/plain",
        data: str | None = "Hello",
        direction: str = "Incoming",
        receipt_type: str | None = None,
        display_name: str = "Alice",
        **extra: Any,
    ) -> TranscriptItem:
        payload: dict[str, Any] = {
            "id": item_id,
            "version": version,
            "type": item_type,
            "content": {"type": content_type, "data": data},
            "transportDetails": {
                "direction": direction,
                "messageReceiptType": receipt_type,
            },
            "displayName": display_name,
        }
        payload.update(extra)
        return TranscriptItem.model_validate(payload)

    return _make


@pytest.fixture(autouse=True)
def _reset_root_logger() -> Generator[None, None, None]:
    """Reset the root logger after each test to prevent handler leaks."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
