"""Data models for chat-transcript."""

from __future__ import annotations

from chat_transcript.models.render import (
    CapabilityHooks,
    ComponentKind,
    ConfigOverrides,
    ConfigSlot,
    FAQEntry,
    MessageConfig,
    RenderConfiguration,
    TextAlign,
)
from chat_transcript.models.transcript import (
    Content,
    ContactStatus,
    Direction,
    ItemType,
    TranscriptItem,
    TranscriptSnapshot,
    TransportDetails,
    TypingIndicator,
)

__all__ = [
    "CapabilityHooks",
    "ComponentKind",
    "ConfigOverrides",
    "ConfigSlot",
    "ContactStatus",
    "Content",
    "Direction",
    "FAQEntry",
    "ItemType",
    "MessageConfig",
    "RenderConfiguration",
    "TextAlign",
    "TranscriptItem",
    "TranscriptSnapshot",
    "TransportDetails",
    "TypingIndicator",
]
