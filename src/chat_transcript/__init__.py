"""chat-transcript: customer-service chat transcript renderer.

Classifies transcript items, resolves their rendering configuration with
caller overrides, and loads the FAQ panel from a CSV resource.
"""

from __future__ import annotations

from chat_transcript.coordinator import TranscriptCoordinator, TranscriptView
from chat_transcript.csv_parser import parse_csv_line, parse_faq_csv, parse_faq_file
from chat_transcript.exceptions import FAQLoadError, TranscriptLoadError, UnknownRendererError
from chat_transcript.faq import FAQPanel, load_faq, probe_faq
from chat_transcript.loader import parse_snapshot, parse_snapshot_file
from chat_transcript.models.render import (
    CapabilityHooks,
    ComponentKind,
    ConfigSlot,
    FAQEntry,
    MessageConfig,
    RenderConfiguration,
    TextAlign,
)
from chat_transcript.models.transcript import (
    ContactStatus,
    Direction,
    ItemType,
    TranscriptItem,
    TranscriptSnapshot,
    TypingIndicator,
)
from chat_transcript.resolver import build_key, resolve

__version__ = "0.1.0"

__all__ = [
    "CapabilityHooks",
    "ComponentKind",
    "ConfigSlot",
    "ContactStatus",
    "Direction",
    "FAQEntry",
    "FAQLoadError",
    "FAQPanel",
    "ItemType",
    "MessageConfig",
    "RenderConfiguration",
    "TextAlign",
    "TranscriptCoordinator",
    "TranscriptItem",
    "TranscriptLoadError",
    "TranscriptSnapshot",
    "TranscriptView",
    "TypingIndicator",
    "UnknownRendererError",
    "build_key",
    "load_faq",
    "parse_csv_line",
    "parse_faq_csv",
    "parse_faq_file",
    "parse_snapshot",
    "parse_snapshot_file",
    "probe_faq",
    "resolve",
]
