"""Console presentation layer for resolved transcripts.

Consumes the coordinator's :class:`~chat_transcript.coordinator.TranscriptView`
and turns each :class:`~chat_transcript.models.render.RenderConfiguration`
into text by calling its renderer: either a registered component name
(``ParticipantMessage``, ``SystemMessage``, ``ImageAttachment``) or a
callable supplied through the override table.

The primary entry point is :func:`format_transcript_view`, which returns
the formatted string.  :func:`print_transcript_view` is a convenience
wrapper that writes directly to stdout.
"""

from __future__ import annotations

import html
import re
import sys
from collections.abc import Callable
from typing import Protocol

from chat_transcript import events
from chat_transcript.coordinator import TranscriptView
from chat_transcript.exceptions import UnknownRendererError
from chat_transcript.faq import FAQPanel
from chat_transcript.models.render import RenderConfiguration, TextAlign
from chat_transcript.models.transcript import Direction

_BANNER_WIDTH = 60
_SEPARATOR = "=" * _BANNER_WIDTH
_TAG_RE = re.compile(r"<[^>]+>")


class MessageRenderer(Protocol):
    def __call__(self, config: RenderConfiguration) -> str: ...


# ---------------------------------------------------------------------------
# Registered components
# ---------------------------------------------------------------------------


def _sender(config: RenderConfiguration) -> str:
    item = config.item
    name = item.display_name or item.participant_role or "Unknown"
    if item.transport_details.direction is Direction.OUTGOING:
        return f"{name} (you)"
    return name


def render_participant_message(config: RenderConfiguration) -> str:
    """Render a participant or attachment message as ``[sender] text``."""
    data = config.item.content.data
    body = data if data else f"<attachment: {config.item.content.type or 'unknown'}>"
    return f"[{_sender(config)}] {body}"


_EVENT_TEMPLATES = {
    events.PARTICIPANT_JOINED: "{name} has joined the chat",
    events.PARTICIPANT_LEFT: "{name} has left the chat",
    events.PARTICIPANT_IDLE: "{name} has become idle",
    events.PARTICIPANT_RETURNED: "{name} has returned",
    events.CHAT_ENDED: "Chat has ended",
    events.TRANSFER_SUCCEEDED: "Transfer succeeded",
    events.TRANSFER_FAILED: "Transfer failed",
}


def render_system_message(config: RenderConfiguration) -> str:
    """Render an event row such as ``Alice has joined the chat``."""
    item = config.item
    template = _EVENT_TEMPLATES.get(item.content.type)
    if template is None:
        return item.content.data or item.content.type
    return template.format(name=item.display_name or item.participant_role or "Participant")


def render_image_attachment(config: RenderConfiguration) -> str:
    """Render an inline image as its file name and link."""
    return f"[{_sender(config)}] [image] {config.display_name} <{config.image_url}>"


COMPONENTS: dict[str, MessageRenderer] = {
    "ParticipantMessage": render_participant_message,
    "SystemMessage": render_system_message,
    "ImageAttachment": render_image_attachment,
}


def resolve_renderer(config: RenderConfiguration) -> Callable[[RenderConfiguration], object]:
    """Return the callable that renders *config*.

    Raises:
        UnknownRendererError: If the renderer is a name with no registered
            component.
    """
    renderer = config.renderer
    if callable(renderer):
        return renderer
    try:
        return COMPONENTS[str(renderer)]
    except KeyError:
        raise UnknownRendererError(str(renderer)) from None


def render_message(config: RenderConfiguration) -> str:
    """Render one configuration, interpreting markup when ``is_raw_html``."""
    text = str(resolve_renderer(config)(config))
    if config.is_raw_html:
        text = html.unescape(_TAG_RE.sub("", text))
    return text


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def format_transcript_view(view: TranscriptView, width: int = _BANNER_WIDTH) -> str:
    """Render a :class:`TranscriptView` as console text.

    Sections: banner, FAQ panel (only when FAQ data is available), the
    transcript body, and typing indicators.

    Args:
        view: Output of a coordinator render pass.
        width: Line width used for separators and centered rows.

    Returns:
        A multi-line string ready for console display.
    """
    separator = "=" * width
    lines: list[str] = [separator, "  CHAT TRANSCRIPT", separator]

    if view.faq is not None:
        _append_faq(lines, view.faq)
        lines.append("-" * width)

    if not view.body_visible:
        lines.append("(transcript not available)")
    else:
        for config in view.messages:
            text = render_message(config)
            if config.text_align is TextAlign.CENTER:
                text = text.center(width).rstrip()
            lines.append(text)
        for typing in view.typing:
            lines.append(f"{typing.display_name or typing.participant_id} is typing...")

    lines.append(separator)
    return "\n".join(lines)


def print_transcript_view(view: TranscriptView) -> None:
    """Format and print a :class:`TranscriptView` to stdout."""
    sys.stdout.write(format_transcript_view(view) + "\n")


def _append_faq(lines: list[str], faq: FAQPanel) -> None:
    marker = "v" if faq.expanded else ">"
    lines.append(f"FAQ {marker}")
    if not faq.expanded:
        return
    for entry in faq.entries:
        lines.append(f"  {entry.id + 1}. {entry.question}")
        if faq.is_entry_expanded(entry.id):
            lines.append(f"     {entry.answer}")
