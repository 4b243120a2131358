"""Event content types that render as centered system messages."""

from __future__ import annotations

_EVENT_PREFIX = "application/vnd.amazonaws.connect.event."

PARTICIPANT_JOINED = _EVENT_PREFIX + "participant.joined"
PARTICIPANT_LEFT = _EVENT_PREFIX + "participant.left"
PARTICIPANT_IDLE = _EVENT_PREFIX + "participant.idle"
PARTICIPANT_RETURNED = _EVENT_PREFIX + "participant.returned"
CHAT_ENDED = _EVENT_PREFIX + "chat.ended"
TRANSFER_SUCCEEDED = _EVENT_PREFIX + "transfer.succeeded"
TRANSFER_FAILED = _EVENT_PREFIX + "transfer.failed"

# Typing and delivery/read receipts are events too, but they never get a
# row of their own in the transcript.
TYPING = _EVENT_PREFIX + "typing"
MESSAGE_DELIVERED = _EVENT_PREFIX + "message.delivered"
MESSAGE_READ = _EVENT_PREFIX + "message.read"

RECOGNIZED_EVENTS: frozenset[str] = frozenset(
    {
        PARTICIPANT_JOINED,
        PARTICIPANT_LEFT,
        PARTICIPANT_IDLE,
        PARTICIPANT_RETURNED,
        CHAT_ENDED,
        TRANSFER_SUCCEEDED,
        TRANSFER_FAILED,
    }
)


def is_recognized_event(content_type: str | None) -> bool:
    """Return ``True`` if *content_type* is an event shown as a system message."""
    return content_type in RECOGNIZED_EVENTS
