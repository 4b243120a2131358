"""Transport-facing data models for chat transcripts.

The transport layer hands over camelCase JSON; these Pydantic models accept
that shape (and snake_case field names) and normalise it.  Unknown item
types collapse to :attr:`ItemType.OTHER`, unknown directions to
:attr:`Direction.INCOMING` and a null content type to ``""`` instead of
failing validation, so that the resolver decides what to do with them.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

_MODEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
)


class ItemType(str, Enum):
    """Transport-level type of a transcript item."""

    PARTICIPANT_MESSAGE = "PARTICIPANT_MESSAGE"
    ATTACHMENT_MESSAGE = "ATTACHMENT_MESSAGE"
    OTHER = "OTHER"


class Direction(str, Enum):
    """Whether a message was sent by this participant or received."""

    INCOMING = "Incoming"
    OUTGOING = "Outgoing"


class ContactStatus(str, Enum):
    """Lifecycle status of the chat contact, as reported by the transport."""

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    ACW = "acw"
    ENDED = "ended"


def _direction_or_incoming(value: object) -> object:
    """Treat missing or unknown directions as incoming."""
    if isinstance(value, Direction):
        return value
    if isinstance(value, str) and value in {d.value for d in Direction}:
        return value
    return Direction.INCOMING


class Content(BaseModel):
    """Payload of a transcript item.

    Attributes:
        type: MIME-like content type, e.g. ``"text/plain"`` or an event
            content type.
        data: Text payload.  May be plain text, markup, or a bare URL.
    """

    model_config = _MODEL_CONFIG

    type: str = ""
    data: str | None = None

    @field_validator("type", mode="before")
    @classmethod
    def _none_type_to_empty(cls, value: object) -> object:
        return "" if value is None else value


class TransportDetails(BaseModel):
    """Delivery metadata attached by the transport layer."""

    model_config = _MODEL_CONFIG

    direction: Direction = Direction.INCOMING
    message_receipt_type: str | None = None

    @field_validator("direction", mode="before")
    @classmethod
    def _coerce_direction(cls, value: object) -> object:
        return _direction_or_incoming(value)


class TranscriptItem(BaseModel):
    """One message or event in a chat session.

    ``id``, ``version`` and ``transport_details.message_receipt_type``
    together identify the visual slot the item occupies.

    Attributes:
        id: Transport identifier of the item.
        version: Change counter; bumps when the item is edited.
        type: Transport-level item type.
        content: The payload.
        transport_details: Direction and receipt metadata.
        display_name: Name of the participant who sent the item.
        participant_role: Role of the sender (``"CUSTOMER"``, ``"AGENT"``...).
    """

    model_config = _MODEL_CONFIG

    id: str
    version: int = 0
    type: ItemType = ItemType.OTHER
    content: Content = Field(default_factory=Content)
    transport_details: TransportDetails = Field(default_factory=TransportDetails)
    display_name: str = ""
    participant_role: str = ""

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_unknown_type(cls, value: object) -> object:
        """Map item types this renderer does not know about to OTHER."""
        if isinstance(value, ItemType):
            return value
        if isinstance(value, str) and value in {t.value for t in ItemType}:
            return value
        return ItemType.OTHER


class TypingIndicator(BaseModel):
    """A participant currently typing.  Replaced wholesale each render pass."""

    model_config = _MODEL_CONFIG

    participant_id: str
    display_name: str = ""
    direction: Direction = Direction.INCOMING

    @field_validator("direction", mode="before")
    @classmethod
    def _coerce_direction(cls, value: object) -> object:
        return _direction_or_incoming(value)


class TranscriptSnapshot(BaseModel):
    """Everything the transport layer supplies for a single render pass."""

    model_config = _MODEL_CONFIG

    transcript: list[TranscriptItem] = Field(default_factory=list)
    typing_participants: list[TypingIndicator] = Field(default_factory=list)
    contact_status: str = ContactStatus.CONNECTED.value
