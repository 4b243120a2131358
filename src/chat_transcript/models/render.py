"""Render-side data models.

Defines the directives the resolver produces for the presentation layer:

- :class:`MessageConfig` -- per-slot renderer identity and HTML flag,
  merged from the built-in defaults and caller overrides.
- :class:`CapabilityHooks` -- opaque callables forwarded to views.
- :class:`RenderConfiguration` -- the resolved directive for one item.
- :class:`FAQEntry` -- one question/answer pair from the FAQ CSV.

These are plain frozen dataclasses: they are computed fresh on every
render pass and never serialised.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from chat_transcript.models.transcript import TranscriptItem


class ComponentKind(str, Enum):
    """Visual category an item resolves to."""

    PARTICIPANT_MESSAGE = "ParticipantMessageView"
    SYSTEM_MESSAGE = "SystemMessageView"
    IMAGE_ATTACHMENT = "ImageAttachmentView"
    SUPPRESSED = "Suppressed"


class TextAlign(str, Enum):
    LEFT = "left"
    CENTER = "center"


class ConfigSlot(str, Enum):
    """Keys of the default and override configuration tables.

    Participant and attachment messages share a component kind but keep
    separate slots so callers can restyle them independently.
    """

    PARTICIPANT_MESSAGE = "participantMessageConfig"
    ATTACHMENT_MESSAGE = "attachmentMessageConfig"
    SYSTEM_MESSAGE = "systemMessageConfig"
    IMAGE_MESSAGE = "imageMessageConfig"


# A renderer is either the name of a registered presentation component or
# a caller-supplied callable taking the resolved configuration.
Renderer = Union[str, Callable[["RenderConfiguration"], Any]]

ConfigOverrides = Mapping[Union[ConfigSlot, str], Mapping[str, Any]]


@dataclass(frozen=True)
class MessageConfig:
    """Rendering defaults for one configuration slot.

    Attributes:
        renderer: Registered component name or render callable.
        is_html: Whether rendered content must be interpreted as markup.
    """

    renderer: Renderer
    is_html: bool = False


@dataclass(frozen=True)
class CapabilityHooks:
    """Caller-supplied capabilities forwarded to message views.

    The engine selects which hooks reach which view but never calls them.

    Attributes:
        download_attachment: Fetches an attachment for display or saving.
        add_message: Sends an outgoing message.
        send_read_receipt: Reports that a message has been seen.
        text_input_ref: Handle to the text input, for focus management.
    """

    download_attachment: Callable[..., Any] | None = None
    add_message: Callable[..., Any] | None = None
    send_read_receipt: Callable[..., Any] | None = None
    text_input_ref: Any = None


@dataclass(frozen=True)
class RenderConfiguration:
    """Resolved rendering directive for a single transcript item.

    Attributes:
        component_kind: The visual category chosen by the classifier.
        key: Stable identity key (``id.version.receiptType``).
        item: The transcript item being rendered.
        renderer: Component name or render callable from the merged config.
        is_raw_html: Whether content is markup rather than plain text.
        text_align: Horizontal alignment of the message box.
        extra_props: Capability hooks and flags for the view.
        image_url: Trimmed URL for inline images, else ``None``.
        display_name: File name shown under inline images, else ``None``.
    """

    component_kind: ComponentKind
    key: str
    item: TranscriptItem
    renderer: Renderer | None = None
    is_raw_html: bool = False
    text_align: TextAlign = TextAlign.LEFT
    extra_props: Mapping[str, Any] = field(default_factory=dict)
    image_url: str | None = None
    display_name: str | None = None

    @property
    def is_suppressed(self) -> bool:
        """Whether the item produces no visual output."""
        return self.component_kind is ComponentKind.SUPPRESSED


@dataclass(frozen=True)
class FAQEntry:
    """A question/answer pair from the FAQ CSV.

    Attributes:
        id: Zero-based row index after the header, stable within one load.
        question: Question text with quote characters removed.
        answer: Answer text with quote characters removed.
    """

    id: int
    question: str
    answer: str
