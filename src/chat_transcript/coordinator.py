"""Transcript coordinator.

Wires the resolver and the FAQ loader together for one chat widget:

1. **Mount** -- once per lifecycle, probe for the FAQ CSV and load it.
2. **Render** -- on every transcript change, resolve each item, drop the
   suppressed ones, and forward typing indicators.

The coordinator owns only UI state (FAQ panel toggles and availability).
Transcript data is supplied wholesale by the transport layer on every
pass.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

import httpx

from chat_transcript.csv_parser import parse_faq_csv
from chat_transcript.events import is_recognized_event as default_event_predicate
from chat_transcript.exceptions import FAQLoadError
from chat_transcript.faq import DEFAULT_FAQ_PATHS, FAQPanel, load_faq, probe_faq
from chat_transcript.models.render import (
    CapabilityHooks,
    ConfigOverrides,
    FAQEntry,
    RenderConfiguration,
)
from chat_transcript.models.transcript import (
    ContactStatus,
    TranscriptItem,
    TranscriptSnapshot,
    TypingIndicator,
)
from chat_transcript.resolver import resolve

_VISIBLE_STATUSES: frozenset[str] = frozenset(
    {ContactStatus.CONNECTED.value, ContactStatus.ACW.value, ContactStatus.ENDED.value}
)


def is_body_visible(contact_status: str | ContactStatus) -> bool:
    """Return ``True`` if the transcript body is shown for *contact_status*."""
    if isinstance(contact_status, ContactStatus):
        contact_status = contact_status.value
    return contact_status in _VISIBLE_STATUSES


@dataclass(frozen=True)
class TranscriptView:
    """Output of a single render pass.

    Attributes:
        messages: Resolved configurations of visible items, in order.
        typing: Typing indicators, forwarded unchanged.
        body_visible: Whether the contact status allows showing the body.
        faq: Copy of the FAQ panel state, or ``None`` when FAQ is absent.
    """

    messages: list[RenderConfiguration] = field(default_factory=list)
    typing: list[TypingIndicator] = field(default_factory=list)
    body_visible: bool = False
    faq: FAQPanel | None = None


class TranscriptCoordinator:
    """Drives render passes and FAQ availability for one chat widget.

    Args:
        overrides: Caller override table for message configuration.
        hooks: Capability hooks forwarded to message views.
        http_client: Client used to probe and load the FAQ CSV.  Without
            one, :meth:`mount` leaves the FAQ absent.
        faq_paths: Ordered FAQ candidate paths.
        logger: Logger for render statistics and FAQ outcomes.
        is_recognized_event: Predicate for system-message event types.
    """

    def __init__(
        self,
        overrides: ConfigOverrides | None = None,
        hooks: CapabilityHooks | None = None,
        http_client: httpx.AsyncClient | None = None,
        faq_paths: Iterable[str] = DEFAULT_FAQ_PATHS,
        logger: logging.Logger | None = None,
        is_recognized_event: Callable[[str], bool] = default_event_predicate,
    ) -> None:
        self.overrides = overrides
        self.hooks = hooks
        self._http_client = http_client
        self._faq_paths = tuple(faq_paths)
        self._logger = logger or logging.getLogger(__name__)
        self._is_recognized_event = is_recognized_event
        self._faq = FAQPanel()
        self._faq_available = False
        self._mounted = False

    # ------------------------------------------------------------------
    # FAQ
    # ------------------------------------------------------------------

    @property
    def faq_available(self) -> bool:
        return self._faq_available

    async def mount(self) -> None:
        """Probe for the FAQ CSV and load it.

        Runs once; later calls return immediately.  Every failure leaves
        the FAQ absent and is logged, never raised.
        """
        if self._mounted:
            return
        self._mounted = True

        if self._http_client is None:
            self._logger.info("No HTTP client configured, FAQ panel disabled")
            return

        path = await probe_faq(self._http_client, self._faq_paths)
        if path is None:
            self._logger.info("FAQ file not found at any of: %s", ", ".join(self._faq_paths))
            return

        try:
            entries = await load_faq(self._http_client, path)
        except (FAQLoadError, httpx.HTTPError) as exc:
            self._logger.info("Failed to load FAQ data, FAQ panel disabled: %s", exc)
            return

        self._install_faq(entries, source=path)

    def load_faq_text(self, text: str, source: str = "<string>") -> None:
        """Install FAQ data from an already-fetched CSV payload."""
        self._install_faq(parse_faq_csv(text), source=source)

    def _install_faq(self, entries: list[FAQEntry], source: str) -> None:
        if not entries:
            self._logger.info("FAQ data from %s has no entries, FAQ panel disabled", source)
            return
        self._faq = FAQPanel(entries=entries, expanded=self._faq.expanded)
        self._faq_available = True
        self._logger.info("FAQ data loaded from %s: %d entries", source, len(entries))

    def toggle_faq(self) -> None:
        """Open or close the FAQ panel."""
        self._faq.toggle()

    def toggle_faq_entry(self, entry_id: int) -> None:
        """Show or hide the answer of one FAQ entry."""
        self._faq.toggle_entry(entry_id)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(
        self,
        transcript: Sequence[TranscriptItem],
        typing_participants: Sequence[TypingIndicator],
        contact_status: str | ContactStatus,
    ) -> TranscriptView:
        """Resolve a full render pass.

        Args:
            transcript: Ordered transcript items for this pass.
            typing_participants: Participants currently typing.
            contact_status: Current contact status.  The body is only shown
                while connected, in after-contact work, or ended.

        Returns:
            A :class:`TranscriptView` with visible messages and typing
            indicators (both empty when the body is hidden).
        """
        faq = self._faq_snapshot()

        if not is_body_visible(contact_status):
            self._logger.debug("Transcript body hidden for contact status %r", contact_status)
            return TranscriptView(faq=faq)

        last_index = len(transcript) - 1
        messages: list[RenderConfiguration] = []
        suppressed = 0
        for index, item in enumerate(transcript):
            config = resolve(
                item,
                overrides=self.overrides,
                is_latest=index == last_index,
                hooks=self.hooks,
                is_recognized_event=self._is_recognized_event,
            )
            if config.is_suppressed:
                suppressed += 1
                continue
            messages.append(config)

        self._logger.debug(
            "Rendered %d item(s): %d visible, %d suppressed, %d typing",
            len(transcript),
            len(messages),
            suppressed,
            len(typing_participants),
        )

        return TranscriptView(
            messages=messages,
            typing=list(typing_participants),
            body_visible=True,
            faq=faq,
        )

    def render_snapshot(self, snapshot: TranscriptSnapshot) -> TranscriptView:
        """Render a :class:`TranscriptSnapshot` from the transport layer."""
        return self.render(
            snapshot.transcript,
            snapshot.typing_participants,
            snapshot.contact_status,
        )

    def _faq_snapshot(self) -> FAQPanel | None:
        if not self._faq_available:
            return None
        return FAQPanel(
            entries=list(self._faq.entries),
            expanded=self._faq.expanded,
            expanded_entries=set(self._faq.expanded_entries),
        )
