"""Unit tests for the transcript coordinator.

Tests cover: contact-status gating, latest-item flag, suppression of
unrecognised items, typing forwarding, hook and override pass-through,
FAQ mounting over mocked HTTP, and FAQ panel toggles.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import httpx
import pytest

from chat_transcript import events
from chat_transcript.coordinator import TranscriptCoordinator, is_body_visible
from chat_transcript.models.render import CapabilityHooks, ComponentKind, ConfigSlot
from chat_transcript.models.transcript import (
    ContactStatus,
    TranscriptItem,
    TranscriptSnapshot,
    TypingIndicator,
)

MakeItem = Callable[..., TranscriptItem]

FAQ_CSV = "question,answer\nHours?,9-5\nRefunds?,30 days\n"


def _transcript(make_item: MakeItem) -> list[TranscriptItem]:
    return [
        make_item(item_id="e1", item_type="EVENT", content_type=events.PARTICIPANT_JOINED, data=None),
        make_item(item_id="m1", data="Hi, I need help"),
        make_item(item_id="t1", item_type="EVENT", content_type=events.TYPING, data=None),
        make_item(item_id="m2", data="https://x.com/screens/error.png"),
        make_item(item_id="a1", item_type="ATTACHMENT_MESSAGE", content_type="application/pdf", data=None),
    ]


def _typing() -> list[TypingIndicator]:
    return [TypingIndicator(participant_id="agent-1", display_name="Bob", direction="Incoming")]


def _faq_client(status: int = 200, body: str = FAQ_CSV) -> httpx.AsyncClient:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, text=body)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://chat.test")


# ---------------------------------------------------------------------------
# Contact status gating
# ---------------------------------------------------------------------------


class TestContactStatusGating:
    """The body is only shown for connected, acw and ended contacts."""

    @pytest.mark.parametrize("status", ["connected", "acw", "ended", ContactStatus.ENDED])
    def test_visible_statuses(self, status: str) -> None:
        """Visible statuses, as strings or enum members."""
        assert is_body_visible(status)

    @pytest.mark.parametrize("status", ["connecting", "disconnected", "", "CONNECTED", "bogus"])
    def test_hidden_statuses(self, status: str) -> None:
        """Any other status hides the body."""
        assert not is_body_visible(status)

    def test_hidden_status_renders_empty_body(self, make_item: MakeItem) -> None:
        """Transcript and typing are dropped when the body is hidden."""
        view = TranscriptCoordinator().render(_transcript(make_item), _typing(), "connecting")

        assert view.body_visible is False
        assert view.messages == []
        assert view.typing == []


# ---------------------------------------------------------------------------
# Render pass
# ---------------------------------------------------------------------------


class TestRender:
    """Resolving a full transcript."""

    def test_suppressed_items_are_dropped(self, make_item: MakeItem) -> None:
        """The typing event row produces no message."""
        view = TranscriptCoordinator().render(_transcript(make_item), [], "connected")

        assert [m.item.id for m in view.messages] == ["e1", "m1", "m2", "a1"]
        assert [m.component_kind for m in view.messages] == [
            ComponentKind.SYSTEM_MESSAGE,
            ComponentKind.PARTICIPANT_MESSAGE,
            ComponentKind.IMAGE_ATTACHMENT,
            ComponentKind.PARTICIPANT_MESSAGE,
        ]

    def test_only_last_item_is_latest(self, make_item: MakeItem) -> None:
        """is_latest_message is set only for the final transcript element."""
        view = TranscriptCoordinator().render(_transcript(make_item), [], "connected")

        flags = {
            m.item.id: m.extra_props["is_latest_message"]
            for m in view.messages
            if "is_latest_message" in m.extra_props
        }
        assert flags == {"m1": False, "a1": True}

    def test_latest_is_by_position_even_if_suppressed(self, make_item: MakeItem) -> None:
        """A suppressed final item still takes the latest flag from earlier items."""
        transcript = [
            make_item(item_id="m1"),
            make_item(item_id="x", item_type="OTHER", content_type="unknown/type"),
        ]

        view = TranscriptCoordinator().render(transcript, [], "connected")

        assert view.messages[0].extra_props["is_latest_message"] is False

    def test_typing_forwarded_in_order(self, make_item: MakeItem) -> None:
        """Typing indicators pass through unchanged."""
        typing = [
            TypingIndicator(participant_id="p1", display_name="Bob"),
            TypingIndicator(participant_id="p2", display_name="Carol"),
        ]

        view = TranscriptCoordinator().render([], typing, "connected")

        assert view.typing == typing
        assert view.body_visible is True

    def test_hooks_and_overrides_passed_through(self, make_item: MakeItem) -> None:
        """Coordinator-level hooks and overrides reach the resolver."""

        def receipt(*_args: object) -> None:
            """Stub read receipt hook."""

        coordinator = TranscriptCoordinator(
            overrides={ConfigSlot.PARTICIPANT_MESSAGE: {"is_html": True}},
            hooks=CapabilityHooks(send_read_receipt=receipt),
        )

        view = coordinator.render([make_item()], [], "connected")

        assert view.messages[0].is_raw_html is True
        assert view.messages[0].extra_props["send_read_receipt"] is receipt

    def test_overrides_can_change_between_passes(self, make_item: MakeItem) -> None:
        """Replacing the override table affects the next pass."""
        coordinator = TranscriptCoordinator()
        first = coordinator.render([make_item()], [], "connected")

        coordinator.overrides = {"participantMessageConfig": {"isHTML": True}}
        second = coordinator.render([make_item()], [], "connected")

        assert first.messages[0].is_raw_html is False
        assert second.messages[0].is_raw_html is True

    def test_render_snapshot(self, make_item: MakeItem) -> None:
        """A transport snapshot renders like its parts."""
        snapshot = TranscriptSnapshot(
            transcript=[make_item()],
            typing_participants=_typing(),
            contact_status="ended",
        )

        view = TranscriptCoordinator().render_snapshot(snapshot)

        assert len(view.messages) == 1
        assert view.typing[0].display_name == "Bob"

    def test_render_logs_summary_to_injected_logger(
        self, make_item: MakeItem, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Render statistics go to the injected logger at DEBUG."""
        logger = logging.getLogger("test.coordinator")
        coordinator = TranscriptCoordinator(logger=logger)

        with caplog.at_level(logging.DEBUG, logger="test.coordinator"):
            coordinator.render(_transcript(make_item), [], "connected")

        assert "5 item(s): 4 visible, 1 suppressed" in caplog.text


# ---------------------------------------------------------------------------
# FAQ
# ---------------------------------------------------------------------------


class TestFaq:
    """FAQ availability and panel state."""

    def test_faq_absent_by_default(self) -> None:
        """Before mount, no FAQ panel is rendered."""
        coordinator = TranscriptCoordinator()

        assert coordinator.faq_available is False
        assert coordinator.render([], [], "connected").faq is None

    @pytest.mark.asyncio
    async def test_mount_loads_faq(self) -> None:
        """A reachable FAQ file becomes available after mount."""
        async with _faq_client() as client:
            coordinator = TranscriptCoordinator(http_client=client)
            await coordinator.mount()

        view = coordinator.render([], [], "connected")
        assert coordinator.faq_available is True
        assert view.faq is not None
        assert [e.question for e in view.faq.entries] == ["Hours?", "Refunds?"]
        assert view.faq.expanded is True

    @pytest.mark.asyncio
    async def test_mount_without_client_leaves_faq_absent(self) -> None:
        """No HTTP client means no FAQ, and no error."""
        coordinator = TranscriptCoordinator()

        await coordinator.mount()

        assert coordinator.faq_available is False

    @pytest.mark.asyncio
    async def test_mount_all_candidates_fail(self, caplog: pytest.LogCaptureFixture) -> None:
        """404 everywhere leaves FAQ absent and logs a notice."""
        async with _faq_client(status=404) as client:
            coordinator = TranscriptCoordinator(http_client=client)
            with caplog.at_level(logging.INFO, logger="chat_transcript.coordinator"):
                await coordinator.mount()

        assert coordinator.faq_available is False
        assert "FAQ file not found" in caplog.text

    @pytest.mark.asyncio
    async def test_mount_empty_faq_is_absent(self) -> None:
        """A header-only FAQ file counts as no FAQ."""
        async with _faq_client(body="question,answer\n") as client:
            coordinator = TranscriptCoordinator(http_client=client)
            await coordinator.mount()

        assert coordinator.faq_available is False

    @pytest.mark.asyncio
    async def test_mount_load_failure_is_swallowed(self) -> None:
        """A probe hit followed by a failed load leaves FAQ absent."""
        calls: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request.url.path)
            if len(calls) == 1:
                return httpx.Response(200, text=FAQ_CSV)
            raise httpx.ConnectError("gone", request=request)

        async with httpx.AsyncClient(
            transport=httpx.MockTransport(handler), base_url="http://chat.test"
        ) as client:
            coordinator = TranscriptCoordinator(http_client=client)
            await coordinator.mount()

        assert coordinator.faq_available is False
        assert len(calls) == 2

    @pytest.mark.asyncio
    async def test_mount_runs_once(self) -> None:
        """A second mount does not probe again."""
        calls: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request.url.path)
            return httpx.Response(200, text=FAQ_CSV)

        async with httpx.AsyncClient(
            transport=httpx.MockTransport(handler), base_url="http://chat.test"
        ) as client:
            coordinator = TranscriptCoordinator(http_client=client, faq_paths=["/faq.csv"])
            await coordinator.mount()
            await coordinator.mount()

        # One probe request plus one load request.
        assert calls == ["/faq.csv", "/faq.csv"]

    def test_load_faq_text(self) -> None:
        """Pre-fetched CSV text installs FAQ data directly."""
        coordinator = TranscriptCoordinator()

        coordinator.load_faq_text(FAQ_CSV)

        assert coordinator.faq_available is True

    def test_faq_shown_even_when_body_hidden(self) -> None:
        """The FAQ panel does not depend on contact status."""
        coordinator = TranscriptCoordinator()
        coordinator.load_faq_text(FAQ_CSV)

        view = coordinator.render([], [], "connecting")

        assert view.body_visible is False
        assert view.faq is not None

    def test_toggles_reflected_in_next_view(self) -> None:
        """Panel and entry toggles show up in later renders only."""
        coordinator = TranscriptCoordinator()
        coordinator.load_faq_text(FAQ_CSV)
        before = coordinator.render([], [], "connected")

        coordinator.toggle_faq()
        coordinator.toggle_faq_entry(1)
        after = coordinator.render([], [], "connected")

        assert before.faq is not None and after.faq is not None
        assert before.faq.expanded is True
        assert before.faq.expanded_entries == set()
        assert after.faq.expanded is False
        assert after.faq.expanded_entries == {1}
