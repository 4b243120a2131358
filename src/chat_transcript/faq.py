"""FAQ resource discovery, loading and panel state.

The FAQ CSV lives at one of a few well-known locations relative to the
page that hosts the chat.  :func:`probe_faq` tries them in order and stops
at the first that answers; :func:`load_faq` fetches and parses it.  Both
take an :class:`httpx.AsyncClient` so callers control base URL, transport
and timeouts.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

import httpx

from chat_transcript.csv_parser import parse_faq_csv
from chat_transcript.exceptions import FAQLoadError
from chat_transcript.models.render import FAQEntry

logger = logging.getLogger(__name__)

DEFAULT_FAQ_PATHS: tuple[str, ...] = ("./faq.csv", "/faq.csv", "faq.csv")


async def probe_faq(
    client: httpx.AsyncClient,
    paths: Iterable[str] = DEFAULT_FAQ_PATHS,
) -> str | None:
    """Return the first candidate path that answers with a 2xx status.

    Candidates are requested strictly one after another.  Transport errors
    and non-success responses move on to the next candidate.

    Args:
        client: HTTP client used for the requests.
        paths: Ordered candidate paths or URLs.

    Returns:
        The winning path, or ``None`` if no candidate answered.
    """
    for path in paths:
        try:
            response = await client.get(path)
        except httpx.HTTPError as exc:
            logger.debug("FAQ candidate %s failed: %s", path, exc)
            continue

        if response.is_success:
            logger.info("FAQ file found at: %s", path)
            return path

        logger.debug("FAQ candidate %s answered %d", path, response.status_code)

    return None


async def load_faq(client: httpx.AsyncClient, path: str) -> list[FAQEntry]:
    """Fetch the FAQ CSV at *path* and parse it.

    Raises:
        FAQLoadError: If the server answers with a non-success status.
        httpx.HTTPError: On transport failures.
    """
    response = await client.get(path)
    if not response.is_success:
        raise FAQLoadError(
            f"FAQ request for {path} returned {response.status_code}",
            path=path,
            status_code=response.status_code,
        )
    return parse_faq_csv(response.text)


@dataclass
class FAQPanel:
    """UI state of the FAQ panel.

    Attributes:
        entries: Loaded FAQ entries, in file order.
        expanded: Whether the panel itself is open.
        expanded_entries: Ids of entries whose answers are shown.
    """

    entries: list[FAQEntry] = field(default_factory=list)
    expanded: bool = True
    expanded_entries: set[int] = field(default_factory=set)

    def toggle(self) -> None:
        self.expanded = not self.expanded

    def toggle_entry(self, entry_id: int) -> None:
        """Show or hide the answer for *entry_id*."""
        if entry_id in self.expanded_entries:
            self.expanded_entries.discard(entry_id)
        else:
            self.expanded_entries.add(entry_id)

    def is_entry_expanded(self, entry_id: int) -> bool:
        return entry_id in self.expanded_entries
