"""Custom exceptions for the chat-transcript renderer.

The classification engine and the CSV parser never raise; these exceptions
only cover the I/O edges (snapshot loading, FAQ fetching) and the
presentation layer's component lookup.
"""

from __future__ import annotations


class TranscriptLoadError(Exception):
    """Raised when a transcript snapshot cannot be decoded or validated.

    Covers JSON decode failures and Pydantic schema validation errors.
    The CLI catches this and exits with status 1.

    Attributes:
        source: Label of the snapshot origin (file path or ``"<string>"``).
    """

    def __init__(self, message: str, source: str = "<string>") -> None:
        super().__init__(message)
        self.source = source


class FAQLoadError(Exception):
    """Raised when the FAQ resource answers with a non-success status.

    The coordinator catches this and treats the FAQ panel as absent.

    Attributes:
        path: The candidate path that was requested.
        status_code: HTTP status code of the response.
    """

    def __init__(self, message: str, path: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.status_code = status_code


class UnknownRendererError(Exception):
    """Raised when a render configuration names an unregistered component."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No renderer registered for component {name!r}")
        self.name = name
