"""Transcript snapshot loader.

Reads the JSON hand-off produced by the transport layer (transcript,
typing participants and contact status) into a validated
:class:`~chat_transcript.models.transcript.TranscriptSnapshot`.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from chat_transcript.exceptions import TranscriptLoadError
from chat_transcript.models.transcript import TranscriptSnapshot


def parse_snapshot(text: str, source: str = "<string>") -> TranscriptSnapshot:
    """Parse a snapshot JSON document.

    Args:
        text: JSON text with ``transcript``, ``typingParticipants`` and
            ``contactStatus`` keys (camelCase or snake_case).
        source: Label for the snapshot origin, used in error messages.

    Returns:
        The validated :class:`TranscriptSnapshot`.

    Raises:
        TranscriptLoadError: If *text* is not valid JSON or does not match
            the snapshot schema.
    """
    try:
        return TranscriptSnapshot.model_validate_json(text)
    except ValidationError as exc:
        raise TranscriptLoadError(
            f"Invalid transcript snapshot in {source}: {exc.error_count()} error(s)\n{exc}",
            source=source,
        ) from exc


def parse_snapshot_file(file_path: str | Path) -> TranscriptSnapshot:
    """Parse a snapshot file read as UTF-8.

    Raises:
        FileNotFoundError: If *file_path* does not exist.
        TranscriptLoadError: If the file is not UTF-8 or its content is not
            a valid snapshot.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Snapshot file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise TranscriptLoadError(
            f"Snapshot file {path} is not valid UTF-8: {exc}",
            source=str(path),
        ) from exc

    return parse_snapshot(text, source=str(path))
