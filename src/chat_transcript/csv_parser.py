"""FAQ CSV parser.

Parses text with a header row followed by ``question,answer`` rows into
:class:`~chat_transcript.models.render.FAQEntry` objects.  Fields may be
wrapped in double quotes to protect embedded commas.

Known simplifications, kept on purpose because existing FAQ files rely on
them:

- every ``"`` is removed from field text; doubled quotes are not decoded
  as an escaped quote.
- lines are split before quote scanning, so a quoted field cannot span
  multiple lines.
"""

from __future__ import annotations

from pathlib import Path

from chat_transcript.models.render import FAQEntry


def parse_csv_line(line: str) -> list[str]:
    """Split one CSV line into fields, honouring double-quoted commas.

    The quote characters themselves are dropped while scanning.  A line
    always yields at least one field (an empty line yields ``[""]``).
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)

    fields.append("".join(current))
    return fields


def parse_faq_csv(text: str) -> list[FAQEntry]:
    """Parse FAQ CSV text into ordered entries.

    Args:
        text: Raw CSV text.  The first line is a header and is skipped
            without checking its columns.

    Returns:
        One :class:`FAQEntry` per data row, in file order.  ``id`` is the
        zero-based row index after the header.  Rows with fewer than two
        fields get empty strings for the missing ones.
    """
    if not text or not text.strip():
        return []

    lines = text.strip().split("\n")

    entries: list[FAQEntry] = []
    for index, line in enumerate(lines[1:]):
        values = parse_csv_line(line.rstrip("\r"))
        question = values[0] if len(values) > 0 else ""
        answer = values[1] if len(values) > 1 else ""
        entries.append(
            FAQEntry(
                id=index,
                question=question.replace('"', ""),
                answer=answer.replace('"', ""),
            )
        )
    return entries


def parse_faq_file(file_path: str | Path) -> list[FAQEntry]:
    """Parse an FAQ CSV file read as UTF-8.

    Raises:
        FileNotFoundError: If *file_path* does not exist.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"FAQ file not found: {path}")

    return parse_faq_csv(path.read_text(encoding="utf-8"))
