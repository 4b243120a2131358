"""Entry point for ``python -m chat_transcript``.

Provides a CLI that renders a transcript snapshot (the JSON hand-off from
the transport layer) to the console, optionally with an FAQ panel.  Uses
stdlib :mod:`argparse` for argument parsing.

Subcommands:
    render -- Default. Render a snapshot file.

Exit codes:
    0 -- Rendered successfully.
    1 -- An error occurred (file not found, invalid snapshot, config error).
    2 -- Argument parsing error (handled by argparse).
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

import httpx

from chat_transcript.config import ConfigError, Settings, load_settings
from chat_transcript.coordinator import TranscriptCoordinator, TranscriptView
from chat_transcript.exceptions import TranscriptLoadError
from chat_transcript.loader import parse_snapshot_file
from chat_transcript.log import setup_logging
from chat_transcript.models.transcript import TranscriptSnapshot
from chat_transcript.presentation import print_transcript_view


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="chat-transcript",
        description="Render a customer-service chat transcript snapshot.",
    )

    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render a transcript snapshot to the console.",
    )
    render_parser.add_argument(
        "snapshot_file",
        type=str,
        help="Path to the JSON transcript snapshot.",
    )
    render_parser.add_argument(
        "--faq-file",
        type=str,
        default=None,
        help="Load FAQ entries from a local CSV file.",
    )
    render_parser.add_argument(
        "--faq-base-url",
        type=str,
        default=None,
        help=(
            "Probe for faq.csv relative to this URL "
            "(defaults to FAQ_BASE_URL from config)."
        ),
    )
    render_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug-level logging.",
    )

    return parser


def _resolve_command(
    parser: argparse.ArgumentParser,
    argv: list[str],
) -> argparse.Namespace:
    """Parse *argv*, inserting the implicit ``render`` subcommand.

    ``python -m chat_transcript snapshot.json`` is treated as
    ``python -m chat_transcript render snapshot.json``.
    """
    if not argv:
        # Let the "render" subparser report the missing argument.
        argv = ["render"]
    elif argv[0] in {"-h", "--help"}:
        pass
    elif argv[0] != "render":
        argv = ["render", *argv]

    return parser.parse_args(argv)


async def _render_with_remote_faq(
    snapshot: TranscriptSnapshot,
    base_url: str,
    faq_paths: tuple[str, ...],
) -> TranscriptView:
    async with httpx.AsyncClient(base_url=base_url) as client:
        coordinator = TranscriptCoordinator(http_client=client, faq_paths=faq_paths)
        await coordinator.mount()
        return coordinator.render_snapshot(snapshot)


def _handle_render(args: argparse.Namespace, settings: Settings) -> int:
    """Execute the ``render`` subcommand.

    Returns:
        Exit code: ``0`` on success, ``1`` on error.
    """
    snapshot_path = Path(args.snapshot_file)

    if not snapshot_path.exists():
        print(f"Error: File not found: {snapshot_path}", file=sys.stderr)
        return 1

    if not snapshot_path.is_file():
        print(f"Error: Not a file: {snapshot_path}", file=sys.stderr)
        return 1

    try:
        snapshot = parse_snapshot_file(snapshot_path)
    except (TranscriptLoadError, PermissionError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    base_url = args.faq_base_url or settings.faq_base_url

    if args.faq_file is not None:
        faq_path = Path(args.faq_file)
        try:
            faq_text = faq_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Error: Cannot read FAQ file: {exc}", file=sys.stderr)
            return 1
        coordinator = TranscriptCoordinator()
        coordinator.load_faq_text(faq_text, source=str(faq_path))
        view = coordinator.render_snapshot(snapshot)
    elif base_url:
        view = asyncio.run(_render_with_remote_faq(snapshot, base_url, settings.faq_paths))
    else:
        view = TranscriptCoordinator().render_snapshot(snapshot)

    print_transcript_view(view)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the chat-transcript CLI.

    Args:
        argv: Command-line arguments.  Defaults to ``sys.argv[1:]``
            when ``None`` (the normal case).

    Returns:
        Exit code: ``0`` on success, ``1`` on error.
    """
    parser = build_parser()
    args = _resolve_command(parser, argv if argv is not None else sys.argv[1:])

    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    setup_logging("DEBUG" if getattr(args, "verbose", False) else settings.log_level)

    return _handle_render(args, settings)


if __name__ == "__main__":
    raise SystemExit(main())
