"""Decode editor → frontend messages from a file or stdin."""

import logging
import sys
from collections.abc import Iterable
from pathlib import Path

import typer

from kak_json_ui.app_context import AppContext, use_context
from kak_json_ui.errors import CodecError
from kak_json_ui.protocol import decode_incoming

logger = logging.getLogger(__name__)


def decode(
    ctx: typer.Context,
    source: Path | None = typer.Argument(default=None, help="File with one JSON message per line (default: stdin)"),
    *,
    skip: bool = typer.Option(default=False, help="Skip malformed lines instead of aborting (also: skip_malformed in config.toml)"),
) -> None:
    """Decode JSON UI messages sent by kakoune, one per line."""
    app = use_context(ctx)
    skip_malformed = skip or app.cfg.skip_malformed

    if source is None:
        _decode_lines(app, sys.stdin.buffer, skip_malformed=skip_malformed)
        return
    if not source.is_file():
        app.out.print_error_and_exit("not_found", f"File not found: {source}")
    # binary, so undecodable lines reach the codec as malformed messages
    with source.open("rb") as f:
        _decode_lines(app, f, skip_malformed=skip_malformed)


def _decode_lines(app: AppContext, lines: Iterable[bytes], *, skip_malformed: bool) -> None:
    """Decode and print each non-blank line, skipping or aborting on codec errors."""
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            request = decode_incoming(line)
        except CodecError as e:
            if not skip_malformed:
                logger.error("Line %d: %s", line_number, e)
                app.out.print_error_and_exit(e.code, f"Line {line_number}: {e}")
            logger.warning("Skipping line %d: %s", line_number, e)
            app.out.print_skipped(line_number, e.code, str(e))
            continue
        logger.debug("Line %d: %s", line_number, request.METHOD)
        app.out.print_request(request)
