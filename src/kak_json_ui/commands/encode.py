"""Build frontend → editor messages and print their wire lines."""

import logging

import typer

from kak_json_ui.app_context import use_context
from kak_json_ui.protocol import OutgoingRequest, encode_outgoing, outgoing

logger = logging.getLogger(__name__)


def _emit(ctx: typer.Context, request: OutgoingRequest) -> None:
    """Encode a request and print its wire line."""
    app = use_context(ctx)
    line = encode_outgoing(request)
    logger.debug("Encoded %s (%d bytes)", request.METHOD, len(line))
    app.out.print_encoded(request, line)


def keys(ctx: typer.Context, key: list[str] = typer.Argument(help="Keys in kakoune syntax, e.g. i h i <esc>")) -> None:
    """Send key presses."""
    _emit(ctx, outgoing.Keys(keys=tuple(key)))


def resize(ctx: typer.Context, rows: int, columns: int) -> None:
    """Report the new UI size."""
    _emit(ctx, outgoing.Resize(rows=rows, columns=columns))


def scroll(ctx: typer.Context, amount: int) -> None:
    """Scroll the view by a number of lines."""
    _emit(ctx, outgoing.Scroll(amount=amount))


def mouse_move(ctx: typer.Context, line: int, column: int) -> None:
    """Move the mouse to a screen position."""
    _emit(ctx, outgoing.MouseMove(line=line, column=column))


def mouse_press(ctx: typer.Context, button: str, line: int, column: int) -> None:
    """Press a mouse button (left, middle, right) at a screen position."""
    _emit(ctx, outgoing.MousePress(button=button, line=line, column=column))


def mouse_release(ctx: typer.Context, button: str, line: int, column: int) -> None:
    """Release a mouse button (left, middle, right) at a screen position."""
    _emit(ctx, outgoing.MouseRelease(button=button, line=line, column=column))


def menu_select(ctx: typer.Context, index: int) -> None:
    """Select a menu item by index."""
    _emit(ctx, outgoing.MenuSelect(index=index))
