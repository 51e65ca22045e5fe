"""Decode incoming and encode outgoing kakoune JSON UI messages.

Decoding is split into a fallible structural step (envelope, arity, then pydantic
validation into a wire model) and an infallible relabeling step that turns the
positional params into the named fields of the domain request. Encoding is the
mirror image and never fails for well-formed requests.
"""

import json
from typing import Any, assert_never

from pydantic import ValidationError

from kak_json_ui.errors import CodecError
from kak_json_ui.protocol import incoming, outgoing
from kak_json_ui.protocol.wire import (
    INCOMING_ARITY,
    WireDraw,
    WireDrawStatus,
    WireIncoming,
    WireInfoHide,
    WireInfoShow,
    WireKeys,
    WireMenuHide,
    WireMenuSelect,
    WireMenuShow,
    WireMouseMove,
    WireMousePress,
    WireMouseRelease,
    WireOutgoing,
    WireOutgoingMenuSelect,
    WireRefresh,
    WireResize,
    WireScroll,
    WireSetCursor,
    WireSetUiOptions,
    incoming_adapter,
)


def decode_incoming(data: bytes | str) -> incoming.IncomingRequest:
    """Deserialize one JSON line sent by the editor into an incoming request.

    Raises:
        CodecError: Malformed message (kind: ``malformed_message``), unknown color
            (kind: ``invalid_color``) or unknown attribute (kind: ``invalid_attribute``).

    """
    message = _load_object(data)
    method = _check_envelope(message)
    try:
        wire = incoming_adapter.validate_python(message)
    except ValidationError as e:
        raise _translate_validation_error(e, method) from None
    return relabel_incoming(wire)


def encode_outgoing(request: outgoing.OutgoingRequest) -> bytes:
    """Serialize an outgoing request to a newline-terminated JSON bytes line."""
    return relabel_outgoing(request).model_dump_json().encode() + b"\n"


def relabel_incoming(wire: WireIncoming) -> incoming.IncomingRequest:
    """Map positional wire params onto the named fields of the incoming request."""
    match wire:
        case WireDraw(params=(lines, default_face, padding_face)):
            return incoming.Draw(lines=lines, default_face=default_face, padding_face=padding_face)
        case WireDrawStatus(params=(status_line, mode_line, default_face)):
            return incoming.DrawStatus(status_line=status_line, mode_line=mode_line, default_face=default_face)
        case WireMenuShow(params=(items, anchor, selected_item_face, menu_face, style)):
            return incoming.MenuShow(
                items=items, anchor=anchor, selected_item_face=selected_item_face, menu_face=menu_face, style=style
            )
        case WireMenuSelect(params=(selected,)):
            return incoming.MenuSelect(selected=selected)
        case WireMenuHide():
            return incoming.MenuHide()
        case WireInfoShow(params=(title, content, anchor, face, style)):
            return incoming.InfoShow(title=title, content=content, anchor=anchor, face=face, style=style)
        case WireInfoHide():
            return incoming.InfoHide()
        case WireSetCursor(params=(mode, coord)):
            return incoming.SetCursor(mode=mode, coord=coord)
        case WireSetUiOptions(params=(options,)):
            return incoming.SetUiOptions(options=options)
        case WireRefresh(params=(force,)):
            return incoming.Refresh(force=force)
        case _:
            assert_never(wire)


def relabel_outgoing(request: outgoing.OutgoingRequest) -> WireOutgoing:
    """Map the named fields of an outgoing request onto positional wire params."""
    match request:
        case outgoing.Keys(keys=keys):
            # Variadic: one slot per key, not a single-element array wrapping the list.
            return WireKeys(params=list(keys))
        case outgoing.Resize(rows=rows, columns=columns):
            return WireResize(params=(rows, columns))
        case outgoing.Scroll(amount=amount):
            return WireScroll(params=(amount,))
        case outgoing.MouseMove(line=line, column=column):
            return WireMouseMove(params=(line, column))
        case outgoing.MousePress(button=button, line=line, column=column):
            return WireMousePress(params=(button, line, column))
        case outgoing.MouseRelease(button=button, line=line, column=column):
            return WireMouseRelease(params=(button, line, column))
        case outgoing.MenuSelect(index=index):
            return WireOutgoingMenuSelect(params=(index,))
        case _:
            assert_never(request)


# --- Structural checks ---


def _load_object(data: bytes | str) -> dict[str, Any]:
    """Parse a JSON line and require a top-level object."""
    try:
        message = json.loads(data)
    except ValueError as e:  # JSONDecodeError and UnicodeDecodeError
        raise CodecError.malformed(f"Message is not valid JSON: {e}") from None
    except RecursionError:
        raise CodecError.malformed("Message is nested too deeply.") from None
    if not isinstance(message, dict):
        raise CodecError.malformed("Message must be a JSON object.")
    return message


def _check_envelope(message: dict[str, Any]) -> str:
    """Check the version marker, the method name and the params arity. Return the method name."""
    if "jsonrpc" not in message:
        raise CodecError.malformed("Missing 'jsonrpc' version marker.")
    method = message.get("method")
    if not isinstance(method, str):
        raise CodecError.malformed("Missing or non-string 'method'.")
    expected = INCOMING_ARITY.get(method)
    if expected is None:
        raise CodecError.malformed(f"Unknown method: {method}", method=method)
    params = message.get("params")
    if not isinstance(params, list):
        raise CodecError.malformed(f"'params' of '{method}' must be an array.", method=method, expected_arity=expected)
    if len(params) != expected:
        raise CodecError.malformed(
            f"'{method}' expects {expected} params, got {len(params)}.",
            method=method,
            expected_arity=expected,
            actual_arity=len(params),
        )
    return method


def _translate_validation_error(exc: ValidationError, method: str) -> CodecError:
    """Turn the first pydantic error into a CodecError."""
    err = exc.errors()[0]
    match err["type"]:
        case "invalid_color":
            return CodecError.invalid_color(err["ctx"]["token"])
        case "invalid_attribute":
            return CodecError.invalid_attribute(err["ctx"]["token"])
        case _:
            # loc starts with the discriminator tag, which is the method name itself
            loc = ".".join(str(part) for part in err["loc"][1:])
            return CodecError.malformed(f"Invalid '{method}' message at {loc}: {err['msg']}", method=method)
