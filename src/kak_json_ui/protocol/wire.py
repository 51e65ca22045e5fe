"""Wire shapes of the kakoune JSON UI messages.

Each message is one JSON-RPC 2.0 notification with positional params:

Incoming:  {"jsonrpc": "2.0", "method": "set_cursor", "params": ["buffer", {"line": 0, "column": 4}]}
Outgoing:  {"jsonrpc": "2.0", "method": "resize", "params": [24, 80]}

These models are an implementation detail of the codec and are not re-exported.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, TypeAdapter

from kak_json_ui.protocol.face import Coord, Face, Line, Uint

PROTOCOL_VERSION = "2.0"


class IncomingEnvelope(BaseModel):
    """Version marker of a received message: must be present, value not inspected."""

    model_config = ConfigDict(frozen=True)

    jsonrpc: Any


class OutgoingEnvelope(BaseModel):
    """Version marker of a sent message: always the fixed protocol version."""

    model_config = ConfigDict(frozen=True)

    jsonrpc: Literal["2.0"] = PROTOCOL_VERSION


# --- Incoming (editor → frontend) ---


class WireDraw(IncomingEnvelope):
    method: Literal["draw"]
    params: tuple[tuple[Line, ...], Face, Face]


class WireDrawStatus(IncomingEnvelope):
    method: Literal["draw_status"]
    params: tuple[Line, Line, Face]


class WireMenuShow(IncomingEnvelope):
    method: Literal["menu_show"]
    params: tuple[tuple[Line, ...], Coord, Face, Face, StrictStr]


class WireMenuSelect(IncomingEnvelope):
    method: Literal["menu_select"]
    params: tuple[Uint]


class WireMenuHide(IncomingEnvelope):
    method: Literal["menu_hide"]
    params: tuple[()]


class WireInfoShow(IncomingEnvelope):
    method: Literal["info_show"]
    params: tuple[Line, tuple[Line, ...], Coord, Face, StrictStr]


class WireInfoHide(IncomingEnvelope):
    method: Literal["info_hide"]
    params: tuple[()]


class WireSetCursor(IncomingEnvelope):
    method: Literal["set_cursor"]
    params: tuple[StrictStr, Coord]


class WireSetUiOptions(IncomingEnvelope):
    method: Literal["set_ui_options"]
    params: tuple[dict[StrictStr, StrictStr]]


class WireRefresh(IncomingEnvelope):
    method: Literal["refresh"]
    params: tuple[StrictBool]


WireIncoming = Annotated[
    WireDraw
    | WireDrawStatus
    | WireMenuShow
    | WireMenuSelect
    | WireMenuHide
    | WireInfoShow
    | WireInfoHide
    | WireSetCursor
    | WireSetUiOptions
    | WireRefresh,
    Field(discriminator="method"),
]

# Method name → params arity.
INCOMING_ARITY: dict[str, int] = {
    "draw": 3,
    "draw_status": 3,
    "menu_show": 5,
    "menu_select": 1,
    "menu_hide": 0,
    "info_show": 5,
    "info_hide": 0,
    "set_cursor": 2,
    "set_ui_options": 1,
    "refresh": 1,
}

incoming_adapter = TypeAdapter(WireIncoming)


# --- Outgoing (frontend → editor) ---


class WireKeys(OutgoingEnvelope):
    method: Literal["keys"] = "keys"
    params: list[str]


class WireResize(OutgoingEnvelope):
    method: Literal["resize"] = "resize"
    params: tuple[int, int]


class WireScroll(OutgoingEnvelope):
    method: Literal["scroll"] = "scroll"
    params: tuple[int]


class WireMouseMove(OutgoingEnvelope):
    method: Literal["mouse_move"] = "mouse_move"
    params: tuple[int, int]


class WireMousePress(OutgoingEnvelope):
    method: Literal["mouse_press"] = "mouse_press"
    params: tuple[str, int, int]


class WireMouseRelease(OutgoingEnvelope):
    method: Literal["mouse_release"] = "mouse_release"
    params: tuple[str, int, int]


class WireOutgoingMenuSelect(OutgoingEnvelope):
    method: Literal["menu_select"] = "menu_select"
    params: tuple[int]


WireOutgoing = (
    WireKeys | WireResize | WireScroll | WireMouseMove | WireMousePress | WireMouseRelease | WireOutgoingMenuSelect
)
