"""Requests sent by the editor to the UI (editor → frontend), with named fields."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import ClassVar

from kak_json_ui.protocol.face import Coord, Face, Line


@dataclass(frozen=True, slots=True)
class Draw:
    """Redraw the buffer area."""

    METHOD: ClassVar[str] = "draw"

    lines: tuple[Line, ...]
    default_face: Face
    padding_face: Face


@dataclass(frozen=True, slots=True)
class DrawStatus:
    """Redraw the status line and the mode line."""

    METHOD: ClassVar[str] = "draw_status"

    status_line: Line
    mode_line: Line
    default_face: Face


@dataclass(frozen=True, slots=True)
class MenuShow:
    """Show a completion or prompt menu at the given anchor."""

    METHOD: ClassVar[str] = "menu_show"

    items: tuple[Line, ...]
    anchor: Coord
    selected_item_face: Face
    menu_face: Face
    style: str


@dataclass(frozen=True, slots=True)
class MenuSelect:
    """Highlight a menu item."""

    METHOD: ClassVar[str] = "menu_select"

    selected: int


@dataclass(frozen=True, slots=True)
class MenuHide:
    METHOD: ClassVar[str] = "menu_hide"


@dataclass(frozen=True, slots=True)
class InfoShow:
    """Show an info box."""

    METHOD: ClassVar[str] = "info_show"

    title: Line
    content: tuple[Line, ...]
    anchor: Coord
    face: Face
    style: str


@dataclass(frozen=True, slots=True)
class InfoHide:
    METHOD: ClassVar[str] = "info_hide"


@dataclass(frozen=True, slots=True)
class SetCursor:
    """Place the cursor; mode is ``prompt`` or ``buffer``."""

    METHOD: ClassVar[str] = "set_cursor"

    mode: str
    coord: Coord


@dataclass(frozen=True, slots=True)
class SetUiOptions:
    """UI options set by the user through the ``ui_options`` option."""

    METHOD: ClassVar[str] = "set_ui_options"

    options: Mapping[str, str] = field(hash=False)

    def __post_init__(self) -> None:
        # read-only copy of the caller's mapping
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))


@dataclass(frozen=True, slots=True)
class Refresh:
    """Flush drawing; ``force`` requests a full redraw."""

    METHOD: ClassVar[str] = "refresh"

    force: bool


IncomingRequest = (
    Draw | DrawStatus | MenuShow | MenuSelect | MenuHide | InfoShow | InfoHide | SetCursor | SetUiOptions | Refresh
)
