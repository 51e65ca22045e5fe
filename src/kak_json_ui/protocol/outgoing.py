"""Requests sent by the UI to the editor (frontend → editor), with named fields."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class Keys:
    """Key presses in kakoune key syntax (e.g. ``a``, ``<c-x>``, ``<esc>``)."""

    METHOD: ClassVar[str] = "keys"

    keys: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Resize:
    METHOD: ClassVar[str] = "resize"

    rows: int
    columns: int


@dataclass(frozen=True, slots=True)
class Scroll:
    METHOD: ClassVar[str] = "scroll"

    amount: int


@dataclass(frozen=True, slots=True)
class MouseMove:
    METHOD: ClassVar[str] = "mouse_move"

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class MousePress:
    """Mouse button pressed; button is ``left``, ``middle`` or ``right``."""

    METHOD: ClassVar[str] = "mouse_press"

    button: str
    line: int
    column: int


@dataclass(frozen=True, slots=True)
class MouseRelease:
    METHOD: ClassVar[str] = "mouse_release"

    button: str
    line: int
    column: int


@dataclass(frozen=True, slots=True)
class MenuSelect:
    """Select a menu item by index."""

    METHOD: ClassVar[str] = "menu_select"

    index: int


OutgoingRequest = Keys | Resize | Scroll | MouseMove | MousePress | MouseRelease | MenuSelect
