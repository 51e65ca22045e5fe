"""Colors, attributes, faces, atoms and coordinates of the kakoune JSON UI.

Faces only ever flow editor → frontend, so these types are decoded from the wire
but never encoded into an outgoing request.

Color tokens:  "red", "default", "rgb:ff0000", "rgba:ff000080"
Face:          {"fg": "red", "bg": "default", "attributes": ["bold", "underline"]}
Atom:          {"face": {...}, "contents": "text"}
Coord:         {"line": 0, "column": 4}
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, PlainValidator, StrictInt, StrictStr
from pydantic_core import PydanticCustomError

from kak_json_ui.errors import CodecError

RGB_PREFIX = "rgb:"
RGBA_PREFIX = "rgba:"


class NamedColor(StrEnum):
    """One of the nine color keywords."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    PURPLE = "purple"
    CYAN = "cyan"
    WHITE = "white"
    DEFAULT = "default"


@dataclass(frozen=True, slots=True)
class Rgb:
    """Color given as ``rgb:<payload>``. The payload is kept verbatim."""

    payload: str


@dataclass(frozen=True, slots=True)
class Rgba:
    """Color given as ``rgba:<payload>``. The payload is kept verbatim."""

    payload: str


Color = NamedColor | Rgb | Rgba


class Attribute(StrEnum):
    """Face attribute; the value is the wire token."""

    UNDERLINE = "underline"
    REVERSE = "reverse"
    BLINK = "blink"
    BOLD = "bold"
    DIM = "dim"
    ITALIC = "italic"
    FINAL_FG = "final_fg"
    FINAL_BG = "final_bg"
    FINAL_ATTR = "final_attr"


def parse_color(token: str) -> Color:
    """Decode a color token: keyword first, then ``rgb:`` / ``rgba:`` prefix.

    Raises:
        CodecError: Token is neither a keyword nor prefixed (kind: ``invalid_color``).

    """
    if token in NamedColor:
        return NamedColor(token)
    if token.startswith(RGBA_PREFIX):
        return Rgba(token[len(RGBA_PREFIX) :])
    if token.startswith(RGB_PREFIX):
        return Rgb(token[len(RGB_PREFIX) :])
    raise CodecError.invalid_color(token)


def format_color(color: Color) -> str:
    """Encode a color back into its wire token."""
    match color:
        case Rgb(payload=payload):
            return RGB_PREFIX + payload
        case Rgba(payload=payload):
            return RGBA_PREFIX + payload
        case _:
            return color.value


def parse_attribute(token: str) -> Attribute:
    """Decode an attribute token.

    Raises:
        CodecError: Unknown token (kind: ``invalid_attribute``).

    """
    if token not in Attribute:
        raise CodecError.invalid_attribute(token)
    return Attribute(token)


# --- pydantic glue ---
# Codec errors surface as custom pydantic error types; the codec maps them back to CodecError.


def _validate_color(value: object) -> Color:
    if isinstance(value, Rgb | Rgba | NamedColor):
        return value
    if not isinstance(value, str):
        raise PydanticCustomError("string_type", "Color should be a string")
    try:
        return parse_color(value)
    except CodecError:
        raise PydanticCustomError("invalid_color", "Invalid color '{token}'", {"token": value}) from None


def _validate_attribute(value: object) -> Attribute:
    if isinstance(value, Attribute):
        return value
    if not isinstance(value, str):
        raise PydanticCustomError("string_type", "Attribute should be a string")
    try:
        return parse_attribute(value)
    except CodecError:
        raise PydanticCustomError("invalid_attribute", "Invalid attribute '{token}'", {"token": value}) from None


ColorField = Annotated[Color, PlainValidator(_validate_color), PlainSerializer(format_color, return_type=str)]
AttributeField = Annotated[Attribute, PlainValidator(_validate_attribute)]
Uint = Annotated[StrictInt, Field(ge=0, lt=2**32)]


class Face(BaseModel):
    """Foreground, background and an ordered list of attributes (duplicates kept)."""

    model_config = ConfigDict(frozen=True)

    fg: ColorField = Field(description="Foreground color")
    bg: ColorField = Field(description="Background color")
    attributes: tuple[AttributeField, ...] = Field(description="Attributes in wire order")


class Atom(BaseModel):
    """A run of text drawn with a single face."""

    model_config = ConfigDict(frozen=True)

    face: Face
    contents: StrictStr


# Atoms in rendering order, left to right.
Line = tuple[Atom, ...]


class Coord(BaseModel):
    """0-indexed buffer or screen position."""

    model_config = ConfigDict(frozen=True)

    line: Uint
    column: Uint
