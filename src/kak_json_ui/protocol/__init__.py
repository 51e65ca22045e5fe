"""Typed codec for the kakoune JSON UI protocol (``kak -ui json``)."""

from kak_json_ui.protocol import incoming as incoming
from kak_json_ui.protocol import outgoing as outgoing
from kak_json_ui.protocol.codec import decode_incoming as decode_incoming
from kak_json_ui.protocol.codec import encode_outgoing as encode_outgoing
from kak_json_ui.protocol.face import Atom as Atom
from kak_json_ui.protocol.face import Attribute as Attribute
from kak_json_ui.protocol.face import Color as Color
from kak_json_ui.protocol.face import Coord as Coord
from kak_json_ui.protocol.face import Face as Face
from kak_json_ui.protocol.face import Line as Line
from kak_json_ui.protocol.face import NamedColor as NamedColor
from kak_json_ui.protocol.face import Rgb as Rgb
from kak_json_ui.protocol.face import Rgba as Rgba
from kak_json_ui.protocol.face import format_color as format_color
from kak_json_ui.protocol.face import parse_attribute as parse_attribute
from kak_json_ui.protocol.face import parse_color as parse_color
from kak_json_ui.protocol.incoming import IncomingRequest as IncomingRequest
from kak_json_ui.protocol.outgoing import OutgoingRequest as OutgoingRequest
