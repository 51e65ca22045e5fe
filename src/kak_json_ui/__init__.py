"""Typed translation layer for kakoune's JSON-RPC UI protocol."""

from kak_json_ui.errors import CodecError as CodecError
from kak_json_ui.errors import ErrorKind as ErrorKind
from kak_json_ui.protocol import IncomingRequest as IncomingRequest
from kak_json_ui.protocol import OutgoingRequest as OutgoingRequest
from kak_json_ui.protocol import decode_incoming as decode_incoming
from kak_json_ui.protocol import encode_outgoing as encode_outgoing
