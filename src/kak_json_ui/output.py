"""Structured output for CLI and JSON modes."""

# ruff: noqa: T201 — this module is the output layer; print() is its sole mechanism for producing CLI output.

import dataclasses
import json
import sys
from collections.abc import Mapping
from typing import NoReturn

import typer
from pydantic_core import to_jsonable_python

from kak_json_ui.protocol import IncomingRequest, OutgoingRequest


def request_fields(request: IncomingRequest | OutgoingRequest) -> dict[str, object]:
    """Named fields of a request as JSON-compatible data (colors as wire tokens)."""
    fields: dict[str, object] = {}
    for f in dataclasses.fields(request):
        value = getattr(request, f.name)
        fields[f.name] = to_jsonable_python(dict(value) if isinstance(value, Mapping) else value)
    return fields


class Output:
    """Handles all CLI output in JSON or human-readable format."""

    def __init__(self, *, json_mode: bool) -> None:
        """Initialize output handler.

        Args:
            json_mode: If True, output JSON envelopes; otherwise human-readable text.

        """
        self._json_mode = json_mode

    def print_error_and_exit(self, code: str, message: str) -> NoReturn:
        """Print an error in JSON or human-readable format and exit with code 1.

        Raises:
            typer.Exit: Always, with code 1.

        """
        if self._json_mode:
            print(json.dumps({"ok": False, "error": code, "message": message}))
        else:
            print(f"Error: {message}", file=sys.stderr)
        raise typer.Exit(code=1)

    # --- Decode ---

    def print_request(self, request: IncomingRequest) -> None:
        """Print a decoded incoming request: method name and named fields."""
        fields = request_fields(request)
        if self._json_mode:
            print(json.dumps({"ok": True, "data": {"method": request.METHOD, "fields": fields}}))
        else:
            print(f"{request.METHOD} {json.dumps(fields)}" if fields else request.METHOD)

    def print_skipped(self, line_number: int, code: str, message: str) -> None:
        """Report a malformed line that was skipped."""
        if self._json_mode:
            print(json.dumps({"ok": False, "data": {"line": line_number}, "error": code, "message": message}))
        else:
            print(f"Skipped line {line_number}: {message}", file=sys.stderr)

    # --- Encode ---

    def print_encoded(self, request: OutgoingRequest, line: bytes) -> None:
        """Print the wire line of an outgoing request."""
        if self._json_mode:
            print(json.dumps({"ok": True, "data": {"method": request.METHOD, "message": json.loads(line)}}))
        else:
            print(line.decode(), end="")
