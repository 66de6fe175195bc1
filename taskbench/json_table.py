"""Two-column table of user cities and latitudes, filled from a JSON feed."""

from __future__ import annotations

import json
import socket
from enum import IntEnum
from typing import Any

_COLUMN_COUNT = 2
_SEPARATOR = b"\r\n\r\n"
_TIMEOUT = 30.0


class Role(IntEnum):
    """Kinds of data a cell can provide."""

    DATA = 257
    COLOR = 258


def _as_object(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _as_string(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _to_double(text: str) -> float:
    try:
        return float(text.strip())
    except ValueError:
        return 0.0


class JsonTableModel:
    """Rows of (city, latitude) taken from a list of user records."""

    def __init__(self) -> None:
        self._rows: list[tuple[str, str]] = []

    def set_json_data(self, document: Any) -> None:
        """Append a row for every record of a JSON array; other documents add nothing."""
        if isinstance(document, (str, bytes, bytearray)):
            try:
                document = json.loads(document)
            except ValueError:
                return
        if not isinstance(document, list):
            return
        for item in document:
            address = _as_object(_as_object(item).get("address"))
            city = _as_string(address.get("city"))
            latitude = _as_string(_as_object(address.get("geo")).get("lat"))
            self._rows.append((city, latitude))

    def row_count(self) -> int:
        return len(self._rows)

    def column_count(self) -> int:
        return _COLUMN_COUNT

    def data(self, row: int, column: int, role: int) -> str | None:
        """Cell text for ``Role.DATA``, a colour name for ``Role.COLOR``, else ``None``."""
        if not (0 <= row < len(self._rows) and 0 <= column < _COLUMN_COUNT):
            return None
        if role == Role.DATA:
            return self._rows[row][column]
        if role == Role.COLOR:
            if column != _COLUMN_COUNT - 1:
                return "white"
            return "green" if _to_double(self._rows[row][column]) >= 0 else "red"
        return None

    def role_names(self) -> dict[Role, str]:
        return {Role.DATA: "table_data", Role.COLOR: "color_warning"}


def extract_json_body(response: bytes) -> Any:
    """Parse the JSON body of a raw HTTP response; ``None`` if absent or invalid."""
    index = response.find(_SEPARATOR)
    if index == -1:
        return None
    try:
        return json.loads(response[index:])
    except ValueError:
        return None


def fetch_users(host: str, port: int) -> Any:
    """Request ``/users`` over plain HTTP/1.0 and return the parsed body."""
    request = f"GET /users HTTP/1.0\nHOST: {host}\n\n".encode("ascii")
    chunks: list[bytes] = []
    with socket.create_connection((host, port), timeout=_TIMEOUT) as conn:
        conn.sendall(request)
        while chunk := conn.recv(4096):
            chunks.append(chunk)
    return extract_json_body(b"".join(chunks))