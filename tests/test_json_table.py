import json
import socket
import threading

import pytest

from taskbench.json_table import (
    JsonTableModel,
    Role,
    extract_json_body,
    fetch_users,
)

USERS = [
    {"address": {"city": "Springfield", "geo": {"lat": "-37.3159"}}},
    {"address": {"city": "Shelbyville", "geo": {"lat": "42.5"}}},
]


def test_rows_from_users():
    model = JsonTableModel()
    model.set_json_data(USERS)
    assert model.row_count() == 2
    assert model.column_count() == 2
    assert model.data(0, 0, Role.DATA) == "Springfield"
    assert model.data(0, 1, Role.DATA) == "-37.3159"
    assert model.data(1, 0, Role.DATA) == "Shelbyville"


def test_colors():
    model = JsonTableModel()
    model.set_json_data(USERS)
    assert model.data(0, 1, Role.COLOR) == "red"
    assert model.data(1, 1, Role.COLOR) == "green"
    assert model.data(0, 0, Role.COLOR) == "white"


def test_missing_fields_become_empty():
    model = JsonTableModel()
    model.set_json_data([{"name": "x"}, 5, {"address": {"city": 7}}])
    assert model.row_count() == 3
    assert model.data(0, 0, Role.DATA) == ""
    assert model.data(1, 1, Role.DATA) == ""
    assert model.data(2, 0, Role.DATA) == ""
    assert model.data(2, 1, Role.COLOR) == "green"


def test_non_array_adds_nothing():
    model = JsonTableModel()
    model.set_json_data({"address": {}})
    model.set_json_data("not json")
    assert model.row_count() == 0


def test_text_document_is_parsed_and_rows_accumulate():
    model = JsonTableModel()
    model.set_json_data(json.dumps(USERS))
    model.set_json_data(USERS)
    assert model.row_count() == 4
    assert model.data(3, 0, Role.DATA) == "Shelbyville"


def test_invalid_index_and_role():
    model = JsonTableModel()
    model.set_json_data(USERS)
    assert model.data(2, 0, Role.DATA) is None
    assert model.data(0, 2, Role.DATA) is None
    assert model.data(0, 0, 0) is None


def test_role_names():
    names = JsonTableModel().role_names()
    assert names == {Role.DATA: "table_data", Role.COLOR: "color_warning"}


def test_extract_json_body():
    assert extract_json_body(b"HTTP/1.0 200 OK\r\n\r\n[1, 2]") == [1, 2]
    assert extract_json_body(b"HTTP/1.0 200 OK\r\n[1]") is None
    assert extract_json_body(b"HTTP/1.0 200 OK\r\n\r\n{broken") is None


@pytest.mark.timeout(10)
def test_fetch_users_from_local_server():
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(1)
    port = server.getsockname()[1]
    received = []

    def serve():
        conn, _ = server.accept()
        with conn:
            data = b""
            while not data.endswith(b"\n\n"):
                chunk = conn.recv(1024)
                if not chunk:
                    break
                data += chunk
            received.append(data)
            body = json.dumps(USERS).encode()
            conn.sendall(b"HTTP/1.0 200 OK\r\nContent-Type: application/json\r\n\r\n" + body)

    thread = threading.Thread(target=serve)
    thread.start()
    try:
        users = fetch_users("127.0.0.1", port)
    finally:
        thread.join()
        server.close()

    assert users == USERS
    assert received[0].startswith(b"GET /users HTTP/1.0\n")
    model = JsonTableModel()
    model.set_json_data(users)
    assert model.row_count() == len(USERS)