import socket
from unittest.mock import patch

import pytest

from toybox import webserver
from toybox.webserver import build_response, handle_connection, route


def _read_all(sock):
    chunks = []
    while True:
        chunk = sock.recv(4096)
        if not chunk:
            return b"".join(chunks)
        chunks.append(chunk)


@pytest.fixture
def pages(tmp_path):
    (tmp_path / "hello.html").write_text("<h1>Hello!</h1>", encoding="utf-8")
    (tmp_path / "404.html").write_text("<h1>Oops!</h1>", encoding="utf-8")
    return tmp_path


def test_route_root():
    assert route("GET / HTTP/1.1") == ("HTTP/1.1 200 OK", "hello.html")


def test_route_unknown_path():
    assert route("GET /missing HTTP/1.1") == ("HTTP/1.1 404 NOT FOUND", "404.html")


def test_route_sleep_waits_then_serves_hello():
    with patch("toybox.webserver.time.sleep") as sleep:
        result = route("GET /sleep HTTP/1.1")
    assert result == ("HTTP/1.1 200 OK", "hello.html")
    sleep.assert_called_once_with(webserver.SLEEP_SECONDS)


def test_build_response_layout():
    response = build_response("HTTP/1.1 200 OK", "hi")
    assert response == b"HTTP/1.1 200 OK\r\nContent-Length: 2\r\n\r\nhi"


def test_build_response_counts_bytes():
    contents = "caf\u00e9"
    response = build_response("HTTP/1.1 200 OK", contents)
    head, body = response.split(b"\r\n\r\n", 1)
    assert body == contents.encode("utf-8")
    assert head.endswith(f"Content-Length: {len(body)}".encode())


def test_handle_connection_serves_hello(pages):
    client, server = socket.socketpair()
    with client, server:
        client.sendall(b"GET / HTTP/1.1\r\nHost: localhost\r\n\r\n")
        handle_connection(server, pages)
        server.shutdown(socket.SHUT_WR)
        data = _read_all(client)
    assert data == build_response("HTTP/1.1 200 OK", "<h1>Hello!</h1>")


def test_handle_connection_serves_not_found(pages):
    client, server = socket.socketpair()
    with client, server:
        client.sendall(b"GET /nope HTTP/1.1\r\n\r\n")
        handle_connection(server, pages)
        server.shutdown(socket.SHUT_WR)
        data = _read_all(client)
    assert data.startswith(b"HTTP/1.1 404 NOT FOUND\r\n")
    assert data.endswith(b"<h1>Oops!</h1>")


def test_handle_connection_empty_request(pages):
    client, server = socket.socketpair()
    with client, server:
        client.shutdown(socket.SHUT_WR)
        with pytest.raises(ValueError):
            handle_connection(server, pages)


def test_handle_connection_missing_file(tmp_path):
    client, server = socket.socketpair()
    with client, server:
        client.sendall(b"GET / HTTP/1.1\r\n\r\n")
        with pytest.raises(FileNotFoundError):
            handle_connection(server, tmp_path)