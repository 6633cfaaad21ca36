"""A tiny HTTP server that answers from two HTML files."""

from __future__ import annotations

import argparse
import functools
import socket
import sys
import time
from pathlib import Path

from toybox.threadpool import ThreadPool

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 7878
DEFAULT_WORKERS = 4
SLEEP_SECONDS = 5

OK = "HTTP/1.1 200 OK"
NOT_FOUND = "HTTP/1.1 404 NOT FOUND"


def route(request_line: str) -> tuple[str, str]:
    """Map a request line to (status line, file name).

    ``GET /sleep`` waits SLEEP_SECONDS before answering.
    """
    if request_line == "GET / HTTP/1.1":
        return OK, "hello.html"
    if request_line == "GET /sleep HTTP/1.1":
        time.sleep(SLEEP_SECONDS)
        return OK, "hello.html"
    return NOT_FOUND, "404.html"


def build_response(status_line: str, contents: str) -> bytes:
    """Encode a response carrying ``contents`` with its byte length."""
    body = contents.encode("utf-8")
    head = f"{status_line}\r\nContent-Length: {len(body)}\r\n\r\n".encode("utf-8")
    return head + body


def handle_connection(connection: socket.socket, root: str | Path) -> None:
    """Read one request line from ``connection`` and send the matching file.

    Raises ValueError when the client sends nothing, and OSError when the
    file cannot be read.
    """
    with connection.makefile("rb") as reader:
        raw = reader.readline()
    if not raw:
        raise ValueError("connection closed before a request line arrived")
    request_line = raw.decode("utf-8").rstrip("\n").rstrip("\r")
    status_line, filename = route(request_line)
    contents = (Path(root) / filename).read_text(encoding="utf-8")
    connection.sendall(build_response(status_line, contents))


def _serve_one(connection: socket.socket, root: Path) -> None:
    with connection:
        handle_connection(connection, root)


def serve(
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    workers: int = DEFAULT_WORKERS,
    root: str | Path = ".",
) -> None:
    """Accept connections until interrupted, handling each on the pool."""
    root = Path(root)
    with socket.create_server((host, port)) as listener, ThreadPool(workers) as pool:
        try:
            while True:
                connection, _ = listener.accept()
                pool.execute(functools.partial(_serve_one, connection, root))
        except KeyboardInterrupt:
            pass
        print("Shutting down.")


def main(argv: list[str] | None = None) -> int:
    """Serve hello.html and 404.html from a directory."""
    parser = argparse.ArgumentParser(description="Serve two HTML pages.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--workers", type=int, default=DEFAULT_WORKERS)
    parser.add_argument("--root", default=".", help="directory holding the pages")
    args = parser.parse_args(argv)
    serve(args.host, args.port, args.workers, args.root)
    return 0


if __name__ == "__main__":
    sys.exit(main())