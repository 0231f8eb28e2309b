"""A small TCP server that sends back the file a client names."""

from __future__ import annotations

import argparse
import os
import socket
import socketserver
import sys
from typing import Sequence

CHUNK_SIZE = 512
MAX_FILENAME = CHUNK_SIZE - 1
DEFAULT_PORT = 9877
CONCURRENT_PORT = 8080
BACKLOG = 5


def _receive_filename(connection: socket.socket) -> str | None:
    """Read one request from the client; ``None`` if it sent nothing."""
    request = connection.recv(MAX_FILENAME)
    if not request:
        return None
    return os.fsdecode(request)


def _stream(connection: socket.socket, source) -> int:
    sent = 0
    for chunk in iter(lambda: source.read(CHUNK_SIZE), b""):
        connection.sendall(chunk)
        sent += len(chunk)
    return sent


def serve_file(connection: socket.socket) -> int:
    """Read a file name from ``connection`` and send that file's bytes back.

    Returns the number of bytes sent, 0 when the client sent no name.
    Raises ``OSError`` if the file cannot be opened or the send fails.
    """
    filename = _receive_filename(connection)
    if filename is None:
        return 0
    with open(filename, "rb") as source:
        return _stream(connection, source)


class FileRequestHandler(socketserver.BaseRequestHandler):
    """Answers one connection with the contents of the requested file."""

    def handle(self) -> None:
        filename = _receive_filename(self.request)
        if filename is None:
            return
        if getattr(self.server, "announce_requests", False):
            print(f"Client requested file: {filename}", flush=True)
        try:
            source = open(filename, "rb")
        except OSError as exc:
            print(f"fopen: {exc}", file=sys.stderr)
            return
        with source:
            try:
                _stream(self.request, source)
            except OSError as exc:
                print(f"write error: {exc}", file=sys.stderr)


class _FileServer(socketserver.TCPServer):
    allow_reuse_address = True
    request_queue_size = BACKLOG
    announce_requests = False


class _ConcurrentFileServer(socketserver.ThreadingMixIn, _FileServer):
    daemon_threads = True
    announce_requests = True


def make_server(
    host: str = "", port: int = DEFAULT_PORT, concurrent: bool = False
) -> socketserver.TCPServer:
    """Bind a file server; ``concurrent`` handles each client on its own thread."""
    server_class = _ConcurrentFileServer if concurrent else _FileServer
    return server_class((host, port), FileRequestHandler)


def main(argv: Sequence[str] | None = None) -> int:
    """Serve files from the current directory until interrupted."""
    parser = argparse.ArgumentParser(prog="labkit-fileserver", description=main.__doc__)
    parser.add_argument("--host", default="", help="address to bind (default: all)")
    parser.add_argument("--port", type=int, default=None, help="port to listen on")
    parser.add_argument(
        "--concurrent", action="store_true", help="serve several clients at once"
    )
    args = parser.parse_args(argv)
    port = args.port
    if port is None:
        port = CONCURRENT_PORT if args.concurrent else DEFAULT_PORT

    try:
        server = make_server(args.host, port, concurrent=args.concurrent)
    except OSError as exc:
        print(f"bind error: {exc}", file=sys.stderr)
        return 1

    with server:
        print(f"Server listening on port {server.server_address[1]}", flush=True)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())