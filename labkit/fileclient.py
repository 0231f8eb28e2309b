"""Client that asks a file server for a file and stores what comes back."""

from __future__ import annotations

import argparse
import filecmp
import os
import socket
import sys
from pathlib import Path
from typing import Sequence

CHUNK_SIZE = 512
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 9877
RECEIVED_PREFIX = "received_"


def received_path(filename: str, directory: str | os.PathLike | None = None) -> Path:
    """Where a fetched copy of ``filename`` is stored."""
    name = RECEIVED_PREFIX + filename
    if directory is None:
        return Path(name)
    return Path(directory) / name


def fetch_file(
    filename: str,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    directory: str | os.PathLike | None = None,
) -> Path:
    """Request ``filename`` from the server and write the reply to disk.

    The copy goes to ``received_<filename>``, inside ``directory`` when one
    is given (it is created if missing). Returns the path written.
    """
    if directory is not None:
        Path(directory).mkdir(mode=0o700, parents=True, exist_ok=True)
    target = received_path(filename, directory)
    with socket.create_connection((host, port)) as sock:
        sock.sendall(os.fsencode(filename))
        with open(target, "wb") as out:
            for chunk in iter(lambda: sock.recv(CHUNK_SIZE), b""):
                out.write(chunk)
    return target


def compare_files(original: str | os.PathLike, received: str | os.PathLike) -> bool:
    """Return whether the two files have identical contents.

    Raises ``FileNotFoundError`` if either file is missing.
    """
    for path in (original, received):
        if not Path(path).is_file():
            raise FileNotFoundError(f"no such file: {path}")
    return filecmp.cmp(original, received, shallow=False)


def main(argv: Sequence[str] | None = None) -> int:
    """Fetch a file from the server and optionally check it against the local copy."""
    parser = argparse.ArgumentParser(prog="labkit-fileclient", description=main.__doc__)
    parser.add_argument("filename", help="name of the file to request")
    parser.add_argument("--host", default=DEFAULT_HOST, help="server address")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="server port")
    parser.add_argument(
        "--directory", default=None, help="directory to store the received file in"
    )
    parser.add_argument(
        "--compare", action="store_true", help="compare the copy with the local file"
    )
    args = parser.parse_args(argv)

    try:
        target = fetch_file(args.filename, args.host, args.port, args.directory)
    except ConnectionError as exc:
        print(f"connect error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"File received and stored as {target}")
    if args.compare:
        print("Running diff to compare files...")
        try:
            same = compare_files(args.filename, target)
        except OSError as exc:
            print(f"diff command failed: {exc}")
        else:
            print("Files are identical." if same else "Files differ.")
    return 0


if __name__ == "__main__":
    sys.exit(main())