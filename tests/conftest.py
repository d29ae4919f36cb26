from __future__ import annotations

import socket
import threading
from typing import Callable, Iterator

import pytest


class RawHttpServer:
    """Accepts connections and answers every request with fixed bytes.

    ``reply=None`` keeps the connection open without answering, which lets
    tests drive the client into its timeout. ``hold=True`` sends the reply
    and then keeps the connection open, stalling a partial body.
    """

    def __init__(self, reply: bytes | None, *, hold: bool = False) -> None:
        self._reply = reply
        self._hold = hold
        self._stop = threading.Event()
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self._sock.bind(("127.0.0.1", 0))
        self._sock.listen(8)
        self._sock.settimeout(0.05)
        host, port = self._sock.getsockname()
        self.url = f"http://{host}:{port}"
        self._thread = threading.Thread(target=self._serve, daemon=True)
        self._thread.start()

    def _serve(self) -> None:
        while not self._stop.is_set():
            try:
                conn, _ = self._sock.accept()
            except socket.timeout:
                continue
            except OSError:
                return
            with conn:
                conn.settimeout(1.0)
                self._read_request(conn)
                if self._reply is None:
                    self._stop.wait(5.0)
                    continue
                conn.sendall(self._reply)
                if self._hold:
                    self._stop.wait(5.0)

    def _read_request(self, conn: socket.socket) -> None:
        data = b""
        while b"\r\n\r\n" not in data:
            try:
                chunk = conn.recv(4096)
            except (socket.timeout, OSError):
                return
            if not chunk:
                return
            data += chunk

    def close(self) -> None:
        self._stop.set()
        self._sock.close()
        self._thread.join(timeout=2.0)


@pytest.fixture
def raw_server() -> Iterator[Callable[..., RawHttpServer]]:
    servers: list[RawHttpServer] = []

    def factory(reply: bytes | None, *, hold: bool = False) -> RawHttpServer:
        server = RawHttpServer(reply, hold=hold)
        servers.append(server)
        return server

    yield factory
    for server in servers:
        server.close()
