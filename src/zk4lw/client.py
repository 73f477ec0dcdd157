"""TCP client that executes four-letter-word commands against one server."""

from __future__ import annotations

import logging
import socket
import time
from typing import Any, Optional

from zk4lw.commands.base import Command
from zk4lw.errors import EncodingError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_PORT = 2181
DEFAULT_TIMEOUT = 10.0
_CHUNK_SIZE = 4096


class FourLetterWordClient:
    """Sends one command per connection and decodes the reply.

    The protocol has no framing: the client writes the command word and the
    server answers with text, then closes the connection. End of stream is
    the only sign the answer is complete.

    ``timeout`` is a deadline for the whole call: connect, write and every
    read share it, so a server trickling bytes cannot keep the call alive
    past it. With ``timeout=None`` a server that accepts the connection but
    never closes it blocks the call forever.

    Host, port and timeout are fixed at construction, so one client can be
    shared between threads; every call opens its own connection.
    """

    def __init__(self, host: str, port: int = DEFAULT_PORT, timeout: Optional[float] = DEFAULT_TIMEOUT) -> None:
        self._host = host
        self._port = port
        self._timeout = timeout

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        return self._port

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    def __repr__(self) -> str:
        return f"FourLetterWordClient(host={self._host!r}, port={self._port}, timeout={self._timeout})"

    def _arm(self, sock: socket.socket, deadline: Optional[float]) -> None:
        if deadline is None:
            return
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise socket.timeout("deadline exceeded")
        sock.settimeout(remaining)

    def send(self, payload: bytes) -> bytes:
        """Write ``payload`` on a fresh connection and return everything read until EOF."""
        word = payload.decode("ascii", errors="replace")
        deadline = None if self._timeout is None else time.monotonic() + self._timeout
        try:
            with socket.create_connection((self._host, self._port), timeout=self._timeout) as sock:
                self._arm(sock, deadline)
                sock.sendall(payload)
                chunks: list[bytes] = []
                while True:
                    self._arm(sock, deadline)
                    chunk = sock.recv(_CHUNK_SIZE)
                    if not chunk:
                        break
                    chunks.append(chunk)
        except socket.timeout as exc:
            raise TransportError(self._host, self._port, word, f"timed out after {self._timeout}s") from exc
        except OSError as exc:
            raise TransportError(self._host, self._port, word, str(exc)) from exc

        data = b"".join(chunks)
        logger.debug("%s:%d '%s' -> %d bytes", self._host, self._port, word, len(data))
        return data

    def execute(self, command: Command) -> Any:
        """Execute ``command`` and return its decoded response."""
        data = self.send(command.request_payload())
        try:
            body = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise EncodingError(self._host, self._port, command.command, str(exc)) from exc
        return command.decode(body)
