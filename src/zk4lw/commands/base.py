"""Base class for four-letter-word commands."""

from __future__ import annotations

import abc
from typing import Any, ClassVar


class Command(abc.ABC):
    """A four-letter-word command: what to send and how to read the reply.

    Subclasses set ``command`` and implement ``decode``. Decoding is a pure
    function of the response body, so a command instance holds no state and
    can be reused freely.
    """

    command: ClassVar[str] = ""
    description: ClassVar[str] = ""

    def request_payload(self) -> bytes:
        """Return the bytes written to the socket."""
        return self.command.encode("ascii")

    @abc.abstractmethod
    def decode(self, body: str) -> Any:
        """Decode a raw response body, raising a DecodeError on failure."""
