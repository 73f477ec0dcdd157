"""Exceptions raised while executing and decoding four-letter-word commands.

Two families:
- DecodeError: the response arrived but could not be mapped to a typed result
- TransportError / EncodingError: the response never arrived as usable text

Each exception keeps its context as attributes so callers can report it
without parsing the message.
"""

from __future__ import annotations


class FourLetterWordError(Exception):
    """Base class for every error raised by zk4lw."""


class DecodeError(FourLetterWordError):
    """Raised when a response body cannot be mapped to a command response."""


class NumericParseError(DecodeError):
    """
    Raised when a numeric field holds text that is not a number.

    Attributes:
        field: The response key being parsed
        raw: The offending value
        kind: "integer" or "float"
    """

    def __init__(self, field: str, raw: str, kind: str = "integer") -> None:
        self.field = field
        self.raw = raw
        self.kind = kind
        super().__init__(f"Failed to parse {kind} for {field}: {raw!r}")


class StringParseError(DecodeError):
    """
    Raised when a string field does not have the expected shape.

    Attributes:
        field: The response key being parsed
        raw: The offending value
    """

    def __init__(self, field: str, raw: str) -> None:
        self.field = field
        self.raw = raw
        super().__init__(f"Failed to parse string for {field}: {raw!r}")


class VersionParseError(StringParseError):
    """Raised when zk_version is not "<version>-<revision>, <build date>"."""

    def __init__(self, raw: str) -> None:
        super().__init__("zk_version", raw)


class MissingFieldError(DecodeError):
    """
    Raised after a full decode pass when required fields were never seen.

    Attributes:
        fields: Every missing response key, in declaration order
    """

    def __init__(self, fields: list[str]) -> None:
        self.fields = list(fields)
        super().__init__(f"Field(s) missing from response: {', '.join(self.fields)}")


class TransportError(FourLetterWordError):
    """
    Raised when connecting, writing or reading fails.

    The underlying OSError is chained as __cause__.

    Attributes:
        host: Server host
        port: Server port
        command: The four-letter word being sent
    """

    def __init__(self, host: str, port: int, command: str, reason: str) -> None:
        self.host = host
        self.port = port
        self.command = command
        self.reason = reason
        super().__init__(f"'{command}' to {host}:{port} failed: {reason}")


class EncodingError(FourLetterWordError):
    """
    Raised when the response bytes are not valid UTF-8.

    Attributes:
        host: Server host
        port: Server port
        command: The four-letter word that was sent
    """

    def __init__(self, host: str, port: int, command: str, reason: str) -> None:
        self.host = host
        self.port = port
        self.command = command
        self.reason = reason
        super().__init__(f"Response to '{command}' from {host}:{port} wasn't valid UTF-8: {reason}")
