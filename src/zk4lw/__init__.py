"""Client for the ZooKeeper four-letter-word administrative protocol."""

from zk4lw.client import FourLetterWordClient
from zk4lw.commands import (
    COMMAND_REGISTRY,
    Command,
    ConfCommand,
    EnviCommand,
    MetricSample,
    MonitorCommand,
    MonitorResponse,
    RuokCommand,
)
from zk4lw.errors import (
    DecodeError,
    EncodingError,
    FourLetterWordError,
    MissingFieldError,
    NumericParseError,
    StringParseError,
    TransportError,
    VersionParseError,
)
from zk4lw.state import ServerState

__version__ = "0.1.0"

__all__ = [
    "COMMAND_REGISTRY",
    "Command",
    "ConfCommand",
    "DecodeError",
    "EncodingError",
    "EnviCommand",
    "FourLetterWordClient",
    "FourLetterWordError",
    "MetricSample",
    "MissingFieldError",
    "MonitorCommand",
    "MonitorResponse",
    "NumericParseError",
    "RuokCommand",
    "ServerState",
    "StringParseError",
    "TransportError",
    "VersionParseError",
]
