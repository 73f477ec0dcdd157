"""Commands answering with ``key=value`` lines: ``conf`` and ``envi``.

Their keys vary too much between releases and deployments to be worth a
typed mapping, so the decoded response is the ordered key/value dict.
"""

from __future__ import annotations

from zk4lw.commands.base import Command
from zk4lw.parsing import parse_equal_separated


class KeyValueCommand(Command):
    """Base for commands whose response is a flat ``key=value`` listing."""

    def decode(self, body: str) -> dict[str, str]:
        return parse_equal_separated(body)


class ConfCommand(KeyValueCommand):
    command = "conf"
    description = "Details about the serving configuration"


class EnviCommand(KeyValueCommand):
    command = "envi"
    description = "Details about the serving environment"
