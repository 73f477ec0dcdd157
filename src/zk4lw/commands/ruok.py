"""The liveness command, ``ruok``.

The server answers ``imok`` when it is running in a non-error state and
does not answer at all otherwise. An ``imok`` does not mean the server has
joined the quorum, only that the process is up and bound to its port.
"""

from __future__ import annotations

from dataclasses import dataclass

from zk4lw.commands.base import Command

IMOK = "imok"


@dataclass(frozen=True)
class RuokResponse:
    ok: bool
    raw: str


class RuokCommand(Command):
    command = "ruok"
    description = "Whether the server is running in a non-error state"

    def decode(self, body: str) -> RuokResponse:
        text = body.strip()
        return RuokResponse(ok=text == IMOK, raw=text)
