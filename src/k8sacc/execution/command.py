"""Construction and execution of external provider commands."""

from __future__ import annotations

import dataclasses
import logging
import shlex
import subprocess
from typing import List, Tuple

from ..errors import CommandFailedError

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class CommandSpec:
    """A program name plus its ordered arguments."""

    program: str
    args: Tuple[str, ...] = ()

    @property
    def argv(self) -> List[str]:
        return [self.program, *self.args]

    def __str__(self) -> str:
        return shlex.join(self.argv)


@dataclasses.dataclass(frozen=True, slots=True)
class CommandResult:
    returncode: int
    stderr: bytes = b""

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0

    @property
    def stderr_text(self) -> str:
        return self.stderr.decode("utf-8", errors="replace")


def run(spec: CommandSpec) -> CommandResult:
    """Run ``spec`` to completion and capture its standard error.

    Standard output is inherited so the provider tool can talk to the
    terminal directly.
    """

    logger.debug("Running %s", spec)
    try:
        completed = subprocess.run(spec.argv, stderr=subprocess.PIPE, check=False)
    except (OSError, ValueError) as exc:
        raise CommandFailedError(str(exc)) from exc

    logger.debug("%s exited with status %s", spec.program, completed.returncode)
    return CommandResult(returncode=completed.returncode, stderr=completed.stderr or b"")


__all__ = ["CommandResult", "CommandSpec", "run"]
