"""Provider registry for account activation."""

from __future__ import annotations

import enum
import logging
from typing import Callable, Dict, Optional

from ..errors import CommandFailedError
from ..execution.command import CommandResult, CommandSpec, run
from ..params import Parameters
from . import digitalocean, eks

logger = logging.getLogger(__name__)


class Provider(str, enum.Enum):
    """Supported cloud providers, valued by their configuration code."""

    DIGITALOCEAN = "do"
    EKS = "eks"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_code(cls, code: str) -> "Provider":
        try:
            return cls(code)
        except ValueError as exc:
            known = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown provider '{code}' (expected one of: {known})") from exc


_LABELS: Dict[Provider, str] = {
    Provider.DIGITALOCEAN: "DigitalOcean",
    Provider.EKS: "EKS",
}

Builder = Callable[[Parameters], CommandSpec]
Runner = Callable[[CommandSpec], CommandResult]

_PROVIDERS: Dict[Provider, Builder] = {
    Provider.DIGITALOCEAN: digitalocean.prepare,
    Provider.EKS: eks.prepare,
}


def build_command(provider: Provider, params: Parameters) -> CommandSpec:
    """Validate ``params`` for ``provider`` and return the command to run."""

    return _PROVIDERS[provider](params)


def activate(
    provider: Provider,
    params: Parameters,
    *,
    dry_run: bool = False,
    runner: Optional[Runner] = None,
) -> None:
    """Fetch the kubeconfig for an account by running the provider's tool."""

    command = build_command(provider, params)
    _emit(dry_run, provider, command)
    if dry_run:
        return

    result = (runner or run)(command)
    if not result.succeeded:
        logger.debug("%s failed with status %s", command.program, result.returncode)
        raise CommandFailedError(result.stderr_text)


def _emit(dry_run: bool, provider: Provider, command: CommandSpec) -> None:
    prefix = "DRY-RUN" if dry_run else "EXEC"
    print(f"[{prefix}] {provider.value}: {command}")


__all__ = ["Provider", "activate", "build_command"]
