"""DigitalOcean Kubernetes clusters, activated through ``doctl``."""

from __future__ import annotations

import dataclasses
from typing import List, Optional

from ..execution.command import CommandSpec
from ..params import Parameters, extract


@dataclasses.dataclass(frozen=True, slots=True)
class DigitalOceanParameters:
    cluster: str
    context: Optional[str] = None

    @classmethod
    def from_parameters(cls, params: Parameters) -> "DigitalOceanParameters":
        return extract(cls, params)


def build_command(params: DigitalOceanParameters) -> CommandSpec:
    """Return ``doctl kubernetes cluster kubeconfig save <cluster> [--context <context>]``."""

    args: List[str] = ["kubernetes", "cluster", "kubeconfig", "save", params.cluster]
    if params.context is not None:
        args.extend(["--context", params.context])
    return CommandSpec("doctl", tuple(args))


def prepare(params: Parameters) -> CommandSpec:
    return build_command(DigitalOceanParameters.from_parameters(params))
