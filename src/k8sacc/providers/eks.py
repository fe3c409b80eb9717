"""Amazon EKS clusters, activated through the AWS CLI."""

from __future__ import annotations

import dataclasses
from typing import List, Optional

from ..execution.command import CommandSpec
from ..params import Parameters, extract


@dataclasses.dataclass(frozen=True, slots=True)
class EksParameters:
    name: str
    region: Optional[str] = None
    profile: Optional[str] = None

    @classmethod
    def from_parameters(cls, params: Parameters) -> "EksParameters":
        return extract(cls, params)


def build_command(params: EksParameters) -> CommandSpec:
    """Return ``aws eks update-kubeconfig --name <name> [--region <region>] [--profile <profile>]``."""

    args: List[str] = ["eks", "update-kubeconfig", "--name", params.name]
    if params.region is not None:
        args.extend(["--region", params.region])
    if params.profile is not None:
        args.extend(["--profile", params.profile])
    return CommandSpec("aws", tuple(args))


def prepare(params: Parameters) -> CommandSpec:
    return build_command(EksParameters.from_parameters(params))
