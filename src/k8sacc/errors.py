"""Custom exceptions for k8sacc."""

from __future__ import annotations

import pathlib
from typing import Optional


class K8sAccError(RuntimeError):
    """Base class for every failure surfaced by k8sacc."""


class ConfigurationError(K8sAccError):
    """Raised when the accounts file cannot be loaded."""

    def __init__(self, message: str, path: Optional[pathlib.Path] = None) -> None:
        super().__init__(message)
        self.path = path


class ConfigIOError(ConfigurationError):
    """Raised when the accounts file cannot be opened or read."""


class ConfigFormatError(ConfigurationError):
    """Raised when the accounts file does not decode into a list of accounts."""


class UnknownAccountError(K8sAccError):
    def __init__(self, alias: str) -> None:
        super().__init__(f"Unknown account {alias}")
        self.alias = alias


class MissingParameterError(K8sAccError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Missing parameter {name}")
        self.name = name


class CommandFailedError(K8sAccError):
    """Raised when a provider command exits non-zero or cannot be started."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Command failed: {detail}")
        self.detail = detail
