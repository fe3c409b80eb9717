"""Location of the accounts configuration file."""

from __future__ import annotations

import os
import pathlib
from typing import Mapping, Optional, Union

DEFAULT_FILENAME = ".k8sacc"
CONFIG_ENV_VAR = "K8SACC_CONFIG"


def default_config_path(home: Optional[pathlib.Path] = None) -> pathlib.Path:
    """Return ``~/.k8sacc`` for the invoking user."""

    if home is None:
        home = pathlib.Path.home()
    return home / DEFAULT_FILENAME


def resolve_config_path(
    explicit: Optional[Union[str, pathlib.Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> pathlib.Path:
    """Pick the accounts file: explicit path, then ``$K8SACC_CONFIG``, then the default."""

    if explicit is not None:
        return pathlib.Path(explicit).expanduser()
    if environ is None:
        environ = os.environ
    from_env = environ.get(CONFIG_ENV_VAR)
    if from_env:
        return pathlib.Path(from_env).expanduser()
    return default_config_path()


__all__ = ["CONFIG_ENV_VAR", "DEFAULT_FILENAME", "default_config_path", "resolve_config_path"]
