"""Loading and lookup of the accounts configuration file."""

from __future__ import annotations

import dataclasses
import logging
import pathlib
from typing import IO, Iterator, List, Mapping, Optional, Sequence, Union

import yaml

from .errors import ConfigFormatError, ConfigIOError, UnknownAccountError
from .params import Parameters
from . import providers
from .providers import Provider

logger = logging.getLogger(__name__)

_NON_STRING_TAGS = {
    "tag:yaml.org,2002:bool",
    "tag:yaml.org,2002:int",
    "tag:yaml.org,2002:float",
    "tag:yaml.org,2002:timestamp",
}


class _AccountsLoader(yaml.SafeLoader):
    """Safe loader that keeps plain scalars as the text the operator wrote."""


_AccountsLoader.yaml_implicit_resolvers = {
    first: [(tag, pattern) for tag, pattern in resolvers if tag not in _NON_STRING_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


@dataclasses.dataclass(frozen=True, slots=True)
class Account:
    """A named set of credentials for one provider."""

    alias: str
    provider: Provider
    params: Parameters = dataclasses.field(default_factory=Parameters)

    def activate(self, *, dry_run: bool = False) -> None:
        providers.activate(self.provider, self.params, dry_run=dry_run)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object], *, index: int) -> "Account":
        alias = data.get("alias")
        if not isinstance(alias, str) or not alias:
            raise ConfigFormatError(f"Account {index} must define a non-empty 'alias'")

        provider_raw = data.get("provider")
        if not isinstance(provider_raw, str):
            raise ConfigFormatError(f"Account '{alias}' must define a 'provider'")
        try:
            provider = Provider.from_code(provider_raw)
        except ValueError as exc:
            raise ConfigFormatError(f"Account '{alias}': {exc}") from exc

        params_raw = data.get("params")
        if params_raw is None:
            params_raw = {}
        if not isinstance(params_raw, Mapping):
            raise ConfigFormatError(f"Account '{alias}' field 'params' must be a mapping")
        for key, value in params_raw.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise ConfigFormatError(
                    f"Account '{alias}' parameter '{key}' must map a string to a string"
                )

        return cls(alias=alias, provider=provider, params=Parameters(dict(params_raw)))


class Accounts:
    """All accounts of a configuration file, in file order."""

    def __init__(self, accounts: Optional[Sequence[Account]] = None) -> None:
        self._accounts: List[Account] = list(accounts or [])

    @classmethod
    def parse(cls, path: Union[str, pathlib.Path]) -> "Accounts":
        path = pathlib.Path(path)
        try:
            with path.open("r", encoding="utf-8") as handle:
                accounts = cls.from_stream(handle)
        except OSError as exc:
            raise ConfigIOError(f"Cannot read accounts file {path}: {exc}", path) from exc
        except UnicodeDecodeError as exc:
            raise ConfigFormatError(f"Invalid accounts file {path}: {exc}", path) from exc
        except ConfigFormatError as exc:
            raise ConfigFormatError(f"Invalid accounts file {path}: {exc}", path) from exc

        logger.debug("Loaded %d account(s) from %s", len(accounts), path)
        return accounts

    @classmethod
    def from_stream(cls, stream: Union[str, IO[str]]) -> "Accounts":
        try:
            payload = yaml.load(stream, Loader=_AccountsLoader)
        except yaml.YAMLError as exc:
            raise ConfigFormatError(f"Malformed YAML: {exc}") from exc

        if payload is None:
            return cls()
        if not isinstance(payload, list):
            raise ConfigFormatError("Accounts file must define a list at the top level")

        accounts: List[Account] = []
        seen: set[str] = set()
        for index, item in enumerate(payload):
            if not isinstance(item, Mapping):
                raise ConfigFormatError(f"Account {index} must be a mapping")
            account = Account.from_mapping(item, index=index)
            if account.alias in seen:
                raise ConfigFormatError(f"Duplicate account alias '{account.alias}'")
            seen.add(account.alias)
            accounts.append(account)
        return cls(accounts)

    def get(self, alias: str) -> Account:
        for account in self._accounts:
            if account.alias == alias:
                return account
        raise UnknownAccountError(alias)

    def sorted(self) -> List[Account]:
        """Return the accounts ordered by alias; equal aliases keep file order."""

        return sorted(self._accounts, key=lambda account: account.alias)

    def is_empty(self) -> bool:
        return not self._accounts

    def __iter__(self) -> Iterator[Account]:
        return iter(self._accounts)

    def __len__(self) -> int:
        return len(self._accounts)


__all__ = ["Account", "Accounts"]
