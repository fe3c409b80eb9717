"""Account parameters and their conversion into typed provider records."""

from __future__ import annotations

import dataclasses
import types
from typing import Dict, Iterator, Mapping, Optional, Type, TypeVar

from .errors import MissingParameterError

RecordT = TypeVar("RecordT")


@dataclasses.dataclass(frozen=True, slots=True)
class Parameters:
    """String-keyed, string-valued parameters of a single account."""

    values: Mapping[str, str] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", types.MappingProxyType(dict(self.values)))

    def __hash__(self) -> int:
        return hash(frozenset(self.values.items()))

    def get(self, name: str) -> str:
        """Return the value of ``name`` or raise :class:`MissingParameterError`."""

        try:
            return self.values[name]
        except KeyError as exc:
            raise MissingParameterError(name) from exc

    def get_optional(self, name: str) -> Optional[str]:
        return self.values.get(name)

    def as_dict(self) -> Dict[str, str]:
        return dict(self.values)

    def __contains__(self, name: object) -> bool:
        return name in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)


def extract(record_type: Type[RecordT], params: Parameters) -> RecordT:
    """Build a typed parameter record from ``params``.

    Fields declared without a default are required and are looked up in
    declaration order, so the first missing one is the one reported. Fields
    with a default are optional and stay ``None`` when absent.
    """

    values: Dict[str, Optional[str]] = {}
    for field in dataclasses.fields(record_type):
        if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
            values[field.name] = params.get(field.name)
        else:
            values[field.name] = params.get_optional(field.name)
    return record_type(**values)


__all__ = ["Parameters", "extract"]
