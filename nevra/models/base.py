"""Base classes for nevra models."""

import io
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional

try:
    from attrs import frozen
except ModuleNotFoundError:
    from attr import frozen

if TYPE_CHECKING:
    from typing_extensions import Self

from nevra.utils.yaml_utils import yaml_parser


def optional_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)


@frozen
class Serializable:
    """
    A label whose fields can be exported to and imported from plain data.

    Import always goes through the label grammar, data which would not make a valid
    label is rejected the same way a bad label string is.
    """

    def to_dict(self) -> dict[str, Optional[str]]:
        raise NotImplementedError

    @classmethod
    def from_dict(cls: type['Self'], data: Mapping[str, Any]) -> 'Self':
        raise NotImplementedError

    def to_yaml(self) -> str:
        output = io.StringIO()
        yaml_parser().dump(self.to_dict(), output)

        return output.getvalue()

    @classmethod
    def from_yaml(cls: type['Self'], serialized: str) -> 'Self':
        data = yaml_parser().load(serialized)
        if not isinstance(data, Mapping):
            raise ValueError(f'Expected a YAML mapping, got {type(data).__name__}')

        return cls.from_dict(data)


@frozen
class Cloneable(Serializable):
    """A label whose instances can be copied with some of the fields changed."""

    def clone(self, **changes: Optional[str]) -> 'Self':
        unknown = set(changes) - set(self.to_dict())
        if unknown:
            raise TypeError(f'Unknown fields: {", ".join(sorted(unknown))}')

        return self.from_dict({**self.to_dict(), **changes})
