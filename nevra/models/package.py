"""NEVRA package version model."""

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional

try:
    from attrs import field, frozen, validators
except ModuleNotFoundError:
    from attr import field, frozen, validators

if TYPE_CHECKING:
    from typing_extensions import Self

from nevra import grammar
from nevra.errors import EmptyFieldError, InvalidTokenError
from nevra.grammar import Rule
from nevra.models.base import Cloneable, optional_str
from nevra.models.version import NON_EMPTY_STR, Version, check_optional_fields

log = logging.getLogger(__name__)


@frozen(kw_only=True)
class PackageVersion(Cloneable):
    """
    A ``NEVRA`` package name and version.

    Example::

        >>> nevra = PackageVersion.parse('cargo-1:1.30.0-f29.aarch64')
        >>> nevra.name, nevra.epoch, nevra.version, nevra.release, nevra.architecture
        ('cargo', '1', '1', None, '30.0-f29.aarch64')
        >>> nevra.evra == Version.parse('1:1.30.0-f29.aarch64')
        True
    """

    #: Package name.
    name: str = field(validator=NON_EMPTY_STR)
    #: Package EVRA.
    evra: Version = field(validator=validators.instance_of(Version))

    @property
    def epoch(self) -> Optional[str]:
        return self.evra.epoch

    @property
    def version(self) -> str:
        return self.evra.version

    @property
    def release(self) -> Optional[str]:
        return self.evra.release

    @property
    def architecture(self) -> Optional[str]:
        return self.evra.architecture

    @classmethod
    def new(cls: type['Self'],
            name: str,
            epoch: Optional[str],
            version: str,
            release: Optional[str] = None,
            architecture: Optional[str] = None) -> 'Self':
        """
        Construct a package version from its fields.

        :raises EmptyFieldError: when ``name``, ``version`` or a given optional field is empty.
        :raises LabelSyntaxError: when the fields do not make a valid label.
        """

        if not name:
            raise EmptyFieldError('name')
        if not version:
            raise EmptyFieldError('version')
        check_optional_fields(epoch, release, architecture)

        label = grammar.render_nevra(name, epoch, version, release, architecture)
        log.debug(f'Constructing NEVRA from {label!r}')

        return cls.parse(label)

    @classmethod
    def parse(cls: type['Self'], label: str) -> 'Self':
        """
        Parse a NEVRA label, ``name-[epoch:]version[-release][.architecture]``.

        :raises LabelSyntaxError: when ``label`` is not a valid NEVRA label.
        """

        root = grammar.parse(Rule.NEVRA_INPUT, label)

        fields: dict[str, Any] = {}
        for node in root.children:
            if node.rule is Rule.EOI:
                continue
            if node.rule is not Rule.NEVRA:
                raise InvalidTokenError('NEVRA, invalid token rule', node.rule)

            for pair in node.children:
                if pair.rule is Rule.NAME:
                    fields['name'] = pair.as_str()
                elif pair.rule is Rule.EVRA:
                    fields['evra'] = Version.from_evra_pair(pair)
                else:
                    raise InvalidTokenError('NEVRA, invalid token rule', pair.rule)

        for rule in (Rule.NAME, Rule.EVRA):
            if rule.value not in fields:
                raise InvalidTokenError('NEVRA, missing token rule', rule)
        return cls(**fields)

    def to_dict(self) -> dict[str, Optional[str]]:
        return {'name': self.name, **self.evra.to_dict()}

    @classmethod
    def from_dict(cls: type['Self'], data: Mapping[str, Any]) -> 'Self':
        return cls.new(
            optional_str(data.get('name')) or '',
            optional_str(data.get('epoch')),
            optional_str(data.get('version')) or '',
            optional_str(data.get('release')),
            optional_str(data.get('architecture')),
            )

    def __str__(self) -> str:
        return f'{self.name}{grammar.NAME_SEPARATOR}{self.evra}'
