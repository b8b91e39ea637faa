"""EVRA version model."""

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
from nevra.grammar import Pair, Rule
from nevra.models.base import Cloneable, optional_str

log = logging.getLogger(__name__)

NON_EMPTY_STR = validators.and_(validators.instance_of(str), validators.min_len(1))
OPTIONAL_NON_EMPTY_STR = validators.optional(NON_EMPTY_STR)

EVRA_FIELD_RULES = (Rule.EPOCH, Rule.VERSION, Rule.RELEASE, Rule.ARCHITECTURE)


def check_optional_fields(epoch: Optional[str],
                          release: Optional[str],
                          architecture: Optional[str]) -> None:
    """Reject optional fields given as empty strings, they are either absent or non-empty."""

    optional = (('epoch', epoch), ('release', release), ('architecture', architecture))
    for name, value in optional:
        if value is not None and not value:
            raise EmptyFieldError(name)


@frozen(kw_only=True)
class Version(Cloneable):
    """
    An ``EVRA`` package version.

    Instances are built by :py:meth:`parse` or :py:meth:`new`; both guarantee that the
    rendered form parses back into an equal instance.
    """

    #: Package epoch.
    epoch: Optional[str] = field(default=None, validator=OPTIONAL_NON_EMPTY_STR)
    #: Package version.
    version: str = field(validator=NON_EMPTY_STR)
    #: Package release.
    release: Optional[str] = field(default=None, validator=OPTIONAL_NON_EMPTY_STR)
    #: Package architecture.
    architecture: Optional[str] = field(default=None, validator=OPTIONAL_NON_EMPTY_STR)

    @classmethod
    def new(cls: type['Self'],
            epoch: Optional[str],
            version: str,
            release: Optional[str] = None,
            architecture: Optional[str] = None) -> 'Self':
        """
        Construct a version from its fields.

        The fields are joined into a label which is then parsed, a field containing a
        separator is therefore split the way the parser splits it.

        :raises EmptyFieldError: when ``version`` or a given optional field is empty.
        :raises LabelSyntaxError: when the fields do not make a valid label.
        """

        if not version:
            raise EmptyFieldError('version')
        check_optional_fields(epoch, release, architecture)

        label = grammar.render_evra(epoch, version, release, architecture)
        log.debug(f'Constructing EVRA from {label!r}')

        return cls.parse(label)

    @classmethod
    def parse(cls: type['Self'], label: str) -> 'Self':
        """
        Parse an EVRA label, ``[epoch:]version[-release][.architecture]``.

        :raises LabelSyntaxError: when ``label`` is not a valid EVRA label.
        """

        root = grammar.parse(Rule.EVRA_INPUT, label)

        evra: Optional['Self'] = None
        for pair in root.children:
            if pair.rule is Rule.EVRA:
                evra = cls.from_evra_pair(pair)
            elif pair.rule is not Rule.EOI:
                raise InvalidTokenError('EVRA, invalid token rule', pair.rule)

        if evra is None:
            raise InvalidTokenError('EVRA, missing token rule', Rule.EVRA)
        return evra

    @classmethod
    def from_evra_pair(cls: type['Self'], pair: Pair) -> 'Self':
        """Build a version from the ``evra`` node of a parse tree."""

        fields: dict[str, str] = {}
        for token in pair.children:
            if token.rule not in EVRA_FIELD_RULES:
                raise InvalidTokenError('EVRA label, invalid token rule', token.rule)
            fields[token.rule.value] = token.as_str()

        if Rule.VERSION.value not in fields:
            raise InvalidTokenError('EVRA label, missing token rule', Rule.VERSION)
        return cls(**fields)

    def to_dict(self) -> dict[str, Optional[str]]:
        return {
            'epoch': self.epoch,
            'version': self.version,
            'release': self.release,
            'architecture': self.architecture,
            }

    @classmethod
    def from_dict(cls: type['Self'], data: Mapping[str, Any]) -> 'Self':
        return cls.new(
            optional_str(data.get('epoch')),
            optional_str(data.get('version')) or '',
            optional_str(data.get('release')),
            optional_str(data.get('architecture')),
            )

    def __str__(self) -> str:
        return grammar.render_evra(self.epoch, self.version, self.release, self.architecture)
