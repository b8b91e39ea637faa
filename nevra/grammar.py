"""
Grammar of RPM package labels.

The accepted labels are::

    nevra_input  := nevra EOI
    evra_input   := evra EOI
    nevra        := name '-' evra
    evra         := [ epoch ':' ] version [ '-' release ] [ '.' architecture ]

Every field is a non-empty run of printable, non-space ASCII characters, minus the
separators the field may not contain (see the ``*_CHARS`` constants). Fields are matched
greedily from the left, without backtracking into a field once it matched. An epoch is
recognized only when its run is immediately followed by ``':'``; the version stops at the
first ``'-'`` or ``'.'``; the release runs up to the first ``'.'``; the architecture takes
the rest of the label, dots included.

Parsing produces a tree of :py:class:`Pair` instances, one per matched rule.
"""

import logging
from enum import Enum
from typing import Optional

try:
    from attrs import define, field, frozen
except ModuleNotFoundError:
    from attr import define, field, frozen

from nevra.errors import LabelSyntaxError

log = logging.getLogger(__name__)

NAME_SEPARATOR = '-'
EPOCH_SEPARATOR = ':'
RELEASE_SEPARATOR = '-'
ARCH_SEPARATOR = '.'

# printable ASCII without space
TOKEN_CHARS = frozenset(chr(code) for code in range(0x21, 0x7f))

NAME_CHARS = TOKEN_CHARS - {NAME_SEPARATOR, EPOCH_SEPARATOR, ARCH_SEPARATOR}
EPOCH_CHARS = TOKEN_CHARS - {EPOCH_SEPARATOR, RELEASE_SEPARATOR}
VERSION_CHARS = TOKEN_CHARS - {RELEASE_SEPARATOR, ARCH_SEPARATOR}
RELEASE_CHARS = TOKEN_CHARS - {ARCH_SEPARATOR}
ARCH_CHARS = TOKEN_CHARS


class Rule(Enum):
    """Grammar rules, used as tags of parse tree nodes."""

    NEVRA_INPUT = 'nevra_input'
    EVRA_INPUT = 'evra_input'
    NEVRA = 'nevra'
    EVRA = 'evra'
    NAME = 'name'
    EPOCH = 'epoch'
    VERSION = 'version'
    RELEASE = 'release'
    ARCHITECTURE = 'architecture'
    EOI = 'EOI'

    def __str__(self) -> str:
        return self.value


@frozen
class Pair:
    """A span of the input matched by a rule, with the spans of its sub-rules."""

    rule: Rule
    text: str = field(repr=False)
    start: int
    end: int
    children: tuple['Pair', ...] = ()

    def as_str(self) -> str:
        return self.text[self.start:self.end]

    def __str__(self) -> str:
        return f'{self.rule}({self.start}, {self.end}): {self.as_str()!r}'


# What may follow the last field of an evra besides the end of input.
_FOLLOWERS = {
    Rule.VERSION: (repr(RELEASE_SEPARATOR), repr(ARCH_SEPARATOR)),
    Rule.RELEASE: (repr(ARCH_SEPARATOR),),
    Rule.ARCHITECTURE: (),
    }


@define
class _Cursor:
    text: str
    production: Rule
    pos: int = 0

    def char_at(self, index: int) -> Optional[str]:
        return self.text[index] if index < len(self.text) else None

    def scan(self, chars: frozenset[str]) -> int:
        """Return the end of the run of ``chars`` starting at the current position."""
        end = self.pos
        while end < len(self.text) and self.text[end] in chars:
            end += 1
        return end

    def accept(self, literal: str) -> bool:
        if self.char_at(self.pos) != literal:
            return False
        self.pos += 1
        return True

    def expect(self, literal: str) -> None:
        if not self.accept(literal):
            raise self.error(repr(literal))

    def run(self,
            rule: Rule,
            chars: frozenset[str],
            expected: Optional[tuple[str, ...]] = None) -> Pair:
        end = self.scan(chars)
        if end == self.pos:
            raise self.error(*(expected or (rule.value,)))
        pair = Pair(rule, self.text, self.pos, end)
        self.pos = end
        return pair

    def error(self, *expected: str) -> LabelSyntaxError:
        return LabelSyntaxError(self.text, self.pos, expected, self.production.value)


def _epoch(cursor: _Cursor) -> Optional[Pair]:
    end = cursor.scan(EPOCH_CHARS)
    if end == cursor.pos or cursor.char_at(end) != EPOCH_SEPARATOR:
        return None
    pair = Pair(Rule.EPOCH, cursor.text, cursor.pos, end)
    cursor.pos = end + 1
    return pair


def _evra(cursor: _Cursor) -> Pair:
    start = cursor.pos
    children: list[Pair] = []

    epoch = _epoch(cursor)
    if epoch is not None:
        children.append(epoch)
        expected = (Rule.VERSION.value,)
    else:
        expected = (Rule.EPOCH.value, Rule.VERSION.value)
    children.append(cursor.run(Rule.VERSION, VERSION_CHARS, expected))

    if cursor.accept(RELEASE_SEPARATOR):
        children.append(cursor.run(Rule.RELEASE, RELEASE_CHARS))
    if cursor.accept(ARCH_SEPARATOR):
        children.append(cursor.run(Rule.ARCHITECTURE, ARCH_CHARS))

    return Pair(Rule.EVRA, cursor.text, start, cursor.pos, tuple(children))


def _nevra(cursor: _Cursor) -> Pair:
    start = cursor.pos
    name = cursor.run(Rule.NAME, NAME_CHARS)
    cursor.expect(NAME_SEPARATOR)
    evra = _evra(cursor)
    return Pair(Rule.NEVRA, cursor.text, start, cursor.pos, (name, evra))


def _eoi(cursor: _Cursor, last: Pair) -> Pair:
    if cursor.pos != len(cursor.text):
        raise cursor.error(*_FOLLOWERS[last.children[-1].rule], Rule.EOI.value)
    return Pair(Rule.EOI, cursor.text, cursor.pos, cursor.pos)


def _nevra_input(cursor: _Cursor) -> Pair:
    nevra = _nevra(cursor)
    eoi = _eoi(cursor, nevra.children[-1])
    return Pair(Rule.NEVRA_INPUT, cursor.text, 0, cursor.pos, (nevra, eoi))


def _evra_input(cursor: _Cursor) -> Pair:
    evra = _evra(cursor)
    eoi = _eoi(cursor, evra)
    return Pair(Rule.EVRA_INPUT, cursor.text, 0, cursor.pos, (evra, eoi))


_ENTRY_POINTS = {
    Rule.NEVRA_INPUT: _nevra_input,
    Rule.EVRA_INPUT: _evra_input,
    Rule.NEVRA: _nevra,
    Rule.EVRA: _evra,
    }


def parse(rule: Rule, text: str) -> Pair:
    """
    Parse ``text`` with the given entry production.

    ``nevra_input`` and ``evra_input`` must match the whole text, ``nevra`` and ``evra``
    match the longest acceptable prefix.

    :param rule: entry production.
    :param text: label to parse.
    :returns: the root of the parse tree.
    :raises LabelSyntaxError: when ``text`` does not match the production.
    """

    if not isinstance(text, str):
        raise TypeError(f'Label must be a string, not {type(text).__name__}')
    try:
        production = _ENTRY_POINTS[rule]
    except KeyError as exc:
        raise ValueError(f'{rule} is not an entry production') from exc

    try:
        return production(_Cursor(text, rule))
    except LabelSyntaxError as exc:
        log.debug(f'Rejected label {text!r}: {exc}')
        raise


def render_evra(epoch: Optional[str],
                version: str,
                release: Optional[str] = None,
                architecture: Optional[str] = None) -> str:
    """Join EVRA fields, placing a separator only in front of a present field."""

    label = version
    if epoch is not None:
        label = f'{epoch}{EPOCH_SEPARATOR}{label}'
    if release is not None:
        label = f'{label}{RELEASE_SEPARATOR}{release}'
    if architecture is not None:
        label = f'{label}{ARCH_SEPARATOR}{architecture}'
    return label


def render_nevra(name: str,
                 epoch: Optional[str],
                 version: str,
                 release: Optional[str] = None,
                 architecture: Optional[str] = None) -> str:
    return f'{name}{NAME_SEPARATOR}{render_evra(epoch, version, release, architecture)}'
