from typing import Optional
from unittest import mock

import pytest

from nevra import (
    EmptyFieldError,
    InvalidTokenError,
    LabelSyntaxError,
    PackageVersion,
    Pair,
    Rule,
    Version,
    )


@pytest.mark.parametrize(('label', 'name', 'epoch', 'version', 'release', 'architecture'), [
    ('n-e:v-r.a', 'n', 'e', 'v', 'r', 'a'),
    ('nnn-eee:vvv-rrr.aaa', 'nnn', 'eee', 'vvv', 'rrr', 'aaa'),
    ('f-v', 'f', None, 'v', None, None),
    ('foo-v', 'foo', None, 'v', None, None),
    ('f-e:v', 'f', 'e', 'v', None, None),
    ('f-0-1', 'f', None, '0', '1', None),
    ('f-0:1', 'f', '0', '1', None, None),
    ('f-v.a', 'f', None, 'v', None, 'a'),
    ('kernel_rt-0:5-362_el9.x86_64', 'kernel_rt', '0', '5', '362_el9', 'x86_64'),
    ('cargo-1:1.30.0-f29.aarch64', 'cargo', '1', '1', None, '30.0-f29.aarch64'),
    ('f-v.a.b', 'f', None, 'v', None, 'a.b'),
    ('f-1.2:3', 'f', '1.2', '3', None, None),
    ('f-0:1:2', 'f', '0', '1:2', None, None),
    ('f-v:x-r.a.b', 'f', 'v', 'x', 'r', 'a.b'),
    ])
def test_parse_nevra(label: str,
                     name: str,
                     epoch: Optional[str],
                     version: str,
                     release: Optional[str],
                     architecture: Optional[str]) -> None:
    parsed = PackageVersion.parse(label)

    assert parsed.name == name
    assert parsed.epoch == epoch
    assert parsed.version == version
    assert parsed.release == release
    assert parsed.architecture == architecture
    assert str(parsed) == label


def test_evra():
    nevra = PackageVersion.parse('cargo-1:1.30.0-f29.aarch64')

    assert nevra.evra == Version.parse('1:1.30.0-f29.aarch64')
    assert nevra.evra.architecture == nevra.architecture
    assert str(nevra.evra) == '1:1.30.0-f29.aarch64'


def test_parse_invalid():
    for label in ['', 'f', 'f-', '-v', 'f-e:', 'f-v-', 'f-v.', 'f v', 'a.b-1', 'a:b-1',
                  'f-e:-r', 'f-v.a b', ' f-v', 'f-v ']:
        with pytest.raises(LabelSyntaxError):
            PackageVersion.parse(label)


def test_new():
    assert PackageVersion.new('n', 'e', 'v', 'r', 'a') == PackageVersion.parse('n-e:v-r.a')
    assert PackageVersion.new('f', None, 'v') == PackageVersion.parse('f-v')
    assert str(PackageVersion.new('f', '0', '1')) == 'f-0:1'
    assert str(PackageVersion.new('f', None, '0', '1')) == 'f-0-1'


def test_new_empty_fields():
    with pytest.raises(EmptyFieldError, match='empty name') as excinfo:
        PackageVersion.new('', None, 'v')
    assert excinfo.value.field == 'name'

    with pytest.raises(EmptyFieldError, match='empty version') as excinfo:
        PackageVersion.new('n', 'e', '', 'r', 'a')
    assert excinfo.value.field == 'version'

    with pytest.raises(EmptyFieldError, match='empty release'):
        PackageVersion.new('n', None, 'v', '', None)


def test_new_does_not_tokenize_empty_fields():
    with mock.patch('nevra.grammar.parse') as parse:
        with pytest.raises(EmptyFieldError):
            PackageVersion.new('', None, '')

    parse.assert_not_called()


def test_equality():
    assert PackageVersion.parse('f-v') == PackageVersion.parse('f-v')
    assert PackageVersion.parse('f-v') != PackageVersion.parse('g-v')
    assert PackageVersion.parse('f-v') != PackageVersion.parse('f-e:v')
    assert PackageVersion.parse('f-v.a') != Version.parse('v.a')


def test_immutable():
    nevra = PackageVersion.parse('f-v')

    with pytest.raises(AttributeError):
        nevra.name = 'g'  # type: ignore[misc]


def test_unexpected_token():
    bogus = Pair(Rule.NEVRA_INPUT, 'v', 0, 1, (Pair(Rule.EVRA, 'v', 0, 1),))

    with mock.patch('nevra.grammar.parse', return_value=bogus):
        with pytest.raises(InvalidTokenError, match='NEVRA, invalid token rule: evra'):
            PackageVersion.parse('v')


def test_missing_token():
    name = Pair(Rule.NAME, 'f', 0, 1)
    bogus = Pair(Rule.NEVRA_INPUT, 'f', 0, 1, (Pair(Rule.NEVRA, 'f', 0, 1, (name,)),))

    with mock.patch('nevra.grammar.parse', return_value=bogus):
        with pytest.raises(InvalidTokenError, match='NEVRA, missing token rule: evra'):
            PackageVersion.parse('f')
