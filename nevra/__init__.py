"""
Library for parsing RPM version labels (``NEVRA``).

RPM package/version labels are composed of five components:

* Name
* Epoch
* Version
* Release
* Architecture

Example::

    >>> from nevra import PackageVersion, Version
    >>> nevra = PackageVersion.parse('cargo-1:1.30.0-f29.aarch64')
    >>> nevra.evra == Version.parse('1:1.30.0-f29.aarch64')
    True
    >>> str(nevra)
    'cargo-1:1.30.0-f29.aarch64'
"""

from nevra.errors import EmptyFieldError, InvalidTokenError, LabelSyntaxError, NevraError
from nevra.grammar import Pair, Rule, parse
from nevra.models import PackageVersion, Version

__all__ = [
    'EmptyFieldError',
    'InvalidTokenError',
    'LabelSyntaxError',
    'NevraError',
    'PackageVersion',
    'Pair',
    'Rule',
    'Version',
    'parse',
    ]
