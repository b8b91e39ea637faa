"""Models of RPM package labels."""

from nevra.models.base import Cloneable, Serializable
from nevra.models.package import PackageVersion
from nevra.models.version import Version

__all__ = [
    'Cloneable',
    'PackageVersion',
    'Serializable',
    'Version',
    ]
