"""Utility functions for nevra."""

from nevra.utils.yaml_utils import yaml_parser

__all__ = [
    'yaml_parser',
    ]
