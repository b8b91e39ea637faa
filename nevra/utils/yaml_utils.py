"""YAML parsing utilities."""

import ruamel.yaml


def yaml_parser() -> ruamel.yaml.YAML:
    """
    Create the YAML parser used to dump and load label fields.

    Label fields are plain scalars, the wide line width keeps long release and
    architecture strings on a single line.
    """

    yaml = ruamel.yaml.YAML(typ='safe')

    yaml.indent(mapping=4, sequence=4, offset=2)
    yaml.default_flow_style = False
    yaml.allow_unicode = True
    yaml.encoding = 'utf-8'
    yaml.width = 4096

    return yaml
