"""Exceptions raised while parsing and building package labels."""

from typing import Optional


class NevraError(ValueError):
    """Base class of all errors raised by nevra."""


class EmptyFieldError(NevraError):
    """A required field was given as an empty string."""

    def __init__(self, field: str) -> None:
        super().__init__(f'empty {field}')
        self.field = field


class LabelSyntaxError(NevraError):
    """
    A label does not match the grammar.

    :param label: the rejected input.
    :param offset: index of the first character the grammar could not accept.
    :param expected: names of the rules or separators acceptable at ``offset``.
    :param production: name of the entry production used for parsing.
    """

    def __init__(self,
                 label: str,
                 offset: int,
                 expected: tuple[str, ...],
                 production: str) -> None:
        self.label = label
        self.offset = offset
        self.expected = expected
        self.production = production

        kind = production.split('_')[0].upper()
        if offset < len(label):
            found = repr(label[offset])
        else:
            found = 'end of input'
        super().__init__(
            f'{kind} parsing error at offset {offset} of {label!r}: '
            f'expected {", ".join(expected)}, found {found}')


class InvalidTokenError(NevraError):
    """The parse tree holds a token the model layer does not know how to handle."""

    def __init__(self, message: str, rule: Optional[object] = None) -> None:
        super().__init__(f'{message}: {rule}' if rule is not None else message)
        self.rule = rule
