"""Typing helpers."""
from __future__ import annotations

from enum import Enum
from typing import NamedTuple

__all__ = ('ParsedContentType', 'Rule')


class Rule(Enum):
    """
    Rule violated by a rejected content type.

    Members are declared in the order the validator checks them.
    """
    EMPTY = 'empty'
    TOO_LONG = 'too-long'
    ILLEGAL_CHARACTER = 'illegal-character'
    COMMENT = 'comment'
    LINEAR_WHITESPACE = 'linear-whitespace'
    MISSING_SLASH = 'missing-slash'
    EMPTY_TYPE = 'empty-type'
    INVALID_TYPE = 'invalid-type'
    EMPTY_SUBTYPE = 'empty-subtype'
    EXTRA_SLASH = 'extra-slash'
    INVALID_SUBTYPE = 'invalid-subtype'
    MALFORMED_PARAMETER = 'malformed-parameter'
    DUPLICATE_PARAMETER = 'duplicate-parameter'

    @property
    def description(self) -> str:
        """Human-readable explanation of the rule."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    Rule.EMPTY: 'content type is empty',
    Rule.TOO_LONG: 'content type is too long',
    Rule.ILLEGAL_CHARACTER: 'illegal character (control or non-ASCII)',
    Rule.COMMENT: 'comments are not allowed',
    Rule.LINEAR_WHITESPACE: 'linear whitespace is not allowed',
    Rule.MISSING_SLASH: 'missing "/" between type and subtype',
    Rule.EMPTY_TYPE: 'type is empty',
    Rule.INVALID_TYPE: 'type is not a token',
    Rule.EMPTY_SUBTYPE: 'subtype is empty',
    Rule.EXTRA_SLASH: 'more than one "/"',
    Rule.INVALID_SUBTYPE: 'subtype is not a token',
    Rule.MALFORMED_PARAMETER: 'parameter is not of the form token=token',
    Rule.DUPLICATE_PARAMETER: 'parameter key appears more than once',
}


class ParsedContentType(NamedTuple):
    """Pieces of a content type that passed validation."""
    main_type: str
    sub_type: str
    parameters: tuple[tuple[str, str], ...] = ()
    """Key and value pairs in the order they were written."""
