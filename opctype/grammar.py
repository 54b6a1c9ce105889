"""
Validator for the content-type grammar allowed in OPC packages.

OPC restricts RFC 2616 media types to ``token "/" token *( ";" token "=" token )``. Comments,
linear whitespace, quoted-string values and non-ASCII characters are all rejected.
"""
from __future__ import annotations

from typing import NoReturn
import logging
import re

from typing_extensions import Final

from .typing import ParsedContentType, Rule

__all__ = ('MAX_LENGTH', 'SEPARATORS', 'InvalidContentType', 'is_token', 'is_token_char',
           'validate')

log = logging.getLogger(__name__)

MAX_LENGTH: Final = 1024
SEPARATORS: Final = frozenset('()<>@,;:\\"/[]?={} ')
# Anything outside printable ASCII: C0 controls (including tab), DEL and non-ASCII.
_ILLEGAL_RE: Final = re.compile(r'[^\x20-\x7e]')
_COMMENT_RE: Final = re.compile(r'[()]')


class InvalidContentType(ValueError):
    """
    Raised when a string is not an acceptable OPC content type.

    Parameters
    ----------
    value : str
        The rejected string.

    rule : Rule
        The first rule the string violates.

    fragment : str
        The offending part of ``value``.

    position : int | None
        Index of ``fragment`` in ``value``. ``None`` when the whole value is at fault.
    """
    def __init__(self,
                 value: str,
                 rule: Rule,
                 fragment: str | None = None,
                 position: int | None = None) -> None:
        self.value = value
        self.rule = rule
        self.fragment = value if fragment is None else fragment
        self.position = position
        msg = f'Invalid content type {value!r}: {rule.description}'
        if position is not None:
            msg += f' ({self.fragment!r} at position {position:d})'
        super().__init__(msg)


def _reject(value: str,
            rule: Rule,
            fragment: str | None = None,
            position: int | None = None) -> NoReturn:
    log.debug('Rejecting content type %r: %s.', value, rule.value)
    raise InvalidContentType(value, rule, fragment, position)


def is_token_char(char: str) -> bool:
    """Return ``True`` if ``char`` is printable ASCII and not a separator."""
    return ' ' < char < '\x7f' and char not in SEPARATORS


def is_token(value: str) -> bool:
    """Return ``True`` if ``value`` is one or more token characters."""
    return bool(value) and all(is_token_char(c) for c in value)


def _validate_parameters(value: str, tail: str,
                         offset: int) -> tuple[tuple[str, str], ...]:
    seen: set[str] = set()
    parameters = []
    position = offset
    for clause in tail.split(';'):
        key, eq, val = clause.partition('=')
        if not eq or not is_token(key) or not is_token(val):
            _reject(value, Rule.MALFORMED_PARAMETER, clause, position)
        if key in seen:
            _reject(value, Rule.DUPLICATE_PARAMETER, key, position)
        seen.add(key)
        parameters.append((key, val))
        position += len(clause) + 1
    return tuple(parameters)


def validate(value: str, max_length: int = MAX_LENGTH) -> ParsedContentType:
    """
    Check ``value`` against the OPC content-type grammar.

    Rules are checked in the order of :py:class:`opctype.typing.Rule` and the first failure wins.

    Parameters
    ----------
    value : str
        Candidate content type, such as ``application/x-resqml+xml;version=2.0``.

    max_length : int
        Longest string accepted. Zero or less disables the limit.

    Returns
    -------
    ParsedContentType
        The type, subtype and parameters.

    Raises
    ------
    InvalidContentType
        If ``value`` is not acceptable.
    """
    if not value:
        _reject(value, Rule.EMPTY)
    if 0 < max_length < len(value):
        _reject(value, Rule.TOO_LONG)
    if (m := _ILLEGAL_RE.search(value)) is not None:
        _reject(value, Rule.ILLEGAL_CHARACTER, m.group(0), m.start())
    if (m := _COMMENT_RE.search(value)) is not None:
        _reject(value, Rule.COMMENT, m.group(0), m.start())
    if (i := value.find(' ')) >= 0:
        _reject(value, Rule.LINEAR_WHITESPACE, ' ', i)
    main_type, slash, remainder = value.partition('/')
    if not slash:
        _reject(value, Rule.MISSING_SLASH)
    if not main_type:
        _reject(value, Rule.EMPTY_TYPE, '', 0)
    if not is_token(main_type):
        _reject(value, Rule.INVALID_TYPE, main_type, 0)
    sub_type, semicolon, tail = remainder.partition(';')
    sub_type_start = len(main_type) + 1
    if not sub_type:
        _reject(value, Rule.EMPTY_SUBTYPE, '', sub_type_start)
    if '/' in sub_type:
        _reject(value, Rule.EXTRA_SLASH, sub_type, sub_type_start)
    if not is_token(sub_type):
        _reject(value, Rule.INVALID_SUBTYPE, sub_type, sub_type_start)
    parameters: tuple[tuple[str, str], ...] = ()
    if semicolon:
        parameters = _validate_parameters(value, tail, sub_type_start + len(sub_type) + 1)
    return ParsedContentType(main_type, sub_type, parameters)
