"""Content type of a part in an OPC package."""
from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any, NoReturn

from typing_extensions import override

from .grammar import MAX_LENGTH, validate

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = ('ContentType', 'parse')


class ContentType:
    """
    Immutable, validated content type.

    ``str()`` gives the canonical form (``type/subtype``) which is what gets compared to the
    constants in :py:mod:`opctype.constants`. Parameters are kept in the order they were written.

    Parameters
    ----------
    value : str
        Raw content type, such as ``application/x-resqml+xml;version=2.0;type=obj_global1dCrs``.

    max_length : int
        Longest string accepted.

    Raises
    ------
    opctype.grammar.InvalidContentType
        If ``value`` does not follow the OPC content-type grammar.
    """
    __slots__ = ('_main_type', '_parameters', '_sub_type')

    def __init__(self, value: str, max_length: int = MAX_LENGTH) -> None:
        parsed = validate(value, max_length)
        object.__setattr__(self, '_main_type', parsed.main_type)
        object.__setattr__(self, '_sub_type', parsed.sub_type)
        object.__setattr__(self, '_parameters', MappingProxyType(dict(parsed.parameters)))

    @override
    def __setattr__(self, name: str, value: Any) -> NoReturn:
        msg = f'{type(self).__name__} is immutable.'
        raise AttributeError(msg)

    @override
    def __delattr__(self, name: str) -> NoReturn:
        msg = f'{type(self).__name__} is immutable.'
        raise AttributeError(msg)

    @override
    def __reduce__(self) -> tuple[type[ContentType], tuple[str, int]]:
        # Rebuilt from the full string; the length limit was already checked on creation
        return type(self), (self.to_string(with_parameters=True), 0)

    @property
    def main_type(self) -> str:
        """Type, such as ``application``."""
        return self._main_type

    @property
    def sub_type(self) -> str:
        """Subtype, such as ``x-resqml+xml``."""
        return self._sub_type

    @property
    def parameters(self) -> Mapping[str, str]:
        """Read-only mapping of parameters in insertion order."""
        return self._parameters

    def has_parameters(self) -> bool:
        return bool(self._parameters)

    def parameter_keys(self) -> tuple[str, ...]:
        return tuple(self._parameters)

    def get_parameter(self, key: str) -> str | None:
        """Return the value of parameter ``key`` (case-sensitive), or ``None`` if absent."""
        return self._parameters.get(key)

    def to_string(self, *, with_parameters: bool = False) -> str:
        """
        Render the content type.

        Without ``with_parameters`` only ``type/subtype`` is returned. Otherwise each parameter is
        appended as ``;key=value``.
        """
        ret = f'{self._main_type}/{self._sub_type}'
        if with_parameters:
            ret += ''.join(f';{k}={v}' for k, v in self._parameters.items())
        return ret

    @override
    def __str__(self) -> str:
        return self.to_string()

    @override
    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.to_string(with_parameters=True)!r})'

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContentType):
            return NotImplemented
        return (self._main_type == other.main_type and self._sub_type == other.sub_type
                and tuple(self._parameters.items()) == tuple(other.parameters.items()))

    @override
    def __hash__(self) -> int:
        return hash((self._main_type, self._sub_type, tuple(self._parameters.items())))


def parse(value: str, max_length: int = MAX_LENGTH) -> ContentType:
    """
    Parse ``value`` into a :py:class:`ContentType`.

    Raises
    ------
    opctype.grammar.InvalidContentType
        If ``value`` does not follow the OPC content-type grammar.
    """
    return ContentType(value, max_length)
