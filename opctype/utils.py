"""Utility functions."""
from __future__ import annotations

from pathlib import PurePosixPath
import logging

from .constants import EXTENSIONS, WELL_KNOWN
from .content_type import ContentType

__all__ = ('content_type_for_extension', 'is_well_known')

log = logging.getLogger(__name__)


def content_type_for_extension(filename: str) -> str | None:
    """
    Return the well-known content type for the extension of ``filename``.

    The extension is matched case-insensitively. ``None`` is returned for an unknown or missing
    extension.
    """
    if not (suffix := PurePosixPath(filename).suffix):
        return None
    ret = EXTENSIONS.get(suffix[1:].lower())
    log.debug('Extension %s of %s maps to %s.', suffix, filename, ret)
    return ret


def is_well_known(content_type: ContentType | str) -> bool:
    """
    Check if a content type is one of :py:data:`opctype.constants.WELL_KNOWN`.

    Parameters are ignored. Comparison is exact, including case. A string is parsed first and
    can raise :py:class:`opctype.grammar.InvalidContentType`.
    """
    if not isinstance(content_type, ContentType):
        content_type = ContentType(content_type)
    return str(content_type) in WELL_KNOWN
