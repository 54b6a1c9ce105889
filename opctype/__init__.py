"""Validation and parsing of content types in Open Packaging Conventions (OPC) packages."""
from __future__ import annotations

from .content_type import ContentType, parse
from .grammar import MAX_LENGTH, InvalidContentType, is_token, validate
from .typing import ParsedContentType, Rule
from .utils import content_type_for_extension, is_well_known

__all__ = ('MAX_LENGTH', 'ContentType', 'InvalidContentType', 'ParsedContentType', 'Rule',
           'content_type_for_extension', 'is_token', 'is_well_known', 'parse', 'validate')
