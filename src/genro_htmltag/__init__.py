# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-HtmlTag - Build HTML markup as a tree of tags instead of strings.

A small, zero-dependency library: Element nodes carry a TagKind, an id,
classes, custom attributes and either a text body or child elements, and
render themselves to a markup string. Stylesheet builds the CSS to go
with them.
"""

__version__ = "0.1.0"

from .element import Element
from .exceptions import (
    HtmlTagError,
    InvalidChildError,
    InvalidRuleError,
)
from .styles import Stylesheet, declarations_to_inline_style, strip_whitespace
from .tags import KNOWN_TAGS, TagKind, compare

__all__ = [
    # Core classes
    "Element",
    "TagKind",
    "KNOWN_TAGS",
    "compare",
    # Styles
    "Stylesheet",
    "declarations_to_inline_style",
    "strip_whitespace",
    # Exceptions
    "HtmlTagError",
    "InvalidChildError",
    "InvalidRuleError",
]
