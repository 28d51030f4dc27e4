# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Stylesheet - CSS rules builder.

A Stylesheet maps CSS selectors to their declarations. Selectors and
properties are always written out sorted by name, so the same rules give
the same text whatever order they were added in.

Example:
    >>> sheet = Stylesheet()
    >>> sheet.add_property('h1', 'color', 'blue')
    >>> sheet.add_property('h1', 'font-size', '30px')
    >>> print(sheet.render_rules(), end='')
    h1 {
        color: blue;
        font-size: 30px;
    }
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Iterator

from .element import Element
from .exceptions import InvalidRuleError

logger = logging.getLogger(__name__)

INDENT = "    "


class Stylesheet:
    """Selector -> {property: value} rules, rendered in sorted order."""

    __slots__ = ('_rules',)

    def __init__(self, rules: Mapping[str, Mapping[str, str]] | None = None) -> None:
        """Initialize a Stylesheet.

        Args:
            rules: Optional initial rules, as {selector: {property: value}}.
        """
        self._rules: dict[str, dict[str, str]] = {}
        if rules:
            for selector, properties in rules.items():
                self.add_rule(selector, properties)

    def __repr__(self) -> str:
        return f"Stylesheet({len(self._rules)} selectors)"

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, selector: object) -> bool:
        return selector in self._rules

    def __iter__(self) -> Iterator[str]:
        return iter(self.selectors())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stylesheet):
            return NotImplemented
        return self._rules == other._rules

    __hash__ = None  # type: ignore[assignment]

    def selectors(self) -> list[str]:
        """Return the selectors, sorted."""
        return sorted(self._rules)

    def properties(self, selector: str) -> dict[str, str]:
        """Return a copy of the declarations for ``selector``.

        Raises:
            KeyError: If the selector has no rule.
        """
        return dict(self._rules[selector])

    def add_property(self, selector: str, property: str, value: str) -> None:
        """Set one property under ``selector``, creating the rule if needed."""
        self._rules.setdefault(selector, {})[property] = value

    def add_rule(self, selector: str, properties: Mapping[str, str]) -> None:
        """Merge ``properties`` into the rule for ``selector``.

        Properties already set under the selector are overwritten.

        Raises:
            InvalidRuleError: If properties is not a mapping.
        """
        if not isinstance(properties, Mapping):
            raise InvalidRuleError(
                f"Rule for '{selector}' must be a mapping, "
                f"not {type(properties).__name__}"
            )
        current = self._rules.setdefault(selector, {})
        overwritten = [name for name in properties if name in current]
        if overwritten:
            logger.debug(
                "Rule '%s': overwriting %s", selector, ", ".join(sorted(overwritten))
            )
        current.update(properties)

    def with_property(self, selector: str, property: str, value: str) -> Stylesheet:
        """Return a copy with one more property; this sheet is unchanged."""
        new_sheet = copy.deepcopy(self)
        new_sheet.add_property(selector, property, value)
        return new_sheet

    def with_rule(self, selector: str, properties: Mapping[str, str]) -> Stylesheet:
        """Return a copy with ``properties`` merged in; this sheet is unchanged."""
        new_sheet = copy.deepcopy(self)
        new_sheet.add_rule(selector, properties)
        return new_sheet

    def render_rules(self) -> str:
        """Render all rules as CSS text.

        Returns:
            One block per selector, e.g. ``"h1 {\\n    color: blue;\\n}\\n"``.
        """
        lines = []
        for selector in self.selectors():
            lines.append(f"{selector} {{\n")
            properties = self._rules[selector]
            for name in sorted(properties):
                lines.append(f"{INDENT}{name}: {properties[name]};\n")
            lines.append("}\n")
        return "".join(lines)

    def render_style_tag(self) -> str:
        """Render the rules wrapped in a ``<style>`` block."""
        return f"<style>\n{self.render_rules()}</style>\n"

    def to_element(self) -> Element:
        """Return a ``style`` Element holding the rules as its body."""
        return Element('style').with_body(f"\n{self.render_rules()}")


def declarations_to_inline_style(properties: Mapping[str, str]) -> str:
    """Join declarations for a ``style`` attribute.

    Example:
        >>> declarations_to_inline_style({'font-size': '20px', 'color': 'red'})
        'color: red;font-size: 20px;'
    """
    return "".join(f"{name}: {properties[name]};" for name in sorted(properties))


def strip_whitespace(css: str) -> str:
    """Remove newlines, tabs and spaces from ``css``."""
    return css.replace("\n", "").replace("\t", "").replace(" ", "")
