# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Element - a node of an HTML tree.

An Element holds one tag and everything rendered with it: id, classes,
custom attributes, and either a text body or a list of child Elements.

Example:
    Building a small tree::

        from genro_htmltag import Element

        div = Element('div').with_id('main').with_class('container')
        p = Element('p')
        p.set_body('Hello World')
        div.add_child(p)
        div.render()
        # '<div id="main" class="container"><p>Hello World</p></div>'

Nothing is escaped: attribute values, class names and body text are
written out exactly as given.
"""

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING, Any, Iterable

from .exceptions import InvalidChildError
from .tags import TagKind

if TYPE_CHECKING:
    from .styles import Stylesheet

logger = logging.getLogger(__name__)


class Element:
    """A single HTML tag with its attributes, body and children.

    Each element has:
    - kind: The TagKind, fixed at construction
    - id: Optional id attribute (last write wins)
    - classes: Class names in insertion order, duplicates kept
    - custom_attributes: Other attributes as (key, value) pairs, or None
    - body: Optional text body
    - children: Child elements, or None until the first one is added

    When a body is set, children are never rendered.

    Example:
        >>> p = Element('p')
        >>> p.add_class('test')
        >>> p.set_body('Hello World')
        >>> p.render()
        '<p class="test">Hello World</p>'
    """

    __slots__ = ('_kind', 'id', 'classes', 'body', 'children', 'custom_attributes')

    def __init__(self, tag_name: str) -> None:
        """Initialize an Element.

        Args:
            tag_name: Tag name, any case. Known names map to the matching
                TagKind, anything else becomes a custom tag.
        """
        self._kind = TagKind.from_name(tag_name)
        self.id: str | None = None
        self.classes: list[str] = []
        self.body: str | None = None
        self.children: list[Element] | None = None
        self.custom_attributes: list[tuple[str, str]] | None = None

    @classmethod
    def from_kind(
        cls,
        kind: TagKind,
        body: str | None = None,
        classes: Iterable[str] = (),
    ) -> Element:
        """Create an Element from a TagKind with body and classes set.

        Args:
            kind: The element's tag.
            body: Optional text body.
            classes: Class names, in order.

        Example:
            >>> Element.from_kind(TagKind.A, 'Hello World', ['test']).render()
            '<a class="test">Hello World</a>'
        """
        element = cls.__new__(cls)
        element._kind = kind
        element.id = None
        element.classes = list(classes)
        element.body = body
        element.children = None
        element.custom_attributes = None
        return element

    @property
    def kind(self) -> TagKind:
        """The element's TagKind."""
        return self._kind

    @property
    def tag(self) -> str:
        """Tag name as written in markup."""
        return self._kind.html_name()

    def __repr__(self) -> str:
        n_children = len(self.children) if self.children else 0
        return f"Element({self.tag!r}, children={n_children})"

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return (
            self._kind == other._kind
            and self.id == other.id
            and self.classes == other.classes
            and self.body == other.body
            and self.children == other.children
            and self.custom_attributes == other.custom_attributes
        )

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> Element:
        """Return an independent deep copy of this element."""
        return copy.deepcopy(self)

    # -------------------------------------------------------------------------
    # Mutators
    # -------------------------------------------------------------------------

    def add_child(self, child: Element) -> None:
        """Append a child element.

        The parent keeps its own copy of ``child``: later changes to the
        object passed in do not show up in this tree.

        Args:
            child: The element to nest.

        Raises:
            InvalidChildError: If child is not an Element.
        """
        if not isinstance(child, Element):
            raise InvalidChildError(
                f"Child must be an Element, not {type(child).__name__}"
            )
        child = copy.deepcopy(child)
        if self.children is None:
            self.children = [child]
        else:
            self.children.append(child)

    def add_class(self, class_name: str) -> None:
        """Append a class name."""
        self.classes.append(class_name)

    def set_body(self, body: str) -> None:
        """Set the text body."""
        self.body = body

    def set_id(self, id: str) -> None:
        """Set the id attribute."""
        self.id = id

    def set_style(self, style: str) -> None:
        """Add a ``style`` attribute."""
        self.set_attribute('style', style)

    def set_href(self, href: str) -> None:
        """Add an ``href`` attribute."""
        self.set_attribute('href', href)

    def set_attribute(self, key: str, value: str) -> None:
        """Add an attribute.

        ``class`` appends a class name and ``id`` replaces the id. Any
        other key is appended to the custom attributes, even if the same
        key is already there.

        Args:
            key: Attribute name.
            value: Attribute value.

        Example:
            >>> div = Element('div')
            >>> div.set_attribute('class', 'test')
            >>> div.set_attribute('id', 'test')
            >>> div.set_attribute('style', 'color: red;')
            >>> div.render()
            '<div id="test" class="test" style="color: red;"></div>'
        """
        if key == 'class':
            self.add_class(value)
        elif key == 'id':
            self.set_id(value)
        elif self.custom_attributes is None:
            self.custom_attributes = [(key, value)]
        else:
            self.custom_attributes.append((key, value))

    def set_custom_attributes(self, attributes: Iterable[tuple[str, str]]) -> None:
        """Replace all custom attributes with ``attributes``.

        Unlike set_attribute, ``class`` and ``id`` keys are not special here.
        """
        self.custom_attributes = [(key, value) for key, value in attributes]

    # -------------------------------------------------------------------------
    # Chaining
    # -------------------------------------------------------------------------

    def with_id(self, id: str) -> Element:
        self.set_id(id)
        return self

    def with_class(self, class_name: str) -> Element:
        self.add_class(class_name)
        return self

    def with_body(self, body: str) -> Element:
        self.set_body(body)
        return self

    def with_style(self, style: str) -> Element:
        self.set_style(style)
        return self

    def with_href(self, href: str) -> Element:
        self.set_href(href)
        return self

    def with_attribute(self, key: str, value: str) -> Element:
        self.set_attribute(key, value)
        return self

    def with_custom_attributes(self, attributes: Iterable[tuple[str, str]]) -> Element:
        self.set_custom_attributes(attributes)
        return self

    def with_child(self, child: Element) -> Element:
        self.add_child(child)
        return self

    def embed_stylesheet(self, stylesheet: Stylesheet) -> Element:
        """Append the stylesheet as a ``<style>`` child and return self."""
        self.add_child(stylesheet.to_element())
        return self

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _opening_tag(self) -> str:
        parts = [f"<{self.tag}"]
        if self.id is not None:
            parts.append(f' id="{self.id}"')
        if self.classes:
            parts.append(f' class="{" ".join(self.classes)}"')
        if self.custom_attributes is not None:
            for key, value in self.custom_attributes:
                parts.append(f' {key}="{value}"')
        parts.append(">")
        return "".join(parts)

    def render(self) -> str:
        """Render this element and its subtree to an HTML string.

        Attributes come out as id, class, then custom attributes in
        insertion order. If a body is set it is the only content: children
        are skipped.

        Returns:
            The markup string.
        """
        opening = self._opening_tag()
        closing = f"</{self.tag}>"

        if self.body is not None:
            if self.children:
                logger.debug(
                    "<%s> has a body, %d children not rendered",
                    self.tag, len(self.children),
                )
            return f"{opening}{self.body}{closing}"

        inner = "".join(child.render() for child in self.children or ())
        return f"{opening}{inner}{closing}"
