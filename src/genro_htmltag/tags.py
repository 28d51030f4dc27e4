# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TagKind - classification of HTML tag names.

A TagKind is either one of the known tags (p, div, span, a, h1-h6, img,
table, tr, td, th) or a custom tag carrying an arbitrary name. The known
tags are nothing special for rendering: ``TagKind.P`` and a custom ``p``
would render the same. They exist for convenience and for sorting.

Example:
    >>> TagKind.from_name('DIV') is TagKind.DIV
    True
    >>> TagKind.from_name('my-widget').html_name()
    'my-widget'
"""

from __future__ import annotations

from typing import Any, ClassVar


class TagKind:
    """Known-or-custom HTML tag name.

    Instances are immutable and hashable. Known tags are shared class
    attributes (``TagKind.P``, ``TagKind.H1``, ...), so ``from_name``
    returns the very same object for a known name.

    Ordering follows a fixed rank ladder, highest first::

        div > h1 > h2 > h3 > h4 > h5 > h6 > img > custom > a = span = p

    table, tr, td and th share the bottom rank with a, span and p.
    The ordering is only meant for sorting collections of tags; it is not
    alphabetic and it is not consistent with ``==`` (a and p are different
    tags but neither is less than the other).
    """

    __slots__ = ('name', 'custom')

    P: ClassVar[TagKind]
    DIV: ClassVar[TagKind]
    SPAN: ClassVar[TagKind]
    A: ClassVar[TagKind]
    H1: ClassVar[TagKind]
    H2: ClassVar[TagKind]
    H3: ClassVar[TagKind]
    H4: ClassVar[TagKind]
    H5: ClassVar[TagKind]
    H6: ClassVar[TagKind]
    IMG: ClassVar[TagKind]
    TABLE: ClassVar[TagKind]
    TR: ClassVar[TagKind]
    TD: ClassVar[TagKind]
    TH: ClassVar[TagKind]

    name: str
    custom: bool

    def __init__(self, name: str, custom: bool = False) -> None:
        """Initialize a TagKind.

        Prefer ``from_name`` or ``custom_tag``: this constructor does not
        lower-case nor look up the known tags.

        Args:
            name: The tag name as it will be rendered.
            custom: True for a custom tag, False for a known one.
        """
        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'custom', custom)

    @classmethod
    def from_name(cls, name: str) -> TagKind:
        """Return the TagKind for a raw tag name.

        The name is lower-cased, then matched against the known tags.
        Anything else becomes a custom tag. Never fails.

        Args:
            name: Raw tag name, any case.

        Returns:
            The known TagKind or a new custom one.
        """
        name = name.lower()
        known = _KNOWN_TAGS.get(name)
        if known is not None:
            return known
        return cls(name, custom=True)

    @classmethod
    def custom_tag(cls, name: str) -> TagKind:
        """Return a custom TagKind holding ``name`` verbatim."""
        return cls(name, custom=True)

    def html_name(self) -> str:
        """Tag name as written in markup."""
        return self.name

    @property
    def rank(self) -> int:
        """Position in the sort ladder (higher sorts later)."""
        if self.custom:
            return _CUSTOM_RANK
        return _RANKS.get(self.name, _BOTTOM_RANK)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"'{type(self).__name__}' object is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"'{type(self).__name__}' object is immutable")

    def __copy__(self) -> TagKind:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> TagKind:
        return self

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.name, self.custom))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TagKind):
            return NotImplemented
        return self.custom == other.custom and self.name == other.name

    def __hash__(self) -> int:
        return hash((self.name, self.custom))

    def __lt__(self, other: TagKind) -> bool:
        if not isinstance(other, TagKind):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: TagKind) -> bool:
        if not isinstance(other, TagKind):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: TagKind) -> bool:
        if not isinstance(other, TagKind):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: TagKind) -> bool:
        if not isinstance(other, TagKind):
            return NotImplemented
        return self.rank >= other.rank

    def __str__(self) -> str:
        return self.html_name()

    def __repr__(self) -> str:
        if self.custom:
            return f"TagKind.custom_tag({self.name!r})"
        return f"TagKind.{self.name.upper()}"


def compare(a: TagKind, b: TagKind) -> int:
    """Compare two tags by rank.

    Returns:
        -1 if ``a`` sorts before ``b``, 1 if after, 0 if they tie.
    """
    return (a.rank > b.rank) - (a.rank < b.rank)


_KNOWN_NAMES = (
    'p', 'div', 'span', 'a',
    'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
    'img', 'table', 'tr', 'td', 'th',
)

_KNOWN_TAGS: dict[str, TagKind] = {}
for _name in _KNOWN_NAMES:
    _KNOWN_TAGS[_name] = TagKind(_name)
    setattr(TagKind, _name.upper(), _KNOWN_TAGS[_name])
del _name

# a, span, p and the table family all fall to the bottom rank
_BOTTOM_RANK = 0
_CUSTOM_RANK = 1
_RANKS: dict[str, int] = {
    'img': 2,
    'h6': 3,
    'h5': 4,
    'h4': 5,
    'h3': 6,
    'h2': 7,
    'h1': 8,
    'div': 9,
}

KNOWN_TAGS: tuple[TagKind, ...] = tuple(_KNOWN_TAGS.values())
