# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Basic example - a list of people rendered as paragraphs.

Run with::

    python examples/basic/basic.py
"""

from __future__ import annotations

from genro_htmltag import Element

PEOPLE = ['Ram', 'Jake', 'John', 'Jill', 'Jenny']


def people_list(names: list[str]) -> Element:
    """Return a div holding one numbered paragraph per name."""
    main = Element('div').with_id('main').with_style('color: red;')
    for i, name in enumerate(names):
        main.add_child(
            Element('p')
            .with_id(f'p-{i}')
            .with_class('person')
            .with_body(f'{i + 1}. {name}')
        )
    return main


if __name__ == '__main__':
    print(people_list(PEOPLE).render())
