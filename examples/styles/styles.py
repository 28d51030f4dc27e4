# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Styles example - building a stylesheet and embedding it in a tree.

Run with::

    python examples/styles/styles.py
"""

from __future__ import annotations

from genro_htmltag import Element, Stylesheet


def build_stylesheet() -> Stylesheet:
    sheet = Stylesheet()
    sheet.add_property('.wow', 'color', 'red')
    sheet.add_property('.wow', 'font-size', '20px')
    sheet.add_property('.wow', 'font-family', 'sans-serif')

    sheet.add_property('h1', 'color', 'blue')
    sheet.add_property('h1', 'font-size', '30px')
    return sheet


def build_page(sheet: Stylesheet) -> Element:
    return (
        Element('div')
        .with_id('wow')
        .embed_stylesheet(sheet)
        .with_child(Element('h1').with_class('wow').with_body('Hello World'))
    )


if __name__ == '__main__':
    sheet = build_stylesheet()
    print(sheet.render_rules())
    print(sheet.render_style_tag())
    print(build_page(sheet).render())
