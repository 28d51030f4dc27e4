# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlTag exceptions."""

from __future__ import annotations


class HtmlTagError(Exception):
    """Base exception for HtmlTag errors."""

    pass


class InvalidChildError(HtmlTagError, TypeError):
    """Raised when something that is not an Element is added as a child."""

    pass


class InvalidRuleError(HtmlTagError, TypeError):
    """Raised when a stylesheet rule is not a mapping of properties."""

    pass
