"""Selector scoping transform: confines every style rule to one table."""

from __future__ import annotations

import re
from dataclasses import replace

from tablescope.config import ScopeConfig
from tablescope.model.document import MarkupDocument
from tablescope.stylesheet import rewrite_style_blocks


def scope_selector(selector: str, identifier: str, config: ScopeConfig) -> str:
    """Rewrite a single selector so it only matches inside ``#identifier``.

    - the global selector (``html``) becomes ``#identifier .root_class``;
    - anything not already starting with ``#identifier`` gets it prepended;
    - a doubled ``#identifier #identifier`` prefix collapses to one.

    An empty *identifier* leaves the selector untouched.
    """
    if not identifier:
        return selector
    id_sel = f"#{identifier}"
    if selector.strip() == config.global_selector:
        return f"{id_sel} .{config.root_class}"
    if not _starts_with_id(selector, identifier):
        selector = f"{id_sel} {selector}"
    return _collapse_duplicate_id(selector, identifier)


def _starts_with_id(selector: str, identifier: str) -> bool:
    return re.match(rf"#{re.escape(identifier)}(?![\w-])", selector) is not None


def _collapse_duplicate_id(selector: str, identifier: str) -> str:
    escaped = re.escape(identifier)
    pattern = rf"(?<![\w-])#{escaped}(?:\s+#{escaped}(?![\w-]))+"
    return re.sub(pattern, lambda _m: f"#{identifier}", selector)


class ScopeSelectorsTransform:
    """Prefix every selector in the head region's style blocks with the document id.

    The body region is never touched: it is large, holds no style rules, and
    cell text must not be rewritten.
    """

    def apply(self, document: MarkupDocument, config: ScopeConfig) -> MarkupDocument:
        if not document.has_identifier:
            return document
        identifier = document.identifier
        head = rewrite_style_blocks(
            document.head, lambda sel: scope_selector(sel, identifier, config)
        )
        if head == document.head:
            return document
        return replace(document, head=head)
