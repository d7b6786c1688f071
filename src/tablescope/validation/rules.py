"""Checks describing how well a document can be, or was, scoped.

Each rule is a function taking a MarkupDocument and a ScopeConfig and
returning a list of Diagnostic objects.  None of them raise: a degraded
document is reported, not rejected.
"""

from __future__ import annotations

import re

from tablescope.config import ScopeConfig
from tablescope.model.diagnostic import Diagnostic, Severity
from tablescope.model.document import MarkupDocument
from tablescope.parser import count_tables
from tablescope.stylesheet import find_style_blocks, parse_style_rules

_INLINE_STYLE_RE = re.compile(r'(?<![\w-])style="[^"]*"')


def check_identifier(document: MarkupDocument, config: ScopeConfig) -> list[Diagnostic]:
    """The document needs an id to scope its rules to."""
    if not document.has_identifier:
        return [
            Diagnostic(
                rule="check_identifier",
                severity=Severity.WARNING,
                message="No id attribute found; style rules cannot be scoped.",
                fix="Render the table with an explicit id.",
            )
        ]
    return []


def check_style_block(document: MarkupDocument, config: ScopeConfig) -> list[Diagnostic]:
    """The head region should contain a style block."""
    if find_style_blocks(document.head):
        return []
    return [
        Diagnostic(
            rule="check_style_block",
            severity=Severity.WARNING,
            message="No <style> block before the table; nothing to scope.",
        )
    ]


def check_table_root(document: MarkupDocument, config: ScopeConfig) -> list[Diagnostic]:
    """Exactly one table element is expected."""
    count = count_tables(document.body)
    if count == 0:
        return [
            Diagnostic(
                rule="check_table_root",
                severity=Severity.WARNING,
                message="No <table> element found.",
            )
        ]
    if count > 1:
        return [
            Diagnostic(
                rule="check_table_root",
                severity=Severity.WARNING,
                message=(
                    f"Found {count} table elements; nested or sibling tables "
                    "share class names and may not be isolated."
                ),
            )
        ]
    return []


def check_inline_styles(document: MarkupDocument, config: ScopeConfig) -> list[Diagnostic]:
    """Inline style attributes inside the table escape scoping."""
    count = len(_INLINE_STYLE_RE.findall(document.body))
    if not count:
        return []
    return [
        Diagnostic(
            rule="check_inline_styles",
            severity=Severity.INFO,
            message=f"Table carries {count} inline style attribute(s).",
            fix="Render with inline_css=False so all styling lives in the style block.",
        )
    ]


def check_unscoped_selectors(document: MarkupDocument, config: ScopeConfig) -> list[Diagnostic]:
    """Every selector should start with the document's id selector."""
    if not document.has_identifier:
        return []
    id_re = re.compile(rf"#{re.escape(document.identifier)}(?![\w-])")
    diagnostics: list[Diagnostic] = []
    for css in find_style_blocks(document.head):
        for rule in parse_style_rules(css):
            for selector in rule.selectors:
                if id_re.match(selector):
                    continue
                diagnostics.append(
                    Diagnostic(
                        rule="check_unscoped_selectors",
                        severity=Severity.WARNING,
                        message="Selector is not scoped to the table id.",
                        selector=selector,
                    )
                )
    return diagnostics


ALL_RULES = [
    check_identifier,
    check_style_block,
    check_table_root,
    check_inline_styles,
    check_unscoped_selectors,
]
