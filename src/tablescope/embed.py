"""Helpers for embedding rendered tables in a host document."""

from __future__ import annotations

from typing import Iterable, Protocol

from tablescope.config import ScopeConfig

__all__ = ["RawHtmlTable", "scope_table", "scope_many", "wrap_in_reset_container"]


class RawHtmlTable(Protocol):
    """Any table object that can render itself to HTML with a separate style block."""

    def as_raw_html(self, *, inline_css: bool = ...) -> str: ...


def wrap_in_reset_container(text: str, class_name: str = "tablescope-reset") -> str:
    """Wrap *text* in a container that resets every inherited style."""
    return f'<div class="{class_name}" style="all: initial;">\n{text}\n</div>'


def scope_table(table: RawHtmlTable, config: ScopeConfig | None = None) -> str:
    """Render *table* with inline styling disabled and scope the result."""
    from tablescope.rewriter import scope_markup

    return scope_markup(table.as_raw_html(inline_css=False), config)


def scope_many(items: Iterable[str], config: ScopeConfig | None = None) -> list[str]:
    """Scope several independently rendered tables."""
    from tablescope.rewriter import scope_markup

    return [scope_markup(text, config) for text in items]
