"""Regex scanner for the style blocks a table renderer emits.

This is not a CSS parser.  It recognises flat ``selector { declarations }``
rules, which is the only shape the renderer produces, e.g.:

    html { font-family: system-ui; }
    #abcdef .gt_table, #abcdef .gt_col_heading { color: #333333; }

Block at-rules (``@media ... { ... }``) are left alone, but the rules nested
inside them are still found because a rule body can never contain a brace.
A rule is a ``{`` whose next brace is ``}``; its prelude runs back to the
previous brace.  The scan visits each brace once.
"""

from __future__ import annotations

import re
from typing import Callable, Iterator

from tablescope.model.document import StyleRule

__all__ = ["find_style_blocks", "parse_style_rules", "rewrite_selectors", "rewrite_style_blocks"]

# <style ...> css </style>
_STYLE_RE = re.compile(
    r"(?P<open><style\b[^>]*>)(?P<css>.*?)(?P<close></style\s*>)",
    re.DOTALL | re.IGNORECASE,
)

_BRACE_RE = re.compile(r"[{}]")

# Leading noise of a prelude: whitespace, comments and statement at-rules
# (@import url("...;...");).  Quoted strings and parentheses may hold ';'.
_LEAD_RE = re.compile(
    r"""
    (?:
        \s
      | /\*.*?\*/
      | @(?:[^;{}"'()] | "[^"]*" | '[^']*' | \([^)]*\))*;
    )*
    """,
    re.VERBOSE | re.DOTALL,
)

_SELECTOR_SPLIT_RE = re.compile(r"(\s*,\s*)")


def find_style_blocks(text: str) -> list[str]:
    """Return the CSS text of every ``<style>`` element in *text*."""
    return [m.group("css") for m in _STYLE_RE.finditer(text)]


def _split_prelude(prelude: str) -> tuple[str, str, str]:
    """Split a prelude into ``(lead, selector, trail)``."""
    lead = _LEAD_RE.match(prelude).group(0)
    rest = prelude[len(lead) :]
    selector = rest.rstrip()
    return lead, selector, rest[len(selector) :]


def _iter_rules(css: str) -> Iterator[tuple[int, int, str, str, str, str]]:
    """Yield ``(start, end, lead, selector, trail, body)`` for each rule with a real selector."""
    last = 0  # just past the previous brace
    rule_start = 0
    open_at = -1
    for brace in _BRACE_RE.finditer(css):
        pos = brace.start()
        if brace.group() == "{":
            rule_start, open_at = last, pos
        elif open_at >= 0:
            lead, selector, trail = _split_prelude(css[rule_start:open_at])
            if selector and not selector.startswith("@"):
                yield rule_start, pos + 1, lead, selector, trail, css[open_at + 1 : pos]
            open_at = -1
        last = pos + 1


def parse_style_rules(css: str) -> list[StyleRule]:
    """Parse *css* into a list of :class:`StyleRule` in source order."""
    rules: list[StyleRule] = []
    for _start, _end, _lead, selector, _trail, body in _iter_rules(css):
        selectors = tuple(s.strip() for s in selector.split(",") if s.strip())
        rules.append(StyleRule(selectors=selectors, declarations=body.strip()))
    return rules


def rewrite_selectors(css: str, rewrite: Callable[[str], str]) -> str:
    """Return *css* with every individual selector passed through *rewrite*.

    Everything other than the selectors themselves (whitespace, comments,
    at-rule preludes, declarations) is preserved unchanged.
    """
    pieces: list[str] = []
    last = 0
    for start, end, lead, selector, trail, body in _iter_rules(css):
        parts = _SELECTOR_SPLIT_RE.split(selector)
        # even indices are selectors, odd indices the comma separators
        parts[::2] = [rewrite(p) if p else p for p in parts[::2]]
        pieces.append(css[last:start])
        pieces.append(lead + "".join(parts) + trail + "{" + body + "}")
        last = end
    pieces.append(css[last:])
    return "".join(pieces)


def rewrite_style_blocks(text: str, rewrite: Callable[[str], str]) -> str:
    """Apply :func:`rewrite_selectors` to the CSS of every style block in *text*."""

    def _block(match: re.Match) -> str:
        return match.group("open") + rewrite_selectors(match.group("css"), rewrite) + match.group("close")

    return _STYLE_RE.sub(_block, text)
