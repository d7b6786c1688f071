"""Document model: renderer markup split into head and body regions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MarkupDocument:
    """Table markup produced by an external renderer.

    Attributes:
        head: Everything before the first ``<table`` opening tag.  Holds the
            style block and, for most renderers, the wrapper carrying the id.
        body: The ``<table`` opening tag onward.  Empty when no table exists.
        identifier: Value of the first ``id="..."`` attribute, or ``""``.
    """

    head: str
    body: str = ""
    identifier: str = ""

    @property
    def text(self) -> str:
        return self.head + self.body

    @property
    def has_identifier(self) -> bool:
        return bool(self.identifier)


@dataclass(frozen=True)
class StyleRule:
    """A single ``selector, selector { declarations }`` rule."""

    selectors: tuple[str, ...]
    declarations: str  # raw text between the braces
