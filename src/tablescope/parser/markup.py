"""Split renderer markup into head/body regions and find its identifier.

The renderer emits a fixed shape::

    <div id="abcdef" ...>
    <style>
    html { ... }
    #abcdef .gt_table { ... }
    </style>
    <table class="gt_table" ...>
      ...
    </table>
    </div>

Nothing here validates that shape; unexpected input simply yields a document
with an empty body or an empty identifier.
"""

from __future__ import annotations

import re

from tablescope.model.document import MarkupDocument

__all__ = ["parse_markup", "extract_identifier", "count_tables", "split_regions"]

# The first table opening tag; ``<thead``/``<tablefoo`` must not match.
_TABLE_OPEN_RE = re.compile(r"<table(?![\w-])", re.IGNORECASE)

# id="value" where the attribute name is not the tail of e.g. data-id.
_ID_RE = re.compile(r'(?<![\w-])id="(?P<value>[^"]*)"')


def split_regions(text: str) -> tuple[str, str]:
    """Split *text* at the first ``<table`` tag into ``(head, body)``."""
    match = _TABLE_OPEN_RE.search(text)
    if match is None:
        return text, ""
    return text[: match.start()], text[match.start() :]


def extract_identifier(text: str) -> str:
    """Return the value of the first ``id="..."`` attribute, or ``""``."""
    match = _ID_RE.search(text)
    if match is None:
        return ""
    return match.group("value").strip()


def count_tables(text: str) -> int:
    """Return how many ``<table`` opening tags *text* contains."""
    return len(_TABLE_OPEN_RE.findall(text))


def parse_markup(text: str) -> MarkupDocument:
    """Parse renderer output into a :class:`MarkupDocument`. Never raises."""
    head, body = split_regions(text)
    return MarkupDocument(head=head, body=body, identifier=extract_identifier(text))
