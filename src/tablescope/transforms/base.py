"""Base protocol for markup transforms."""

from __future__ import annotations

from typing import Protocol

from tablescope.config import ScopeConfig
from tablescope.model.document import MarkupDocument


class Transform(Protocol):
    """A document-to-document rewriting step."""

    def apply(self, document: MarkupDocument, config: ScopeConfig) -> MarkupDocument: ...
