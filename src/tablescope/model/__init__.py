"""Tablescope model layer -- public type re-exports."""

from tablescope.model.diagnostic import Diagnostic, Severity
from tablescope.model.document import MarkupDocument, StyleRule

__all__ = [
    # document
    "MarkupDocument",
    "StyleRule",
    # diagnostic
    "Severity",
    "Diagnostic",
]
