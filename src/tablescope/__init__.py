"""Tablescope - keep rendered table styles scoped when embedding them in documents."""

from tablescope.config import ScopeConfig
from tablescope.embed import scope_many, scope_table, wrap_in_reset_container
from tablescope.rewriter import scope_markup

__version__ = "0.1.0"
__all__ = [
    "ScopeConfig",
    "scope_markup",
    "scope_table",
    "scope_many",
    "wrap_in_reset_container",
]
