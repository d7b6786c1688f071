"""Scope-rewriter entry point: renderer markup in, embeddable markup out."""

from __future__ import annotations

import logging

from tablescope.config import ScopeConfig
from tablescope.embed import wrap_in_reset_container
from tablescope.parser import parse_markup
from tablescope.transforms import apply_transforms

__all__ = ["scope_markup"]

log = logging.getLogger(__name__)


def scope_markup(text: str, config: ScopeConfig | None = None) -> str:
    """Scope the style rules in *text* to its own table and rename its classes.

    This is a heuristic for the markup shape one renderer produces, not a
    general CSS rewriter.  Input it does not recognise is returned with
    whatever rewriting could still be applied; it never raises.
    """
    config = config or ScopeConfig()
    document = parse_markup(text)
    if not document.has_identifier:
        log.debug("No id attribute found; selectors left unscoped")
    if not document.body:
        log.debug("No <table> tag found; whole input treated as head region")

    document = apply_transforms(document, config)
    log.debug(
        "Scoped markup: id=%s head=%d body=%d chars",
        document.identifier or "-",
        len(document.head),
        len(document.body),
    )

    if config.reset_container:
        return wrap_in_reset_container(document.text, config.reset_class)
    return document.text
