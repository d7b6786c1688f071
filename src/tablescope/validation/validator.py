"""Document validator: runs all rules and collects diagnostics."""

from __future__ import annotations

from typing import Callable

from tablescope.config import ScopeConfig
from tablescope.model.diagnostic import Diagnostic
from tablescope.model.document import MarkupDocument
from tablescope.validation.rules import ALL_RULES

RuleFunc = Callable[[MarkupDocument, ScopeConfig], list[Diagnostic]]


def validate(
    document: MarkupDocument,
    config: ScopeConfig | None = None,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run all rules against *document* and return every diagnostic found."""
    config = config or ScopeConfig()
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(document, config))
    return diagnostics
