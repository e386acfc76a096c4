"""Stylesheet validator: runs all lint rules and reports diagnostics."""

from __future__ import annotations

from typing import Callable

from kss.model.diagnostic import Diagnostic
from kss.stylesheet.model import Stylesheet
from kss.validation.rules import ALL_RULES

RuleFunc = Callable[[Stylesheet], list[Diagnostic]]


def validate(
    stylesheet: Stylesheet, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run all lint rules against *stylesheet*.

    Returns the full list of diagnostics (errors, warnings, info).
    """
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(stylesheet))
    return diagnostics
