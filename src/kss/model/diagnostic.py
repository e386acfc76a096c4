"""Diagnostic model: structured lint messages about a parsed stylesheet."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single lint finding about a stylesheet.

    Attributes:
        rule: Identifier for the lint rule that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        rule_index: Index of the stylesheet rule involved, if applicable.
        selector: Raw selector text involved, if applicable.
        fix: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    rule_index: int | None = None
    selector: str | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.rule_index is not None:
            location = f" [rule={self.rule_index}]"
        if self.selector:
            location += f" [selector={self.selector}]"
        return f"{self.severity.value}{location}: {self.message}"
