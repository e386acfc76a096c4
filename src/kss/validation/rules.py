"""Lint rules for parsed stylesheets.

Each rule is a function taking a Stylesheet and returning a list of
Diagnostic objects describing anything that will never match or looks
unintended.
"""

from __future__ import annotations

from kss.model.diagnostic import Diagnostic, Severity
from kss.selector.model import ElementType, PseudoType
from kss.stylesheet.model import Stylesheet

KNOWN_OPERATORS = frozenset({"", "=", "~=", "|=", "^=", "$=", "*="})


def check_attribute_operators(stylesheet: Stylesheet) -> list[Diagnostic]:
    """Attribute operators outside the known set never match."""
    diagnostics: list[Diagnostic] = []
    for rule in stylesheet:
        for chain in rule.selectors:
            for element in chain.elements:
                for attr in element.attributes:
                    if attr.operator in KNOWN_OPERATORS:
                        continue
                    diagnostics.append(
                        Diagnostic(
                            rule="check_attribute_operators",
                            severity=Severity.WARNING,
                            message=f"Unknown attribute operator '{attr.operator}' in '{element.raw}' never matches.",
                            rule_index=rule.index,
                            selector=chain.raw,
                            fix="Use one of =, ~=, |=, ^=, $=, *=.",
                        )
                    )
    return diagnostics


def check_unsupported_pseudos(stylesheet: Stylesheet) -> list[Diagnostic]:
    """Pseudo-elements and functional pseudo-classes are not evaluated."""
    diagnostics: list[Diagnostic] = []
    for rule in stylesheet:
        for chain in rule.selectors:
            for element in chain.elements:
                for pseudo in element.pseudos:
                    if pseudo.type is PseudoType.PSEUDO_ELEMENT:
                        what = f"Pseudo-element '::{pseudo.value}'"
                    elif "(" in pseudo.value:
                        what = f"Functional pseudo-class ':{pseudo.value}'"
                    else:
                        continue
                    diagnostics.append(
                        Diagnostic(
                            rule="check_unsupported_pseudos",
                            severity=Severity.INFO,
                            message=f"{what} is not supported; the selector never matches.",
                            rule_index=rule.index,
                            selector=chain.raw,
                        )
                    )
    return diagnostics


def check_single_id_and_tag(stylesheet: Stylesheet) -> list[Diagnostic]:
    """An element with two ids or two tags can only match if they are equal."""
    diagnostics: list[Diagnostic] = []
    for rule in stylesheet:
        for chain in rule.selectors:
            for element in chain.elements:
                for kind in (ElementType.ID, ElementType.TAG):
                    count = sum(1 for d in element.elements if d.type is kind)
                    if count > 1:
                        diagnostics.append(
                            Diagnostic(
                                rule="check_single_id_and_tag",
                                severity=Severity.WARNING,
                                message=f"'{element.raw}' has {count} {kind.value} designations.",
                                rule_index=rule.index,
                                selector=chain.raw,
                                fix=f"Keep a single {kind.value} per selector element.",
                            )
                        )
    return diagnostics


def check_empty_declarations(stylesheet: Stylesheet) -> list[Diagnostic]:
    """Rules without declarations have no effect."""
    return [
        Diagnostic(
            rule="check_empty_declarations",
            severity=Severity.INFO,
            message="Rule has no declarations.",
            rule_index=rule.index,
        )
        for rule in stylesheet
        if len(rule.declarations) == 0
    ]


ALL_RULES = [
    check_attribute_operators,
    check_unsupported_pseudos,
    check_single_id_and_tag,
    check_empty_declarations,
]
