"""Stylesheet model: Declaration, DeclarationList, Rule, and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

from kss.selector.model import SelectorFragmentChain

if TYPE_CHECKING:
    from kss.model.node import NodeLike


@dataclass(frozen=True)
class Declaration:
    """A single declaration, kept as its raw text.

    No property/value decomposition is performed on string declarations.
    ``property``, ``value`` and ``important`` are only filled in when the
    source document already delivered the declaration in structured form.
    """

    raw: str
    property: str | None = None
    value: str | None = None
    important: bool = False


@dataclass(frozen=True)
class DeclarationList:
    """Declarations of one rule, in source order."""

    declarations: tuple[Declaration, ...] = ()

    def __iter__(self) -> Iterator[Declaration]:
        return iter(self.declarations)

    def __len__(self) -> int:
        return len(self.declarations)

    def __getitem__(self, index: int) -> Declaration:
        return self.declarations[index]


@dataclass(frozen=True)
class Rule:
    """A set of compiled selectors paired with a declaration list."""

    selectors: tuple[SelectorFragmentChain, ...]
    declarations: DeclarationList
    index: int = 0

    @property
    def raw(self) -> str:
        """The rule rendered back to KSS text."""
        selectors = ",\n".join(s.raw for s in self.selectors)
        body = "\n".join(f"\t{d.raw}" for d in self.declarations)
        return f"{selectors} {{\n{body}\n}}"

    def matching_selector(self, node: NodeLike) -> SelectorFragmentChain | None:
        """Return the first selector of this rule that matches *node*, if any."""
        for selector in self.selectors:
            if selector.matches(node):
                return selector
        return None


@dataclass(frozen=True)
class Stylesheet:
    """Rules parsed from one KSS document, in document order."""

    rules: tuple[Rule, ...] = ()

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    @property
    def raw(self) -> str:
        return "\n\n".join(rule.raw for rule in self.rules)

    def rules_matching(self, node: NodeLike) -> list[Rule]:
        """Rules with at least one selector matching *node*, in stylesheet order."""
        return [rule for rule in self.rules if rule.matching_selector(node) is not None]
