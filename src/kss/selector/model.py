"""Selector model: element descriptors, combinators, and compiled fragment chains.

A raw selector such as ``div.action[foo=23] > .pickle:not(p)`` is broken into
*fragments*. Each fragment is either a :class:`SelectorElement` (what a single
node must look like) or a :class:`Combinator` (how two such nodes relate).
Both carry a ``kind`` tag, ``"element"`` or ``"combinator"``, which consumers
branch on.

:class:`SelectorFragmentChain` keeps the fragments most-specific-first, the
reverse of how they are written, because matching starts at the candidate
node and walks outward to its ancestors and siblings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Iterator, Literal, Sequence, Union

from kss.parser.errors import UnresolvedCombinator

if TYPE_CHECKING:
    from kss.model.node import NodeLike


class ElementType(Enum):
    """What an element descriptor designates on a node."""

    CLASS = "class"
    ID = "id"
    TAG = "tag"
    WILDCARD = "wildcard"


class PseudoType(Enum):
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"


class CombinatorType(Enum):
    """Relational tokens that may appear between two selector elements."""

    DESCENDANT = ">>"
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


COMBINATOR_TOKENS = frozenset(t.value for t in CombinatorType)


@dataclass(frozen=True)
class ElementDescriptor:
    """One ``.class``, ``#id``, ``tag`` or ``*`` designation."""

    type: ElementType
    value: str


@dataclass(frozen=True)
class AttributePredicate:
    """A bracketed attribute test such as ``[bar~=grik]``.

    ``operator`` is carried verbatim; an empty operator means the predicate
    only tests for presence of ``key``.
    """

    key: str
    operator: str
    value: str


@dataclass(frozen=True)
class PseudoDescriptor:
    """A ``:pseudo-class`` or ``::pseudo-element``.

    Functional pseudos keep their parenthesized arguments inside ``value``
    (``"not(p)"``). ``parameters`` is reserved and is never populated.
    """

    type: PseudoType
    value: str
    parameters: tuple[str, ...] = ()


@dataclass(frozen=True)
class SelectorElement:
    """A parsed selector element like ``div#id.group[foo=23]:active``."""

    raw: str
    elements: tuple[ElementDescriptor, ...] = ()
    attributes: tuple[AttributePredicate, ...] = ()
    pseudos: tuple[PseudoDescriptor, ...] = ()
    kind: Literal["element"] = field(default="element", init=False)


@dataclass(frozen=True)
class Combinator:
    """A relational token between two selector elements.

    Construction fails with :class:`UnresolvedCombinator` when ``raw`` is not
    one of the known tokens, so a chain never holds a combinator it cannot
    match.
    """

    raw: str
    type: CombinatorType = field(init=False)
    kind: Literal["combinator"] = field(default="combinator", init=False)

    def __post_init__(self) -> None:
        if self.raw not in COMBINATOR_TOKENS:
            raise UnresolvedCombinator(
                f"Unknown combinator {self.raw!r}", raw=self.raw
            )
        object.__setattr__(self, "type", CombinatorType(self.raw))


SelectorFragment = Union[SelectorElement, Combinator]


class SelectorFragmentChain:
    """An immutable compiled selector.

    The constructor takes fragments in the order they are written and stores
    them reversed. ``reversed_fragments`` (also what iteration and indexing
    use) is the matching order; ``source_fragments`` restores text order.
    """

    __slots__ = ("_raw", "_reversed")

    def __init__(self, fragments: Sequence[SelectorFragment], raw: str = "") -> None:
        self._reversed: tuple[SelectorFragment, ...] = tuple(reversed(fragments))
        self._raw = raw or " ".join(f.raw for f in fragments)

    @property
    def raw(self) -> str:
        """The selector text this chain was compiled from."""
        return self._raw

    @property
    def reversed_fragments(self) -> tuple[SelectorFragment, ...]:
        """Fragments most-specific-first (last written fragment first)."""
        return self._reversed

    @property
    def source_fragments(self) -> tuple[SelectorFragment, ...]:
        """Fragments in the order they appear in the selector text."""
        return tuple(reversed(self._reversed))

    @property
    def elements(self) -> tuple[SelectorElement, ...]:
        return tuple(f for f in self._reversed if f.kind == "element")

    @property
    def specificity(self) -> int:
        """CSS-style specificity score: ids*100 + classes/attributes/pseudo-classes*10 + tags/pseudo-elements."""
        hundreds = tens = ones = 0
        for element in self.elements:
            for descriptor in element.elements:
                if descriptor.type is ElementType.ID:
                    hundreds += 1
                elif descriptor.type is ElementType.CLASS:
                    tens += 1
                elif descriptor.type is ElementType.TAG:
                    ones += 1
            tens += len(element.attributes)
            for pseudo in element.pseudos:
                if pseudo.type is PseudoType.PSEUDO_CLASS:
                    tens += 1
                else:
                    ones += 1
        return 100 * hundreds + 10 * tens + ones

    def matches(self, node: NodeLike) -> bool:
        """Return True if *node* satisfies this selector."""
        from kss.selector.matcher import matches

        return matches(self, node)

    def __iter__(self) -> Iterator[SelectorFragment]:
        return iter(self._reversed)

    def __len__(self) -> int:
        return len(self._reversed)

    def __getitem__(self, index: int) -> SelectorFragment:
        return self._reversed[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectorFragmentChain):
            return NotImplemented
        return self._reversed == other._reversed and self._raw == other._raw

    def __hash__(self) -> int:
        return hash((self._raw, self._reversed))

    def __repr__(self) -> str:
        return f"SelectorFragmentChain({self._raw!r})"
