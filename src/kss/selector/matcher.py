"""Matching predicate: does a scene node satisfy a compiled selector?

Matching walks the chain most-specific-first. The first element must hold
for the candidate node itself; every following element is searched for along
the axis named by the combinator in between (juxtaposed elements relate as
descendants). The walk only reads the scene graph and never raises: an
operator or pseudo it does not understand simply does not match.
"""

from __future__ import annotations

import logging
from typing import Iterator

from kss.model.node import NodeLike
from kss.selector.model import (
    AttributePredicate,
    CombinatorType,
    ElementDescriptor,
    ElementType,
    PseudoDescriptor,
    PseudoType,
    SelectorElement,
    SelectorFragmentChain,
)

__all__ = [
    "attribute_matches",
    "descriptor_matches",
    "element_matches",
    "matches",
    "pseudo_matches",
]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Single-element predicates
# ---------------------------------------------------------------------------


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def descriptor_matches(descriptor: ElementDescriptor, node: NodeLike) -> bool:
    if descriptor.type is ElementType.WILDCARD:
        return True
    if descriptor.type is ElementType.CLASS:
        return descriptor.value in node.classes
    if descriptor.type is ElementType.ID:
        return bool(descriptor.value) and node.id == descriptor.value
    if descriptor.type is ElementType.TAG:
        return (node.tag or "").lower() == descriptor.value.lower()
    return False


def attribute_matches(predicate: AttributePredicate, node: NodeLike) -> bool:
    """Evaluate one attribute predicate with CSS operator semantics."""
    if predicate.key not in node.attributes:
        return False
    if predicate.operator == "":
        return True

    actual = str(node.attributes[predicate.key])
    expected = _unquote(predicate.value)
    op = predicate.operator
    if op == "=":
        return actual == expected
    if op == "~=":
        return bool(expected) and expected in actual.split()
    if op == "|=":
        return actual == expected or actual.startswith(expected + "-")
    if op == "^=":
        return bool(expected) and actual.startswith(expected)
    if op == "$=":
        return bool(expected) and actual.endswith(expected)
    if op == "*=":
        return bool(expected) and expected in actual
    logger.debug("Unknown attribute operator %r in [%s%s%s]", op, predicate.key, op, predicate.value)
    return False


def _siblings(node: NodeLike) -> list[NodeLike]:
    if node.parent is None:
        return [node]
    return list(node.parent.children)


def pseudo_matches(pseudo: PseudoDescriptor, node: NodeLike) -> bool:
    """Evaluate a pseudo-class against node state and tree position.

    Pseudo-elements and functional pseudo-classes are not supported and
    never match.
    """
    if pseudo.type is PseudoType.PSEUDO_ELEMENT or "(" in pseudo.value:
        logger.debug("Unsupported pseudo %r never matches", pseudo.value)
        return False

    name = pseudo.value.lower()
    if name == "root":
        return node.parent is None
    if name == "empty":
        return len(node.children) == 0
    if name in ("first-child", "last-child", "only-child"):
        if node.parent is None:
            return False
        siblings = _siblings(node)
        if name == "first-child":
            return siblings[0] is node
        if name == "last-child":
            return siblings[-1] is node
        return len(siblings) == 1
    return name in node.states


def element_matches(element: SelectorElement, node: NodeLike) -> bool:
    """Every descriptor, attribute and pseudo on *element* must hold for *node*."""
    return (
        all(descriptor_matches(d, node) for d in element.elements)
        and all(attribute_matches(a, node) for a in element.attributes)
        and all(pseudo_matches(p, node) for p in element.pseudos)
    )


# ---------------------------------------------------------------------------
# Relational axes
# ---------------------------------------------------------------------------


def _ancestors(node: NodeLike) -> Iterator[NodeLike]:
    parent = node.parent
    while parent is not None:
        yield parent
        parent = parent.parent


def _preceding_siblings(node: NodeLike) -> list[NodeLike]:
    """Siblings before *node*, nearest first."""
    siblings = _siblings(node)
    for index, sibling in enumerate(siblings):
        if sibling is node:
            return list(reversed(siblings[:index]))
    return []


def _candidates(combinator: CombinatorType, node: NodeLike) -> Iterator[NodeLike]:
    if combinator is CombinatorType.CHILD:
        if node.parent is not None:
            yield node.parent
    elif combinator is CombinatorType.DESCENDANT:
        yield from _ancestors(node)
    elif combinator is CombinatorType.ADJACENT_SIBLING:
        preceding = _preceding_siblings(node)
        if preceding:
            yield preceding[0]
    elif combinator is CombinatorType.GENERAL_SIBLING:
        yield from _preceding_siblings(node)


def _match_from(chain: SelectorFragmentChain, index: int, node: NodeLike) -> bool:
    fragment = chain[index]
    if fragment.kind != "element" or not element_matches(fragment, node):
        return False
    if index == len(chain) - 1:
        return True

    following = chain[index + 1]
    if following.kind == "combinator":
        axis, target = following.type, index + 2
    else:
        axis, target = CombinatorType.DESCENDANT, index + 1
    if target >= len(chain):
        return False

    return any(_match_from(chain, target, candidate) for candidate in _candidates(axis, node))


def matches(chain: SelectorFragmentChain, node: NodeLike) -> bool:
    """Return True if *node* satisfies every fragment of *chain*."""
    if len(chain) == 0:
        return False
    return _match_from(chain, 0, node)
