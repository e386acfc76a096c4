from kss.selector.compiler import build_element, classify_fragment, compile_selector
from kss.selector.matcher import matches
from kss.selector.model import (
    AttributePredicate,
    Combinator,
    CombinatorType,
    ElementDescriptor,
    ElementType,
    PseudoDescriptor,
    PseudoType,
    SelectorElement,
    SelectorFragment,
    SelectorFragmentChain,
)

__all__ = [
    "build_element",
    "classify_fragment",
    "compile_selector",
    "matches",
    "AttributePredicate",
    "Combinator",
    "CombinatorType",
    "ElementDescriptor",
    "ElementType",
    "PseudoDescriptor",
    "PseudoType",
    "SelectorElement",
    "SelectorFragment",
    "SelectorFragmentChain",
]
