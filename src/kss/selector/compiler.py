"""Selector compiler: raw selector text -> SelectorFragmentChain."""

from __future__ import annotations

import logging

from kss.parser.errors import EmptySelectorError, MalformedSelectorError
from kss.selector.model import (
    COMBINATOR_TOKENS,
    Combinator,
    SelectorElement,
    SelectorFragment,
    SelectorFragmentChain,
)
from kss.selector.tokenizer import (
    parse_attributes,
    parse_elements,
    parse_pseudos,
    split_raw,
)

__all__ = ["build_element", "classify_fragment", "compile_selector"]

logger = logging.getLogger(__name__)


def build_element(raw: str) -> SelectorElement:
    """Parse one whitespace-free selector element."""
    raw_elements, raw_attributes, raw_pseudos = split_raw(raw)
    return SelectorElement(
        raw=raw,
        elements=parse_elements(raw_elements),
        attributes=parse_attributes(raw_attributes),
        pseudos=parse_pseudos(raw_pseudos),
    )


def classify_fragment(raw: str) -> SelectorFragment:
    """Return a Combinator for a known relational token, else a SelectorElement."""
    if raw in COMBINATOR_TOKENS:
        return Combinator(raw)
    return build_element(raw)


def _check_combinators(raw: str, fragments: list[SelectorFragment]) -> None:
    if fragments[0].kind == "combinator":
        raise MalformedSelectorError(
            f"Selector {raw!r} starts with combinator {fragments[0].raw!r}",
            raw=raw,
            position=0,
        )
    if fragments[-1].kind == "combinator":
        raise MalformedSelectorError(
            f"Selector {raw!r} ends with combinator {fragments[-1].raw!r}",
            raw=raw,
            position=raw.rfind(fragments[-1].raw),
        )
    for previous, current in zip(fragments, fragments[1:]):
        if previous.kind == "combinator" and current.kind == "combinator":
            raise MalformedSelectorError(
                f"Selector {raw!r} has consecutive combinators "
                f"{previous.raw!r} and {current.raw!r}",
                raw=raw,
            )


def compile_selector(raw: str) -> SelectorFragmentChain:
    """Compile a full selector such as ``div.action[foo=23] > .pickle:not(p)``.

    The selector is split on whitespace; each fragment is classified and the
    resulting sequence is stored most-specific-first.

    Raises:
        EmptySelectorError: *raw* is empty or whitespace only.
        MalformedSelectorError: a combinator leads, trails, or follows another.
        MalformedAttributeSyntax: an element has unbalanced brackets.
    """
    raw_fragments = raw.split()
    if not raw_fragments:
        raise EmptySelectorError(f"Empty selector: {raw!r}", raw=raw)
    fragments = [classify_fragment(rf) for rf in raw_fragments]
    _check_combinators(raw, fragments)
    logger.debug("Compiled selector %r into %d fragment(s)", raw, len(fragments))
    return SelectorFragmentChain(fragments, raw=raw)
