"""Tokenizer for a single selector element such as ``div.action[foo=23]:hover``.

The raw element is first split into three substrings (element descriptors,
attribute predicates, pseudos), then each substring is broken into its
structured descriptors.
"""

from __future__ import annotations

import re

from kss.parser.errors import MalformedAttributeSyntax
from kss.selector.model import (
    AttributePredicate,
    ElementDescriptor,
    ElementType,
    PseudoDescriptor,
    PseudoType,
)

__all__ = ["split_raw", "parse_elements", "parse_attributes", "parse_pseudos"]

# Optional . or # prefix followed by a word, or a lone wildcard.
_ELEMENT_RE = re.compile(r"(\.|#)?(\*|[\w-]+)")

# One bracketed attribute run.
_ATTRIBUTE_RE = re.compile(r"\[[^\]]*\]")

# Key runs up to the first operator character.
_KEY_RE = re.compile(r"[^~=+|*$^]*")
_OPERATOR_RE = re.compile(r"[~=+|*$^]*")

# One or two colons and a body; parenthesized arguments may contain colons and
# an unclosed argument list runs to the end of the text.
_PSEUDO_RE = re.compile(r":{1,2}(?:\([^)]*\)?|[^:(])+")


def split_raw(raw: str) -> tuple[str, str, str]:
    """Split a raw selector element into ``(elements, attributes, pseudos)``.

    Attributes (first ``[`` through last ``]``) are carved out before the
    first ``:`` is located, so colons inside brackets stay with the
    attributes.
    """
    first_bracket = raw.find("[")
    if raw.count("[") != raw.count("]"):
        position = first_bracket if first_bracket != -1 else raw.find("]")
        raise MalformedAttributeSyntax(
            f"Unbalanced attribute brackets in selector {raw!r}",
            raw=raw,
            position=position,
        )

    rest = raw
    attributes = ""
    if first_bracket != -1:
        last_bracket = raw.rfind("]")
        if last_bracket < first_bracket:
            raise MalformedAttributeSyntax(
                f"Unterminated attribute bracket in selector {raw!r}",
                raw=raw,
                position=first_bracket,
            )
        attributes = raw[first_bracket : last_bracket + 1]
        rest = raw[:first_bracket] + raw[last_bracket + 1 :]

    pseudos = ""
    first_colon = rest.find(":")
    if first_colon != -1:
        pseudos = rest[first_colon:]
        rest = rest[:first_colon]

    return rest, attributes, pseudos


def parse_elements(raw_elements: str) -> tuple[ElementDescriptor, ...]:
    """Parse ``div.action#main`` into tag, class and id descriptors."""
    if not raw_elements:
        return ()
    descriptors: list[ElementDescriptor] = []
    for match in _ELEMENT_RE.finditer(raw_elements):
        token = match.group(0)
        if not token.strip():
            continue
        if token.startswith("."):
            descriptors.append(ElementDescriptor(ElementType.CLASS, token[1:]))
        elif token.startswith("#"):
            descriptors.append(ElementDescriptor(ElementType.ID, token[1:]))
        elif token == "*":
            descriptors.append(ElementDescriptor(ElementType.WILDCARD, ""))
        else:
            descriptors.append(ElementDescriptor(ElementType.TAG, token))
    return tuple(descriptors)


def parse_attributes(raw_attributes: str) -> tuple[AttributePredicate, ...]:
    """Parse ``[foo=23][bar~=grik]`` into attribute predicates.

    The operator is whatever run of operator characters follows the key; it
    is not checked against the known operators here. An empty ``[]`` raises
    :class:`MalformedAttributeSyntax`.
    """
    if not raw_attributes:
        return ()
    predicates: list[AttributePredicate] = []
    for match in _ATTRIBUTE_RE.finditer(raw_attributes):
        body = match.group(0)[1:-1]
        if not body.strip():
            raise MalformedAttributeSyntax(
                f"Empty attribute predicate in {raw_attributes!r}",
                raw=raw_attributes,
                position=match.start(),
            )
        key = _KEY_RE.match(body).group(0)  # type: ignore[union-attr]
        operator = _OPERATOR_RE.match(body, len(key)).group(0)  # type: ignore[union-attr]
        value = body[len(key) + len(operator) :]
        predicates.append(AttributePredicate(key=key, operator=operator, value=value))
    return tuple(predicates)


def parse_pseudos(raw_pseudos: str) -> tuple[PseudoDescriptor, ...]:
    """Parse ``:hover::after`` into pseudo-class and pseudo-element descriptors."""
    if not raw_pseudos:
        return ()
    descriptors: list[PseudoDescriptor] = []
    for token in _PSEUDO_RE.findall(raw_pseudos):
        if token.startswith("::"):
            descriptors.append(PseudoDescriptor(PseudoType.PSEUDO_ELEMENT, token[2:]))
        else:
            descriptors.append(PseudoDescriptor(PseudoType.PSEUDO_CLASS, token[1:]))
    return tuple(descriptors)
