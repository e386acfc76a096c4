"""Build Stylesheet objects from KSS documents.

A KSS document is the JSON shape::

    {"rules": [{"selectors": ["div > .pickle"], "declarations": ["color: red"]}]}

Declarations may also arrive pre-split as ``{"property", "value",
"important"}`` objects.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Sequence

from kss.parser import parse_kss_document
from kss.parser.errors import DocumentError, ParseError
from kss.selector.compiler import compile_selector
from kss.selector.model import SelectorFragmentChain
from kss.stylesheet.model import Declaration, DeclarationList, Rule, Stylesheet

__all__ = [
    "parse_declaration",
    "parse_declarations",
    "parse_kss",
    "parse_rule",
    "parse_selectors",
    "parse_stylesheet",
]

logger = logging.getLogger(__name__)


def parse_selectors(raw_selectors: Sequence[str]) -> tuple[SelectorFragmentChain, ...]:
    """Compile each raw selector string, preserving order."""
    chains: list[SelectorFragmentChain] = []
    for raw in raw_selectors:
        if not isinstance(raw, str):
            raise DocumentError(f"Selector must be a string, got {raw!r}", raw=repr(raw))
        chains.append(compile_selector(raw))
    return tuple(chains)


def parse_declaration(raw: str | Mapping[str, Any]) -> Declaration:
    """Wrap one raw declaration.

    Strings are kept verbatim. Structured ``{property, value, important}``
    objects keep their parts and get a rendered ``raw``.
    """
    if isinstance(raw, str):
        return Declaration(raw=raw)
    if isinstance(raw, Mapping) and "property" in raw:
        prop = str(raw["property"])
        value = str(raw.get("value", ""))
        important = raw.get("important") is True
        suffix = " !important" if important else ""
        return Declaration(
            raw=f"{prop}: {value}{suffix};",
            property=prop,
            value=value,
            important=important,
        )
    raise DocumentError(f"Invalid declaration: {raw!r}", raw=repr(raw))


def parse_declarations(raw_declarations: Sequence[str | Mapping[str, Any]]) -> DeclarationList:
    return DeclarationList(tuple(parse_declaration(d) for d in raw_declarations))


def _require_list(container: Mapping[str, Any], key: str, where: str) -> list[Any]:
    value = container.get(key)
    if not isinstance(value, list):
        raise DocumentError(
            f"{where} must have a '{key}' list, got {type(value).__name__}",
            raw=repr(container),
        )
    return value


def parse_rule(raw_rule: Mapping[str, Any], index: int = 0) -> Rule:
    """Assemble one Rule from its raw selectors and declarations."""
    if not isinstance(raw_rule, Mapping):
        raise DocumentError(f"Rule {index} must be an object", raw=repr(raw_rule))
    selectors = parse_selectors(_require_list(raw_rule, "selectors", f"Rule {index}"))
    declarations = parse_declarations(_require_list(raw_rule, "declarations", f"Rule {index}"))
    return Rule(selectors=selectors, declarations=declarations, index=index)


def parse_stylesheet(document: Mapping[str, Any] | str) -> Stylesheet:
    """Parse a KSS document (mapping or JSON text) into a Stylesheet.

    Rules keep their document order. The first rule that fails aborts the
    whole parse; the raised :class:`ParseError` carries ``rule_index``.
    """
    if isinstance(document, str):
        try:
            document = json.loads(document)
        except json.JSONDecodeError as exc:
            raise DocumentError(
                f"Invalid KSS JSON: {exc.msg}",
                raw=exc.doc,
                position=exc.pos,
                line=exc.lineno,
                column=exc.colno,
            ) from exc
    if not isinstance(document, Mapping):
        raise DocumentError("KSS document must be an object", raw=repr(document))

    rules: list[Rule] = []
    for index, raw_rule in enumerate(_require_list(document, "rules", "KSS document")):
        try:
            rules.append(parse_rule(raw_rule, index))
        except ParseError as exc:
            exc.rule_index = index
            raise
    logger.debug("Parsed stylesheet with %d rule(s)", len(rules))
    return Stylesheet(rules=tuple(rules))


def parse_kss(source: str) -> Stylesheet:
    """Parse KSS source text (``selector { declaration; }``) into a Stylesheet."""
    return parse_stylesheet(parse_kss_document(source))
