"""Lark Transformer that converts KSS source text into a KSS document."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from kss.parser.errors import KssSyntaxError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_OPENERS = {"[": "]", "(": ")"}


def _split_selectors(text: str) -> list[str]:
    """Split a selector list on commas outside ``[...]`` and ``(...)``."""
    parts: list[str] = []
    closers: list[str] = []
    start = 0
    for i, ch in enumerate(text):
        if ch in _OPENERS:
            closers.append(_OPENERS[ch])
        elif closers and ch == closers[-1]:
            closers.pop()
        elif ch == "," and not closers:
            parts.append(text[start:i])
            start = i + 1
    parts.append(text[start:])
    return parts


class KssTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into the ``{"rules": [...]}`` document shape."""

    def selector_list(self, items: list[Token]) -> list[str]:
        # Empty entries are kept so they fail selector compilation.
        return [s.strip() for s in _split_selectors(str(items[0]))]

    def declaration(self, items: list[Token]) -> str:
        return str(items[0]).strip()

    def declaration_block(self, items: list[str]) -> list[str]:
        return [d for d in items if d]

    def rule(self, items: list[Any]) -> dict[str, list[str]]:
        return {"selectors": items[0], "declarations": items[1]}

    def start(self, items: list[dict[str, list[str]]]) -> dict[str, Any]:
        return {"rules": list(items)}


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def parse_kss_document(source: str) -> dict[str, Any]:
    """Parse KSS source text into a KSS document dict."""
    try:
        tree = _parser().parse(source)
    except UnexpectedInput as e:
        raise KssSyntaxError(
            f"Invalid KSS at line {e.line}, column {e.column}: {e}",
            raw=source,
            position=getattr(e, "pos_in_stream", None),
            line=e.line,
            column=e.column,
        ) from e
    return KssTransformer().transform(tree)
