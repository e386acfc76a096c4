from kss.parser.errors import (
    DocumentError,
    EmptySelectorError,
    KssSyntaxError,
    MalformedAttributeSyntax,
    MalformedSelectorError,
    ParseError,
    UnresolvedCombinator,
)
from kss.parser.transformer import parse_kss_document

__all__ = [
    "DocumentError",
    "EmptySelectorError",
    "KssSyntaxError",
    "MalformedAttributeSyntax",
    "MalformedSelectorError",
    "ParseError",
    "UnresolvedCombinator",
    "parse_kss_document",
]
