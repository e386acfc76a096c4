"""Parser error types."""


class ParseError(Exception):
    """Raised when selector, declaration or KSS source text cannot be parsed."""

    def __init__(
        self,
        message: str,
        raw: str = "",
        position: int | None = None,
        line: int | None = None,
        column: int | None = None,
    ):
        self.raw = raw
        self.position = position
        self.line = line
        self.column = column
        self.rule_index: int | None = None
        super().__init__(message)


class MalformedAttributeSyntax(ParseError):
    """A selector element opens an attribute bracket that is never closed."""


class EmptySelectorError(ParseError):
    """A selector string holds no fragments once whitespace is removed."""


class UnresolvedCombinator(ParseError):
    """A combinator token is not one of ``>>``, ``>``, ``+`` or ``~``."""


class MalformedSelectorError(ParseError):
    """Combinators are misplaced: leading, trailing, or two in a row."""


class DocumentError(ParseError):
    """A KSS document does not have the ``{rules: [...]}`` shape."""


class KssSyntaxError(ParseError):
    """KSS source text could not be tokenized into rules."""
