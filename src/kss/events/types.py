"""Event types emitted while loading stylesheets."""

from dataclasses import dataclass

from kss.parser.errors import ParseError
from kss.stylesheet.model import Stylesheet


@dataclass(frozen=True)
class StylesheetLoaded:
    stylesheet: Stylesheet
    source: str


@dataclass(frozen=True)
class StylesheetFailed:
    source: str
    error: str
    parse_error: ParseError | None = None


@dataclass(frozen=True)
class LoadCompleted:
    loaded: int
    failed: int
