"""KSS: selector and declaration parsing and matching for spatial scene graphs."""

from kss.model.node import SceneNode
from kss.parser.errors import ParseError
from kss.selector import compile_selector, matches
from kss.stylesheet import Stylesheet, parse_kss, parse_stylesheet

__version__ = "0.1.0"

__all__ = [
    "ParseError",
    "SceneNode",
    "Stylesheet",
    "compile_selector",
    "matches",
    "parse_kss",
    "parse_stylesheet",
    "__version__",
]
