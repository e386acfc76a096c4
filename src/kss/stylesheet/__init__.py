from kss.stylesheet.parser import parse_kss, parse_stylesheet
from kss.stylesheet.model import Declaration, DeclarationList, Rule, Stylesheet

__all__ = [
    "parse_kss",
    "parse_stylesheet",
    "Declaration",
    "DeclarationList",
    "Rule",
    "Stylesheet",
]
