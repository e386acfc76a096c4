"""Tests for assembling stylesheets from KSS documents."""

import json
from pathlib import Path

import pytest

from kss.model.node import SceneNode
from kss.parser.errors import (
    DocumentError,
    EmptySelectorError,
    MalformedAttributeSyntax,
    ParseError,
)
from kss.selector import CombinatorType, compile_selector
from kss.stylesheet import (
    Declaration,
    DeclarationList,
    Rule,
    Stylesheet,
    parse_kss,
    parse_stylesheet,
)

FIXTURES = Path(__file__).parent.parent / "fixtures"


def _document(*rules: tuple[list, list]) -> dict:
    return {"rules": [{"selectors": s, "declarations": d} for s, d in rules]}


# ---------------------------------------------------------------------------
# Rule assembly
# ---------------------------------------------------------------------------


class TestRuleAssembly:
    def test_single_rule(self):
        ss = parse_stylesheet(_document((["div > .pickle"], ["color: red"])))
        assert len(ss.rules) == 1
        rule = ss.rules[0]
        assert rule.selectors == (compile_selector("div > .pickle"),)
        assert rule.declarations == DeclarationList((Declaration(raw="color: red"),))

    def test_selector_is_compiled(self):
        ss = parse_stylesheet(_document((["div > .pickle"], [])))
        chain = ss.rules[0].selectors[0]
        assert chain[1].type is CombinatorType.CHILD
        assert chain[0].raw == ".pickle"

    def test_declarations_are_kept_verbatim(self):
        raw = ["color:red", "  font-size : 12em !important ", "weird stuff"]
        ss = parse_stylesheet(_document((["*"], raw)))
        assert [d.raw for d in ss.rules[0].declarations] == raw
        assert all(d.property is None for d in ss.rules[0].declarations)

    def test_structured_declaration(self):
        ss = parse_stylesheet(
            _document((["*"], [{"property": "color", "value": "red", "important": True}]))
        )
        declaration = ss.rules[0].declarations[0]
        assert declaration.raw == "color: red !important;"
        assert declaration.property == "color"
        assert declaration.value == "red"
        assert declaration.important is True

    def test_multiple_selectors_keep_order(self):
        ss = parse_stylesheet(_document(([".b", ".a", "#c"], ["x: 1"])))
        assert [s.raw for s in ss.rules[0].selectors] == [".b", ".a", "#c"]


class TestRuleOrder:
    def test_rule_order_is_preserved(self):
        selectors = ["#z", ".y", "x", "*", "a > b"]
        ss = parse_stylesheet(_document(*[([s], []) for s in selectors]))
        assert [r.selectors[0].raw for r in ss.rules] == selectors
        assert [r.index for r in ss.rules] == list(range(len(selectors)))

    def test_empty_document(self):
        assert parse_stylesheet({"rules": []}).rules == ()


# ---------------------------------------------------------------------------
# Input forms
# ---------------------------------------------------------------------------


class TestInputForms:
    def test_json_text(self):
        doc = _document((["a"], ["b: c"]))
        assert parse_stylesheet(json.dumps(doc)) == parse_stylesheet(doc)

    def test_json_fixture(self):
        ss = parse_stylesheet((FIXTURES / "basic.json").read_text())
        assert len(ss) == 3
        assert ss.rules[2].declarations[0].important is True
        assert ss.rules[2].declarations[1].raw == "scale: 2"

    def test_kss_text_matches_json_fixture_selectors(self):
        from_text = parse_kss((FIXTURES / "basic.kss").read_text())
        from_json = parse_stylesheet((FIXTURES / "basic.json").read_text())
        assert [r.selectors for r in from_text] == [r.selectors for r in from_json]


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestStylesheetErrors:
    def test_malformed_attribute_aborts_with_rule_index(self):
        doc = _document((["a"], []), (["div[foo=1"], []), (["b"], []))
        with pytest.raises(MalformedAttributeSyntax) as info:
            parse_stylesheet(doc)
        assert info.value.rule_index == 1
        assert info.value.raw == "div[foo=1"

    def test_empty_selector(self):
        with pytest.raises(EmptySelectorError) as info:
            parse_stylesheet(_document((["   "], [])))
        assert info.value.rule_index == 0

    def test_missing_rules(self):
        with pytest.raises(DocumentError):
            parse_stylesheet({"sheets": []})

    def test_rule_missing_declarations(self):
        with pytest.raises(DocumentError) as info:
            parse_stylesheet({"rules": [{"selectors": ["a"]}]})
        assert info.value.rule_index == 0

    def test_non_string_selector(self):
        with pytest.raises(DocumentError):
            parse_stylesheet(_document(([42], [])))

    def test_invalid_declaration(self):
        with pytest.raises(DocumentError):
            parse_stylesheet(_document((["a"], [{"value": "red"}])))

    def test_invalid_json(self):
        with pytest.raises(DocumentError) as info:
            parse_stylesheet('{"rules": [')
        assert info.value.line == 1

    def test_all_errors_are_parse_errors(self):
        with pytest.raises(ParseError):
            parse_stylesheet([])  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Model behaviour
# ---------------------------------------------------------------------------


class TestStylesheetModel:
    def test_stylesheet_is_frozen(self):
        ss = parse_stylesheet(_document((["a"], [])))
        with pytest.raises(AttributeError):
            ss.rules = ()  # type: ignore[misc]

    def test_declaration_is_frozen(self):
        with pytest.raises(AttributeError):
            Declaration(raw="a: b").raw = "c"  # type: ignore[misc]

    def test_rule_raw(self):
        ss = parse_stylesheet(_document((["div > a", ".b"], ["color: red;"])))
        assert ss.rules[0].raw == "div > a,\n.b {\n\tcolor: red;\n}"

    def test_stylesheet_raw_joins_rules(self):
        ss = parse_stylesheet(_document((["a"], []), (["b"], [])))
        assert ss.raw == "a {\n\n}\n\nb {\n\n}"

    def test_rules_matching(self):
        root = SceneNode(tag="scene", children=[SceneNode(tag="mesh", id="m", classes={"x"})])
        mesh = root.find("m")
        ss = parse_stylesheet(
            _document(
                (["group"], ["a: 1"]),
                (["scene > .x", "#nope"], ["b: 2"]),
                (["*"], ["c: 3"]),
            )
        )
        assert [r.index for r in ss.rules_matching(mesh)] == [1, 2]
        assert ss.rules[1].matching_selector(mesh).raw == "scene > .x"
        assert ss.rules[0].matching_selector(mesh) is None

    def test_rule_is_plain_data(self):
        rule = Rule(selectors=(), declarations=DeclarationList())
        assert rule.index == 0
        assert len(rule.declarations) == 0
        assert Stylesheet().rules == ()
