"""Tests for the regex front-end (pattern -> AST -> NFA)"""

import pytest

from nfaviz import config
from nfaviz.ir.errors import RegexParseError
from nfaviz.ir.nfa import (
    AnchorKind,
    CharClass,
    CharRange,
    PerlClass,
    Done,
    Fail,
    Save,
    Char,
    Epsilon,
    Split,
    Anchor,
    Sparse,
)
from nfaviz.regex import parse_regex, parse_class, compile_regex
from nfaviz.regex.parser import MAX_NESTING_DEPTH
from nfaviz.regex.ast import Group, Alternate, Literal, Empty, Repeat
from nfaviz.compiler.builder import translate


def test_alternation_with_empty_branch_matches_worked_example():
    nfa = compile_regex("a|")

    assert nfa.nodes == (
        Done(),
        Save(1, 0),
        Char("a", 1),
        Epsilon(1),
        Split(2, 3),
        Save(0, 4),
    )
    assert nfa.start == 5

    diagram = translate(nfa)
    assert len(diagram.nodes) == 6
    assert len(diagram.edges) == 6
    assert [e.is_neighbor for e in diagram.edges] == [True, True, False, False, True, True]


def test_parse_wraps_pattern_in_group_zero():
    ast = parse_regex("a|")
    assert ast == Group(Alternate((Literal("a"), Empty())), capture=0)


def test_concatenation_compiles_right_to_left():
    nfa = compile_regex("ab")
    assert nfa.nodes == (
        Done(),
        Save(1, 0),
        Char("b", 1),
        Char("a", 2),
        Save(0, 3),
    )
    assert nfa.start == 4


def test_star_loops_through_split():
    nfa = compile_regex("a*")
    assert nfa.nodes == (
        Done(),
        Save(1, 0),
        Split(3, 1),
        Char("a", 2),
        Save(0, 2),
    )
    assert nfa.start == 4
    assert not any(isinstance(node, Fail) for node in nfa.nodes)


def test_plus_and_optional():
    plus = compile_regex("a+")
    # a then a*
    assert plus.nodes[-2] == Char("a", 2)
    assert plus.nodes[2] == Split(3, 1)

    optional = compile_regex("a?")
    assert optional.nodes == (
        Done(),
        Save(1, 0),
        Char("a", 1),
        Split(2, 1),
        Save(0, 3),
    )


def test_bounded_repeat_expands():
    nfa = compile_regex("a{2,3}")
    chars = [n for n in nfa.nodes if isinstance(n, Char)]
    splits = [n for n in nfa.nodes if isinstance(n, Split)]
    assert len(chars) == 3
    assert len(splits) == 1


def test_capture_groups_use_slot_pairs():
    nfa = compile_regex("(a)(?:b)")
    saves = sorted(n.slot for n in nfa.nodes if isinstance(n, Save))
    assert saves == [0, 1, 2, 3]


def test_three_way_alternation_nests_right():
    ast = parse_regex("a|b|c")
    assert isinstance(ast.expr, Alternate)
    assert len(ast.expr.options) == 3

    nfa = compile_regex("a|b|c")
    assert sum(isinstance(n, Split) for n in nfa.nodes) == 2


def test_anchors_and_classes():
    nfa = compile_regex(r"^[a-z\d]\b.$")
    anchors = [n.anchor for n in nfa.nodes if isinstance(n, Anchor)]
    assert anchors == [AnchorKind.END, AnchorKind.WORD_BOUNDARY, AnchorKind.START]

    classes = [n.char_class.describe() for n in nfa.nodes if isinstance(n, Sparse)]
    assert classes == [".", "[a-z\\d]"]


def test_parse_class_descriptions():
    assert parse_class("[a-z_]") == CharClass(items=(CharRange("a", "z"), CharRange("_", "_")))
    assert parse_class(r"\D") == CharClass(items=(PerlClass("d", negated=True),))
    assert parse_class(r"\D").describe() == "\\D"
    assert parse_class("[^0-9]").describe() == "[^0-9]"
    assert parse_class("[+-]").describe() == "[+\\-]"
    assert parse_class(".") == CharClass.any()


def test_escapes_become_literals():
    nfa = compile_regex(r"\*\n")
    chars = [n.char for n in nfa.nodes if isinstance(n, Char)]
    assert chars == ["\n", "*"]


def test_repeat_ast():
    assert parse_regex("a{3,}").expr == Repeat(Literal("a"), 3, None)


@pytest.mark.parametrize(
    "pattern",
    ["(a", "a)", "*a", "a**", "[abc", "a{3,1}", "\\", "(?=a)", "[z-a]", "a{x}", "a{1001}"],
)
def test_invalid_patterns_raise(pattern):
    with pytest.raises(RegexParseError):
        compile_regex(pattern)


def test_parse_class_rejects_non_class():
    with pytest.raises(RegexParseError):
        parse_class("ab")


def test_pattern_length_is_bounded():
    compile_regex("a" * config.MAX_PATTERN_LENGTH)
    with pytest.raises(RegexParseError) as exc_info:
        compile_regex("a" * (config.MAX_PATTERN_LENGTH + 1))
    assert "longer than" in str(exc_info.value)


def test_group_nesting_is_bounded():
    depth = MAX_NESTING_DEPTH
    nfa = compile_regex("(" * depth + "a" + ")" * depth)
    assert isinstance(nfa.nodes[nfa.start], Save)

    with pytest.raises(RegexParseError) as exc_info:
        compile_regex("(" * 200 + "a" + ")" * 200)
    assert "nested too deeply" in str(exc_info.value)


def test_nested_repeats_are_bounded():
    assert len(compile_regex("a{1000}").nodes) == 1003

    with pytest.raises(RegexParseError) as exc_info:
        compile_regex("(?:a{1000}){300}")
    assert str(config.MAX_NFA_NODES) in str(exc_info.value)


def test_node_limit_follows_config(monkeypatch):
    monkeypatch.setattr(config, "MAX_NFA_NODES", 5)
    assert len(compile_regex("ab").nodes) == 5
    with pytest.raises(RegexParseError):
        compile_regex("abc")
