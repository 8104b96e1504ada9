"""Tests for the NFA validator and the diagram consistency checks"""

import pytest

from nfaviz.ir.nfa import NFA, Done, Fail, Save, Char, Epsilon, Split
from nfaviz.ir.errors import MalformedNFAError
from nfaviz.compiler.builder import translate
from nfaviz.regex import compile_regex
from nfaviz.validation import (
    ValidationSeverity,
    validate_nfa,
    raise_on_errors,
    check_diagram,
)


def test_compiled_pattern_is_valid():
    result = validate_nfa(compile_regex("a|"))

    assert result.is_valid
    assert result.issues == []
    assert result.stats["nodes"] == 6
    assert result.stats["transitions"] == 6
    assert "✅ Valid" in result.get_summary()


def test_dangling_reference_is_an_error():
    nfa = NFA(nodes=(Done(), Char("a", 2)), start=1)
    result = validate_nfa(nfa)

    assert not result.is_valid
    assert result.codes() == ["TARGET_OUT_OF_RANGE"]
    assert result.issues[0].node_index == 1
    assert result.issues[0].severity == ValidationSeverity.ERROR


def test_bad_start_is_an_error():
    result = validate_nfa(NFA(nodes=(Done(),), start=-1))
    assert "START_OUT_OF_RANGE" in result.codes()
    assert not result.is_valid


def test_empty_nfa():
    result = validate_nfa(NFA(nodes=(), start=0))
    assert result.codes() == ["EMPTY_NFA"]


def test_unreachable_nodes_and_missing_done_are_warnings():
    nfa = NFA(nodes=(Fail(), Epsilon(0), Char("x", 0)), start=1)
    result = validate_nfa(nfa)

    assert result.is_valid
    assert sorted(result.codes()) == ["FAIL_NODE", "NO_DONE_NODE", "UNREACHABLE_NODE"]
    unreachable = [i for i in result.issues if i.code == "UNREACHABLE_NODE"]
    assert unreachable[0].node_index == 2
    assert result.warning_count == 2
    assert result.info_count == 1


def test_raise_on_errors():
    raise_on_errors(compile_regex("ab*"))

    with pytest.raises(MalformedNFAError) as exc_info:
        raise_on_errors(NFA(nodes=(Done(), Split(0, 7)), start=1))
    assert exc_info.value.field == "next2"
    assert exc_info.value.target == 7


@pytest.mark.parametrize("pattern", ["a|", "(a|b)*c", "^x+[^0-9]{1,2}$", ""])
def test_built_diagrams_satisfy_invariants(pattern):
    nfa = compile_regex(pattern)
    report = check_diagram(nfa, translate(nfa))

    assert report.is_valid, report.to_dict()
    assert report.issues == []
    assert report.stats["nodes"] == len(nfa.nodes)


def test_tampered_diagram_is_caught():
    nfa = NFA(nodes=(Done(), Save(1, 0), Save(0, 1)), start=2)
    diagram = translate(nfa)
    diagram.edges[0].is_neighbor = False
    diagram.nodes[0].is_start = True
    diagram.successors.pop()

    report = check_diagram(nfa, diagram)
    assert not report.is_valid
    assert set(report.codes()) == {"NEIGHBOR_FLAG", "START_MARKER", "SUCCESSOR_ORDER"}
