"""Tests for the diagram text back-ends"""

import json

import pytest

from nfaviz.compiler import translate, compile_diagram, compile_nfa, available_formats
from nfaviz.compiler.render_penrose import render_penrose, PENROSE_DOMAIN
from nfaviz.compiler.render_mermaid import render_mermaid
from nfaviz.compiler.render_d2 import render_d2
from nfaviz.ir.errors import UnsupportedFormatError
from nfaviz.regex import compile_regex


@pytest.fixture
def diagram():
    return translate(compile_regex("a|"))


def test_penrose_declares_states_then_transitions_then_layout(diagram):
    lines = render_penrose(diagram).splitlines()

    assert lines[:2] == ["State n0", 'Label n0 "done"']
    assert 'Label n2 "char \'a\' 1"' in lines
    assert "IsStart(n5)" in lines
    assert "IsDone(n0)" in lines

    assert sum(1 for l in lines if l.startswith("State ")) == 6
    assert sum(1 for l in lines if l.startswith("Let ")) == 6
    assert sum(1 for l in lines if l.startswith("Successor(")) == 5

    first_let = next(i for i, l in enumerate(lines) if l.startswith("Let "))
    last_state = max(i for i, l in enumerate(lines) if l.startswith("State "))
    first_successor = next(i for i, l in enumerate(lines) if l.startswith("Successor("))
    assert last_state < first_let < first_successor


def test_penrose_edges_and_neighbor_flags(diagram):
    text = render_penrose(diagram)

    assert "Let e1 := Transition(n2, n1)\nLabel e1 \"a\"\nIsNeighbor(e1)" in text
    # n3 -> n1 skips a node: no neighbour predicate
    assert "Let e2 := Transition(n3, n1)\nLabel e2 \"ε\"\nLet e3" in text
    assert text.count("IsNeighbor(") == 4


def test_penrose_escapes_quotes():
    text = render_penrose(translate(compile_regex('"')))
    assert 'Label e1 "\\""' in text


def test_penrose_domain_declares_used_predicates(diagram):
    text = render_penrose(diagram)
    for name in ("IsStart", "IsDone", "IsNeighbor", "Successor", "Transition"):
        assert name in PENROSE_DOMAIN
        assert name in text


def test_mermaid_output(diagram):
    text = render_mermaid(diagram)
    lines = [l.strip() for l in text.splitlines()]

    assert lines[0] == "flowchart RL"
    assert 'n0((("done")))' in lines
    assert 'n1(("save 1 0"))' in lines
    assert 'n2 -->|"a"| n1' in lines
    assert 'n3 -.->|"ε"| n1' in lines
    assert "n1 ~~~ n0" in lines
    assert "class n5 start" in lines
    assert "class n0 done" in lines


def test_d2_output(diagram):
    text = render_d2(diagram)

    assert text.startswith("direction: left")
    assert 'n2 -> n1: "a"' in text
    assert 'n3 -> n1: "ε" { style.stroke-dash: 3 }' in text
    assert "n1 -> n0: { style.opacity: 0 }" in text
    assert "style.double-border: true" in text
    assert text.count("style.bold: true") == 1


def test_json_output_round_trips(diagram):
    data = json.loads(compile_diagram(diagram, "json"))
    assert data["start"] == "n5"
    assert len(data["nodes"]) == 6
    assert [e["is_neighbor"] for e in data["edges"]] == [True, True, False, False, True, True]


@pytest.mark.parametrize("output_format", available_formats())
def test_every_format_is_deterministic(output_format):
    nfa = compile_regex("(a|b)*c[0-9]?$")
    assert compile_nfa(nfa, output_format) == compile_nfa(nfa, output_format)


def test_default_format_is_penrose(diagram):
    assert compile_diagram(diagram) == render_penrose(diagram)


def test_format_name_is_case_insensitive(diagram):
    assert compile_diagram(diagram, "Mermaid") == render_mermaid(diagram)


def test_unknown_format_is_rejected(diagram):
    with pytest.raises(UnsupportedFormatError) as exc_info:
        compile_diagram(diagram, "graphviz")
    assert "penrose" in str(exc_info.value)
