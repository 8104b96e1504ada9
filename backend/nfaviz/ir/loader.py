"""
Reads and writes NFA documents.

Document shape (JSON or YAML):

    start: 5
    nodes:
      - {kind: done}
      - {kind: save, slot: 1, next: 0}
      - {kind: char, char: a, next: 1}
      - {kind: sparse, char_class: "[a-z]", next: 1}
      - {kind: anchor, anchor: start, next: 0}
"""

import os
from typing import Any, Dict

import yaml
from pydantic import ValidationError as PydanticValidationError

from nfaviz.ir.errors import NFADocumentError, RegexParseError
from nfaviz.ir.nfa import (
    NFA,
    NFANode,
    AnchorKind,
    Done,
    Fail,
    Save,
    Char,
    Epsilon,
    Split,
    Anchor,
    Sparse,
)
from nfaviz.regex.parser import parse_class
from nfaviz.schemas import NFASpec


def nfa_from_spec(spec: NFASpec) -> NFA:
    nodes = []
    for i, node in enumerate(spec.nodes):
        if node.kind == "done":
            nodes.append(Done())
        elif node.kind == "fail":
            nodes.append(Fail())
        elif node.kind == "save":
            nodes.append(Save(node.slot, node.next))
        elif node.kind == "char":
            nodes.append(Char(node.char, node.next))
        elif node.kind == "epsilon":
            nodes.append(Epsilon(node.next))
        elif node.kind == "split":
            nodes.append(Split(node.next1, node.next2))
        elif node.kind == "anchor":
            nodes.append(Anchor(AnchorKind(node.anchor), node.next))
        elif node.kind == "sparse":
            try:
                char_class = parse_class(node.char_class)
            except RegexParseError as e:
                raise NFADocumentError(str(e), location=f"nodes[{i}].char_class")
            nodes.append(Sparse(char_class, node.next))
    return NFA(nodes=tuple(nodes), start=spec.start)


def nfa_from_dict(data: Dict[str, Any]) -> NFA:
    if not isinstance(data, dict):
        raise NFADocumentError("NFA document must be a mapping")
    try:
        spec = NFASpec.model_validate(data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise NFADocumentError(first["msg"], location=location)
    return nfa_from_spec(spec)


def node_to_dict(node: NFANode) -> Dict[str, Any]:
    if isinstance(node, Save):
        return {"kind": "save", "slot": node.slot, "next": node.next}
    if isinstance(node, Char):
        return {"kind": "char", "char": node.char, "next": node.next}
    if isinstance(node, Epsilon):
        return {"kind": "epsilon", "next": node.next}
    if isinstance(node, Split):
        return {"kind": "split", "next1": node.next1, "next2": node.next2}
    if isinstance(node, Anchor):
        return {"kind": "anchor", "anchor": node.anchor.value, "next": node.next}
    if isinstance(node, Sparse):
        return {"kind": "sparse", "char_class": node.char_class.describe(), "next": node.next}
    return {"kind": node.kind}


def nfa_to_dict(nfa: NFA) -> Dict[str, Any]:
    return {
        "start": nfa.start,
        "nodes": [node_to_dict(node) for node in nfa.nodes],
    }


def load_nfa(path: str) -> NFA:
    """Load an NFA document; JSON files parse fine as YAML."""
    if not os.path.exists(path):
        raise NFADocumentError("file not found", location=path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise NFADocumentError(f"could not parse document: {e}", location=path)

    nfa = nfa_from_dict(data)
    print(f"[NFALoader] Loaded {nfa} from {path}")
    return nfa


def dump_nfa(nfa: NFA) -> str:
    return yaml.safe_dump(nfa_to_dict(nfa), sort_keys=False, allow_unicode=True)
