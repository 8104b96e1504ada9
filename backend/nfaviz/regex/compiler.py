"""
Regex AST -> NFA node array.

Nodes are pushed onto a growing array and always point "backwards" at a
continuation that already exists: index 0 is the single Done node, each
sub-expression is compiled against the index it must continue to, and the
last node pushed becomes the start. Star loops are the only forward
references; they are closed by patching a placeholder node.
"""

from typing import List

from nfaviz import config
from nfaviz.ir.errors import RegexParseError
from nfaviz.ir.nfa import (
    NFA,
    NFANode,
    Done,
    Fail,
    Save,
    Char,
    Epsilon,
    Split,
    Anchor,
    Sparse,
)
from nfaviz.regex.ast import (
    RegexNode,
    Empty,
    Literal,
    ClassNode,
    AnchorNode,
    Group,
    Concat,
    Alternate,
    Repeat,
)
from nfaviz.regex.parser import parse_regex


class NFACompiler:
    def __init__(self):
        self.nodes: List[NFANode] = [Done()]

    def compile(self, ast: RegexNode) -> NFA:
        start = self._push_regex(ast, 0)
        return NFA(nodes=tuple(self.nodes), start=start)

    def _push(self, node: NFANode) -> int:
        # nested counted repeats multiply; cap the expansion, not just each count
        if len(self.nodes) >= config.MAX_NFA_NODES:
            raise RegexParseError(
                f"Pattern expands to more than {config.MAX_NFA_NODES} NFA nodes"
            )
        self.nodes.append(node)
        return len(self.nodes) - 1

    def _push_regex(self, ast: RegexNode, next_index: int) -> int:
        """Compile ``ast`` so that it continues to ``next_index``; return its entry."""
        if isinstance(ast, Empty):
            return self._push(Epsilon(next_index))

        if isinstance(ast, Literal):
            return self._push(Char(ast.char, next_index))

        if isinstance(ast, ClassNode):
            return self._push(Sparse(ast.char_class, next_index))

        if isinstance(ast, AnchorNode):
            return self._push(Anchor(ast.anchor, next_index))

        if isinstance(ast, Group):
            if ast.capture is None:
                return self._push_regex(ast.expr, next_index)
            close = self._push(Save(2 * ast.capture + 1, next_index))
            body = self._push_regex(ast.expr, close)
            return self._push(Save(2 * ast.capture, body))

        if isinstance(ast, Concat):
            entry = next_index
            for part in reversed(ast.parts):
                entry = self._push_regex(part, entry)
            return entry

        if isinstance(ast, Alternate):
            return self._push_alternation(list(ast.options), next_index)

        if isinstance(ast, Repeat):
            return self._push_repeat(ast, next_index)

        raise TypeError(f"Unknown regex node: {type(ast).__name__}")

    def _push_alternation(self, options: List[RegexNode], next_index: int) -> int:
        # a|b|c compiles as a|(b|c)
        left = self._push_regex(options[0], next_index)
        if len(options) == 2:
            right = self._push_regex(options[1], next_index)
        else:
            right = self._push_alternation(options[1:], next_index)
        return self._push(Split(left, right))

    def _push_repeat(self, ast: Repeat, next_index: int) -> int:
        entry = next_index

        # Optional tail first: it continues straight to next_index.
        if ast.max_count is None:
            entry = self._push_star(ast.expr, entry)
        else:
            for _ in range(ast.max_count - ast.min_count):
                entry = self._push_optional(ast.expr, entry)

        for _ in range(ast.min_count):
            entry = self._push_regex(ast.expr, entry)
        return entry

    def _push_star(self, expr: RegexNode, next_index: int) -> int:
        loop = self._push(Fail())  # placeholder, patched below
        body = self._push_regex(expr, loop)
        self.nodes[loop] = Split(body, next_index)
        return loop

    def _push_optional(self, expr: RegexNode, next_index: int) -> int:
        body = self._push_regex(expr, next_index)
        return self._push(Split(body, next_index))


def compile_ast(ast: RegexNode) -> NFA:
    return NFACompiler().compile(ast)


def compile_regex(pattern: str) -> NFA:
    return compile_ast(parse_regex(pattern))
