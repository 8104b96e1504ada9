"""
NFA model consumed by the diagram builder.

An NFA is an ordered, immutable array of nodes plus a start index. Nodes
reference each other by position in that array, never by object identity.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union


class AnchorKind(Enum):
    START = "start"
    END = "end"
    WORD_BOUNDARY = "word_boundary"
    NON_WORD_BOUNDARY = "non_word_boundary"

    @property
    def symbol(self) -> str:
        return _ANCHOR_SYMBOLS[self]


_ANCHOR_SYMBOLS = {
    AnchorKind.START: "^",
    AnchorKind.END: "$",
    AnchorKind.WORD_BOUNDARY: "\\b",
    AnchorKind.NON_WORD_BOUNDARY: "\\B",
}


# ------------------------------------------------------------------ #
# Character classes (payload of Sparse nodes)
# ------------------------------------------------------------------ #

@dataclass(frozen=True)
class CharRange:
    lo: str
    hi: str

    def describe(self) -> str:
        if self.lo == self.hi:
            return _escape_class_char(self.lo)
        return f"{_escape_class_char(self.lo)}-{_escape_class_char(self.hi)}"


@dataclass(frozen=True)
class PerlClass:
    code: str  # d, w or s
    negated: bool = False

    def describe(self) -> str:
        return "\\" + (self.code.upper() if self.negated else self.code)


ClassItem = Union[CharRange, PerlClass]


@dataclass(frozen=True)
class CharClass:
    items: Tuple[ClassItem, ...] = ()
    negated: bool = False

    @classmethod
    def any(cls) -> "CharClass":
        # An empty negated class matches every character.
        return cls(items=(), negated=True)

    def describe(self) -> str:
        if self.negated and not self.items:
            return "."
        if not self.negated and len(self.items) == 1 and isinstance(self.items[0], PerlClass):
            return self.items[0].describe()
        body = "".join(item.describe() for item in self.items)
        return f"[{'^' if self.negated else ''}{body}]"


def _escape_class_char(ch: str) -> str:
    if ch in "]\\^-":
        return "\\" + ch
    if ch == "\n":
        return "\\n"
    if ch == "\t":
        return "\\t"
    if ch == "\r":
        return "\\r"
    return ch


# ------------------------------------------------------------------ #
# Node variants
# ------------------------------------------------------------------ #

class NFANode:
    kind: str = ""

    def targets(self) -> Tuple[Tuple[str, int], ...]:
        """(field name, target index) for every outgoing transition, in edge order."""
        return ()


@dataclass(frozen=True)
class Done(NFANode):
    kind = "done"


@dataclass(frozen=True)
class Fail(NFANode):
    kind = "fail"


@dataclass(frozen=True)
class Save(NFANode):
    slot: int
    next: int
    kind = "save"

    def targets(self):
        return (("next", self.next),)


@dataclass(frozen=True)
class Char(NFANode):
    char: str
    next: int
    kind = "char"

    def targets(self):
        return (("next", self.next),)


@dataclass(frozen=True)
class Epsilon(NFANode):
    next: int
    kind = "epsilon"

    def targets(self):
        return (("next", self.next),)


@dataclass(frozen=True)
class Split(NFANode):
    next1: int
    next2: int
    kind = "split"

    def targets(self):
        return (("next1", self.next1), ("next2", self.next2))


@dataclass(frozen=True)
class Anchor(NFANode):
    anchor: AnchorKind
    next: int
    kind = "anchor"

    def targets(self):
        return (("next", self.next),)


@dataclass(frozen=True)
class Sparse(NFANode):
    char_class: CharClass
    next: int
    kind = "sparse"

    def targets(self):
        return (("next", self.next),)


NODE_TYPES = {
    node_type.kind: node_type
    for node_type in (Done, Fail, Save, Char, Epsilon, Split, Anchor, Sparse)
}


@dataclass(frozen=True)
class NFA:
    nodes: Tuple[NFANode, ...]
    start: int

    def __post_init__(self):
        # Accept any sequence but keep the stored value immutable.
        if not isinstance(self.nodes, tuple):
            object.__setattr__(self, "nodes", tuple(self.nodes))

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, index: int) -> NFANode:
        return self.nodes[index]

    def __str__(self) -> str:
        return f"NFA(size={len(self.nodes)}, start={self.start})"
