from dataclasses import dataclass
from typing import Optional, Tuple

from nfaviz.ir.nfa import AnchorKind, CharClass


class RegexNode:
    pass


@dataclass(frozen=True)
class Empty(RegexNode):
    pass


@dataclass(frozen=True)
class Literal(RegexNode):
    char: str


@dataclass(frozen=True)
class ClassNode(RegexNode):
    char_class: CharClass  # also used for '.' and \d-style escapes


@dataclass(frozen=True)
class AnchorNode(RegexNode):
    anchor: AnchorKind


@dataclass(frozen=True)
class Group(RegexNode):
    expr: RegexNode
    capture: Optional[int] = None  # None for (?:...)


@dataclass(frozen=True)
class Concat(RegexNode):
    parts: Tuple[RegexNode, ...]


@dataclass(frozen=True)
class Alternate(RegexNode):
    options: Tuple[RegexNode, ...]


@dataclass(frozen=True)
class Repeat(RegexNode):
    expr: RegexNode
    min_count: int
    max_count: Optional[int]  # None => unbounded
