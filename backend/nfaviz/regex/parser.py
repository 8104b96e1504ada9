"""
Recursive-descent regex parser.

Grammar:
    regex         := alternation
    alternation   := concatenation ('|' concatenation)*
    concatenation := repetition*            # empty allowed
    repetition    := atom quantifier?
    quantifier    := '*' | '+' | '?' | '{m}' | '{m,}' | '{m,n}'
    atom          := literal | '.' | '^' | '$' | escape | group | charclass

The whole pattern is returned wrapped in capture group 0; explicit
capturing groups are numbered from 1 in order of their '('.
"""

from typing import List, Optional, Tuple

from nfaviz import config
from nfaviz.ir.errors import RegexParseError
from nfaviz.ir.nfa import AnchorKind, CharClass, CharRange, PerlClass, ClassItem
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


REPEAT_LIMIT = 1000
MAX_NESTING_DEPTH = 64

_CONTROL_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "f": "\f",
    "v": "\v",
}

_PERL_CODES = "dDwWsS"


class Parser:
    def __init__(self, text: str):
        self.text = text
        self.i = 0
        self.group_count = 0
        self.depth = 0

    def parse(self) -> RegexNode:
        if len(self.text) > config.MAX_PATTERN_LENGTH:
            raise RegexParseError(
                f"Pattern longer than {config.MAX_PATTERN_LENGTH} characters", 0
            )
        node = self._parse_alternation()
        if not self._eof():
            # Only an unmatched ')' can stop the alternation early.
            raise RegexParseError("Unmatched ')'", self.i)
        return Group(node, capture=0)

    # ------------------------------------------------------------------ #
    # Structure
    # ------------------------------------------------------------------ #

    def _parse_alternation(self) -> RegexNode:
        options = [self._parse_concatenation()]
        while self._peek() == "|":
            self.i += 1
            options.append(self._parse_concatenation())
        if len(options) == 1:
            return options[0]
        return Alternate(tuple(options))

    def _parse_concatenation(self) -> RegexNode:
        parts: List[RegexNode] = []
        while True:
            c = self._peek()
            if c is None or c in ")|":
                break
            parts.append(self._parse_repetition())
        if not parts:
            return Empty()
        if len(parts) == 1:
            return parts[0]
        return Concat(tuple(parts))

    def _parse_repetition(self) -> RegexNode:
        atom = self._parse_atom()
        c = self._peek()
        if c == "*":
            self.i += 1
            return Repeat(atom, 0, None)
        if c == "+":
            self.i += 1
            return Repeat(atom, 1, None)
        if c == "?":
            self.i += 1
            return Repeat(atom, 0, 1)
        if c == "{":
            m, n = self._parse_brace_quantifier()
            return Repeat(atom, m, n)
        return atom

    def _parse_brace_quantifier(self) -> Tuple[int, Optional[int]]:
        start = self.i
        self._eat("{")
        m = self._parse_int()
        if self._peek() == "}":
            self.i += 1
            n: Optional[int] = m
        else:
            self._eat(",")
            if self._peek() == "}":
                self.i += 1
                n = None
            else:
                n = self._parse_int()
                self._eat("}")
                if n < m:
                    raise RegexParseError(f"Invalid quantifier range {{{m},{n}}}", start)
        if max(m, n or 0) > REPEAT_LIMIT:
            raise RegexParseError(f"Repetition count above {REPEAT_LIMIT}", start)
        return m, n

    def _parse_atom(self) -> RegexNode:
        c = self._peek()
        if c is None:
            raise RegexParseError("Unexpected end of pattern", self.i)

        if c == "(":
            return self._parse_group()
        if c == "[":
            return ClassNode(self._parse_charclass())
        if c == "\\":
            return self._parse_escape()
        if c == ".":
            self.i += 1
            return ClassNode(CharClass.any())
        if c == "^":
            self.i += 1
            return AnchorNode(AnchorKind.START)
        if c == "$":
            self.i += 1
            return AnchorNode(AnchorKind.END)
        if c in "*+?{":
            raise RegexParseError(f"Nothing to repeat before {c!r}", self.i)

        self.i += 1
        return Literal(c)

    def _parse_group(self) -> RegexNode:
        start = self.i
        self._eat("(")
        capture: Optional[int] = None
        if self._peek() == "?":
            if self._peek_ahead(1) != ":":
                raise RegexParseError("Only (?:...) groups are supported", start)
            self.i += 2
        else:
            self.group_count += 1
            capture = self.group_count

        if self.depth >= MAX_NESTING_DEPTH:
            raise RegexParseError("Groups nested too deeply", start)
        self.depth += 1
        expr = self._parse_alternation()
        self.depth -= 1
        if self._peek() != ")":
            raise RegexParseError("Unclosed '('", start)
        self.i += 1
        return Group(expr, capture=capture)

    # ------------------------------------------------------------------ #
    # Escapes and classes
    # ------------------------------------------------------------------ #

    def _parse_escape(self) -> RegexNode:
        start = self.i
        self._eat("\\")
        c = self._peek()
        if c is None:
            raise RegexParseError("Dangling backslash at end of pattern", start)
        self.i += 1

        if c in _PERL_CODES:
            return ClassNode(CharClass(items=(_perl_class(c),)))
        if c == "b":
            return AnchorNode(AnchorKind.WORD_BOUNDARY)
        if c == "B":
            return AnchorNode(AnchorKind.NON_WORD_BOUNDARY)
        return Literal(_CONTROL_ESCAPES.get(c, c))

    def _parse_charclass(self) -> CharClass:
        start = self.i
        self._eat("[")
        negated = False
        if self._peek() == "^":
            negated = True
            self.i += 1

        items: List[ClassItem] = []
        first = True
        while True:
            c = self._peek()
            if c is None:
                raise RegexParseError("Unclosed '[' character class", start)
            if c == "]" and not first:
                self.i += 1
                break
            first = False
            items.append(self._parse_class_item())

        return CharClass(items=tuple(items), negated=negated)

    def _parse_class_item(self) -> ClassItem:
        start = self.i
        lo = self._parse_class_char()
        if isinstance(lo, PerlClass):
            return lo

        # A '-' right before ']' is a literal, not a range.
        if self._peek() == "-" and self._peek_ahead(1) not in ("]", None):
            self.i += 1
            hi = self._parse_class_char()
            if isinstance(hi, PerlClass):
                raise RegexParseError("Range endpoint cannot be a class like \\d", start)
            if hi < lo:
                raise RegexParseError(f"Invalid range {lo!r}-{hi!r}", start)
            return CharRange(lo, hi)
        return CharRange(lo, lo)

    def _parse_class_char(self):
        c = self._peek()
        if c is None:
            raise RegexParseError("Unexpected end in character class", self.i)
        self.i += 1
        if c != "\\":
            return c

        esc = self._peek()
        if esc is None:
            raise RegexParseError("Dangling backslash in character class", self.i - 1)
        self.i += 1
        if esc in _PERL_CODES:
            return _perl_class(esc)
        return _CONTROL_ESCAPES.get(esc, esc)

    # ------------------------------------------------------------------ #
    # Cursor helpers
    # ------------------------------------------------------------------ #

    def _parse_int(self) -> int:
        start = self.i
        while self._peek() is not None and self._peek().isdigit():
            self.i += 1
        if start == self.i:
            raise RegexParseError("Expected a number in quantifier", start)
        return int(self.text[start:self.i])

    def _peek(self) -> Optional[str]:
        if self.i < len(self.text):
            return self.text[self.i]
        return None

    def _peek_ahead(self, k: int) -> Optional[str]:
        j = self.i + k
        if j < len(self.text):
            return self.text[j]
        return None

    def _eat(self, ch: str) -> None:
        if self._peek() != ch:
            raise RegexParseError(f"Expected {ch!r}", self.i)
        self.i += 1

    def _eof(self) -> bool:
        return self.i >= len(self.text)


def _perl_class(code: str) -> PerlClass:
    return PerlClass(code.lower(), negated=code.isupper())


def parse_regex(pattern: str) -> RegexNode:
    return Parser(pattern).parse()


def parse_class(text: str) -> CharClass:
    """Parse a standalone class expression such as "[a-z]", "\\d" or "."."""
    parser = Parser(text)
    node = parser._parse_atom()
    if not parser._eof() or not isinstance(node, ClassNode):
        raise RegexParseError(f"Not a character class: {text!r}", 0)
    return node.char_class
