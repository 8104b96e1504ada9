# Regex front-end: pattern text -> AST -> NFA node array

from nfaviz.regex.parser import parse_regex, parse_class
from nfaviz.regex.compiler import compile_ast, compile_regex

__all__ = [
    "parse_regex",
    "parse_class",
    "compile_ast",
    "compile_regex",
]
