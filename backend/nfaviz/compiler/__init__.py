from nfaviz.compiler.builder import translate, DiagramBuilder
from nfaviz.compiler.compiler import (
    RENDERERS,
    available_formats,
    compile_diagram,
    compile_nfa,
)

__all__ = [
    "translate",
    "DiagramBuilder",
    "RENDERERS",
    "available_formats",
    "compile_diagram",
    "compile_nfa",
]
