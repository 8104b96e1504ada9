#backend\nfaviz\compiler\compiler.py

from typing import Callable, Dict, Optional

from nfaviz import config
from nfaviz.ir.nfa import NFA
from nfaviz.ir.diagram import DiagramIR
from nfaviz.ir.errors import UnsupportedFormatError
from nfaviz.compiler.builder import translate
from nfaviz.compiler.render_penrose import render_penrose
from nfaviz.compiler.render_mermaid import render_mermaid
from nfaviz.compiler.render_d2 import render_d2


def render_json(diagram: DiagramIR) -> str:
    return diagram.model_dump_json(indent=2)


# ============================================================
# Renderer registry
# ============================================================

RENDERERS: Dict[str, Callable[[DiagramIR], str]] = {
    "penrose": render_penrose,
    "mermaid": render_mermaid,
    "d2": render_d2,
    "json": render_json,
}


def available_formats() -> list[str]:
    return list(RENDERERS)


def compile_diagram(diagram: DiagramIR, output_format: Optional[str] = None) -> str:
    """
    Serialize an already built diagram.
    Deterministic. One call, one string.
    """
    output_format = (output_format or config.DEFAULT_FORMAT).lower()
    renderer = RENDERERS.get(output_format)
    if renderer is None:
        raise UnsupportedFormatError(output_format, tuple(RENDERERS))
    return renderer(diagram)


def compile_nfa(nfa: NFA, output_format: Optional[str] = None) -> str:
    return compile_diagram(translate(nfa), output_format)
