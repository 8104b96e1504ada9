from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List, Literal, Union, Annotated


# ============================================================
# NFA documents: one schema per node kind
# ============================================================

class DoneSpec(BaseModel):
    kind: Literal["done"]


class FailSpec(BaseModel):
    kind: Literal["fail"]


class SaveSpec(BaseModel):
    kind: Literal["save"]
    slot: int
    next: int


class CharSpec(BaseModel):
    kind: Literal["char"]
    char: str = Field(min_length=1, max_length=1)
    next: int


class EpsilonSpec(BaseModel):
    kind: Literal["epsilon"]
    next: int


class SplitSpec(BaseModel):
    kind: Literal["split"]
    next1: int
    next2: int


class AnchorSpec(BaseModel):
    kind: Literal["anchor"]
    anchor: Literal["start", "end", "word_boundary", "non_word_boundary"]
    next: int


class SparseSpec(BaseModel):
    kind: Literal["sparse"]
    char_class: str  # class expression, e.g. "[a-z]", "\\d", "."
    next: int


NodeSpec = Annotated[
    Union[
        DoneSpec,
        FailSpec,
        SaveSpec,
        CharSpec,
        EpsilonSpec,
        SplitSpec,
        AnchorSpec,
        SparseSpec,
    ],
    Field(discriminator="kind"),
]


class NFASpec(BaseModel):
    """Serialized NFA. References are NOT range-checked here."""
    nodes: List[NodeSpec]
    start: int


# ============================================================
# API bodies
# ============================================================

class CompileRequest(BaseModel):
    pattern: str
    output_format: Optional[str] = None  # penrose | mermaid | d2 | json


class VisualizeRequest(BaseModel):
    nfa: NFASpec
    output_format: Optional[str] = None


class DiagramResponse(BaseModel):
    type: str
    source: str


class VisualizeResponse(BaseModel):
    status: str
    diagram: DiagramResponse
    ir: Dict[str, Any]
    validation: Dict[str, Any]


class CompileResponse(VisualizeResponse):
    nfa: Dict[str, Any]


class FormatsResponse(BaseModel):
    formats: List[str]
    default: str
