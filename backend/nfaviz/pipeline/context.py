from dataclasses import dataclass, field
from typing import Optional, List

from nfaviz.ir.nfa import NFA
from nfaviz.ir.diagram import DiagramIR
from nfaviz.ir.errors import ValidationError
from nfaviz.regex.ast import RegexNode
from nfaviz.validation.issues import ValidationReport


@dataclass
class PipelineContext:
    # Raw input: either a pattern or a ready-made NFA
    pattern: Optional[str] = None
    nfa: Optional[NFA] = None
    output_format: Optional[str] = None

    # Regex front-end
    ast: Optional[RegexNode] = None

    # NFA checks (warnings survive even when the run succeeds)
    validation: Optional[ValidationReport] = None

    # Diagram
    diagram: Optional[DiagramIR] = None
    source: Optional[str] = None

    errors: List[ValidationError] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.errors and self.source is not None

    def add_error(self, level: str, message: str, object_id: str = ""):
        self.errors.append(ValidationError(level=level, message=message, object_id=object_id))
