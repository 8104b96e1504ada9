"""
Validation module for NFA inputs and built diagrams.
"""

from nfaviz.validation.issues import (
    ValidationIssue,
    ValidationReport,
    ValidationSeverity,
)

from nfaviz.validation.nfa_validator import (
    NFAValidator,
    validate_nfa,
    raise_on_errors,
)

from nfaviz.validation.diagram_validator import (
    DiagramValidator,
    check_diagram,
)


__all__ = [
    "ValidationIssue",
    "ValidationReport",
    "ValidationSeverity",
    "NFAValidator",
    "validate_nfa",
    "raise_on_errors",
    "DiagramValidator",
    "check_diagram",
]
