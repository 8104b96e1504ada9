from dataclasses import dataclass, field
from typing import Dict, List, Optional
from enum import Enum


class ValidationSeverity(Enum):
    ERROR = "error"      # Diagram cannot be built or is wrong
    WARNING = "warning"  # Diagram builds but the automaton looks off
    INFO = "info"        # Worth knowing, nothing to fix


@dataclass
class ValidationIssue:
    """A single validation issue"""
    severity: ValidationSeverity
    code: str           # Machine-readable issue code
    message: str        # Human-readable description
    node_index: Optional[int] = None
    suggestion: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "severity": self.severity.value,
            "code": self.code,
            "message": self.message,
            "node_index": self.node_index,
            "suggestion": self.suggestion,
        }


@dataclass
class ValidationReport:
    is_valid: bool
    issues: List[ValidationIssue] = field(default_factory=list)
    stats: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_issues(cls, issues: List[ValidationIssue], stats: Optional[Dict[str, int]] = None):
        return cls(
            is_valid=not any(i.severity == ValidationSeverity.ERROR for i in issues),
            issues=issues,
            stats=stats or {},
        )

    def _count(self, severity: ValidationSeverity) -> int:
        return sum(1 for i in self.issues if i.severity == severity)

    @property
    def error_count(self) -> int:
        return self._count(ValidationSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return self._count(ValidationSeverity.WARNING)

    @property
    def info_count(self) -> int:
        return self._count(ValidationSeverity.INFO)

    @property
    def errors(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    def codes(self) -> List[str]:
        return [i.code for i in self.issues]

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "info_count": self.info_count,
            "issues": [i.to_dict() for i in self.issues],
            "stats": self.stats,
        }

    def get_summary(self) -> str:
        """Get human-readable summary"""
        status = "✅ Valid" if self.is_valid else "❌ Invalid"
        return (
            f"{status} | "
            f"Errors: {self.error_count}, Warnings: {self.warning_count}, Info: {self.info_count}"
        )
