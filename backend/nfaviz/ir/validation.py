from dataclasses import dataclass
from typing import List
from .errors import ValidationError, NFAError


@dataclass
class ValidationResult:
    is_valid: bool
    errors: List[ValidationError]

    @classmethod
    def success(cls):
        return cls(is_valid=True, errors=[])

    @classmethod
    def failure(cls, errors: List[ValidationError]):
        return cls(is_valid=False, errors=errors)

    @classmethod
    def from_exception(cls, level: str, exc: NFAError, object_id: str = ""):
        return cls.failure(
            [ValidationError(level=level, message=str(exc), object_id=object_id)]
        )
