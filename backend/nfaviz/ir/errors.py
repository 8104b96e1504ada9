from dataclasses import dataclass
from typing import Optional


@dataclass
class ValidationError:
    level: str
    message: str
    object_id: str


class NFAError(Exception):
    """Base class for everything that can go wrong turning an NFA into a diagram."""


@dataclass(eq=False)
class MalformedNFAError(NFAError):
    """A node (or the start index) refers outside the node array."""

    index: Optional[int]  # None when the start index itself is bad
    field: str
    target: int
    size: int

    def __str__(self) -> str:
        where = "start" if self.index is None else f"node {self.index}"
        return (
            f"{where}: {self.field}={self.target} is out of range "
            + (f"(valid indices 0..{self.size - 1})" if self.size else "(the NFA has no nodes)")
        )


@dataclass(eq=False)
class UnsupportedNodeError(NFAError):
    index: int
    node_type: str

    def __str__(self) -> str:
        return f"node {self.index}: no diagram support for node type '{self.node_type}'"


@dataclass(eq=False)
class NFADocumentError(NFAError):
    message: str
    location: str = ""

    def __str__(self) -> str:
        if self.location:
            return f"{self.location}: {self.message}"
        return self.message


@dataclass(eq=False)
class UnsupportedFormatError(NFAError):
    output_format: str
    available: tuple = ()

    def __str__(self) -> str:
        return (
            f"Unsupported output format '{self.output_format}' "
            f"(available: {', '.join(self.available)})"
        )


@dataclass(eq=False)
class RegexParseError(NFAError):
    message: str
    position: Optional[int] = None  # None when the problem is the pattern as a whole

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (at position {self.position})"
