"""Typed resolution results.

Lets callers tell "resolved", "not found" and "ambiguous" apart without
catching exceptions.
"""

from enum import Enum

from pydantic import BaseModel
from pydantic import Field


class ResolutionStatus(str, Enum):
    """Outcome of resolving an import specifier."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    AMBIGUOUS = "ambiguous"


class ResolutionResult(BaseModel):
    """Result of resolving one import specifier.

    Attributes:
        specifier: The specifier that was resolved
        status: Which of the three outcomes occurred
        path: Resolved file path (only when status is FOUND)
        candidates: Conflicting paths in found order (only when status is AMBIGUOUS)
    """

    specifier: str = Field(description="Import specifier as given")
    status: ResolutionStatus
    path: str | None = Field(default=None, description="Resolved file path")
    candidates: list[str] = Field(default_factory=list, description="Conflicting paths")

    @classmethod
    def found(cls, specifier: str, path: str) -> "ResolutionResult":
        return cls(specifier=specifier, status=ResolutionStatus.FOUND, path=path)

    @classmethod
    def not_found(cls, specifier: str) -> "ResolutionResult":
        return cls(specifier=specifier, status=ResolutionStatus.NOT_FOUND)

    @classmethod
    def ambiguous(cls, specifier: str, candidates: list[str]) -> "ResolutionResult":
        return cls(specifier=specifier, status=ResolutionStatus.AMBIGUOUS, candidates=list(candidates))

    @property
    def is_found(self) -> bool:
        return self.status is ResolutionStatus.FOUND

    @property
    def is_ambiguous(self) -> bool:
        return self.status is ResolutionStatus.AMBIGUOUS
