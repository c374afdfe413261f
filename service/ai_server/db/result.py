"""
Result type returned by every database accessor.

Accessors never raise. A lookup either finds the row, finds nothing, or
fails talking to Supabase; the three cases are kept apart so callers can
tell "absent" from "temporarily unavailable".
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class Outcome(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class DbResult:
    outcome: Outcome
    data: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.FOUND

    @property
    def not_found(self) -> bool:
        return self.outcome is Outcome.NOT_FOUND

    @property
    def failed(self) -> bool:
        return self.outcome is Outcome.FAILED

    @classmethod
    def found(cls, data: Any) -> "DbResult":
        return cls(Outcome.FOUND, data)

    @classmethod
    def missing(cls) -> "DbResult":
        return cls(Outcome.NOT_FOUND)

    @classmethod
    def failure(cls, error: str) -> "DbResult":
        return cls(Outcome.FAILED, error=error)
