"""Outcome of a DAO write, so callers can tell why a write failed."""
import sqlite3
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ResultKind(Enum):
    OK = "ok"
    CONSTRAINT_VIOLATION = "constraint_violation"
    NOT_FOUND = "not_found"
    STORE_ERROR = "store_error"


@dataclass(frozen=True)
class DbResult:
    kind: ResultKind
    value: Any = None
    message: str = ""

    def __bool__(self) -> bool:
        return self.kind is ResultKind.OK

    @property
    def ok(self) -> bool:
        return self.kind is ResultKind.OK

    @classmethod
    def success(cls, value: Any = None) -> "DbResult":
        return cls(ResultKind.OK, value)

    @classmethod
    def not_found(cls, message: str = "") -> "DbResult":
        return cls(ResultKind.NOT_FOUND, message=message)

    @classmethod
    def from_error(cls, exc: sqlite3.Error) -> "DbResult":
        if isinstance(exc, sqlite3.IntegrityError):
            return cls(ResultKind.CONSTRAINT_VIOLATION, message=str(exc))
        return cls(ResultKind.STORE_ERROR, message=str(exc))

    def with_message(self, message: Optional[str]) -> "DbResult":
        return DbResult(self.kind, self.value, message or self.message)
