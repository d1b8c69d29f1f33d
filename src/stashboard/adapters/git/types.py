"""Shared git adapter data structures."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True, slots=True)
class StashEntry:
    """One stash-stack slot as seen when the list was loaded.

    List position is the stash index: 0 is the most recent stash.
    """

    message: str
    identifier: str

    @property
    def short_id(self) -> str:
        return self.identifier[:8]


class OutcomeKind(StrEnum):
    """Kinds of result a stash mutation can produce."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    CONFLICTS = "conflicts"
    UNKNOWN_ERROR = "unknown_error"


@dataclass(frozen=True)
class StashOutcome:
    """Outcome for stash drop/apply/pop operations."""

    kind: OutcomeKind
    code: int | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    @classmethod
    def success(cls) -> StashOutcome:
        return cls(OutcomeKind.SUCCESS, code=0)

    @classmethod
    def not_found(cls, message: str = "") -> StashOutcome:
        return cls(OutcomeKind.NOT_FOUND, message=message)

    @classmethod
    def conflicts(cls, code: int, message: str = "") -> StashOutcome:
        return cls(OutcomeKind.CONFLICTS, code=code, message=message)

    @classmethod
    def unknown(cls, code: int | None, message: str = "") -> StashOutcome:
        return cls(OutcomeKind.UNKNOWN_ERROR, code=code, message=message)
