from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .automaton import RejectCategory, State
from .symbols import describe


class StepResult(Enum):
    ADVANCED = "advanced"
    HALTED = "halted"
    ALREADY_HALTED = "already_halted"


@dataclass(frozen=True)
class Running:
    """No outcome yet."""


@dataclass(frozen=True)
class Accepted:
    def __str__(self) -> str:
        return "accepted"


@dataclass(frozen=True)
class Rejected:
    """A terminal rejection: the failed constraint and where it failed."""

    category: RejectCategory
    state: State
    symbol: str | None
    detail: str = ""

    @property
    def reason(self) -> str:
        if self.detail:
            return f"{self.category.value}: {self.detail}"
        return self.category.value

    def __str__(self) -> str:
        return f"rejected in {self.state} on '{describe(self.symbol)}': {self.reason}"


Outcome = Running | Accepted | Rejected
RunOutcome = Accepted | Rejected
