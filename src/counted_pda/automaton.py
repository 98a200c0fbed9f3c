from __future__ import annotations

from enum import Enum

from .symbols import END_OF_INPUT


class State(str, Enum):
    """States of the a^n b^m x y^p c^m a^n recognizer.

    Q0..Q4 are live. QF is the accept sink and is recorded in the trace;
    QR is the reject sink, reported only through the outcome.
    """

    Q0 = "q0"
    Q1 = "q1"
    Q2 = "q2"
    Q3 = "q3"
    Q4 = "q4"
    QF = "qf"
    QR = "qr"

    def __str__(self) -> str:
        return self.value


class RejectCategory(str, Enum):
    """Which constraint a rejected run failed."""

    EXPECTED_A_OR_B = "expected a or b at start"
    EXPECTED_B_OR_X = "expected b or x"
    EXPECTED_Y_OR_C = "expected y or c"
    EXPECTED_C_OR_A = "expected c or a"
    EXPECTED_A_OR_END = "expected a or end of input"
    M_AT_LEAST_ONE = "m ≥ 1 required"
    N_AT_LEAST_TWO = "n ≥ 2 required"
    NO_B_MARKS = "no B marks left"
    TOP_NOT_B = "top is not B"
    BC_MISMATCH = "b/c count mismatch"
    NO_A_TO_POP = "no A to pop"
    STACK_NOT_AT_BASE = "stack not returned to base"
    A_COUNT_MISMATCH = "a-count mismatch"

    def __str__(self) -> str:
        return self.value


# Input symbols each live state has a rule for; END_OF_INPUT stands for ε.
EXPECTED: dict[State, frozenset[str | None]] = {
    State.Q0: frozenset({"a", "b"}),
    State.Q1: frozenset({"b", "x"}),
    State.Q2: frozenset({"y", "c"}),
    State.Q3: frozenset({"c", "a"}),
    State.Q4: frozenset({"a", END_OF_INPUT}),
}

# Category used when a live state sees a symbol it has no rule for.
UNEXPECTED: dict[State, RejectCategory] = {
    State.Q0: RejectCategory.EXPECTED_A_OR_B,
    State.Q1: RejectCategory.EXPECTED_B_OR_X,
    State.Q2: RejectCategory.EXPECTED_Y_OR_C,
    State.Q3: RejectCategory.EXPECTED_C_OR_A,
    State.Q4: RejectCategory.EXPECTED_A_OR_END,
}
