from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from .automaton import EXPECTED, UNEXPECTED, RejectCategory, State
from .configuration import Configuration, Counters, TraceEntry
from .errors import InvalidSymbolError, NoInputError
from .outcome import Accepted, Outcome, Rejected, RunOutcome, Running, StepResult
from .symbols import MARK_A, MARK_B, Symbol, describe, first_invalid

logger = logging.getLogger(__name__)

# A transition handler either commits its effects and returns None (keep
# running), returns Accepted, or returns Rejected without touching the
# configuration.
_Handler = Callable[[str | None], "Accepted | Rejected | None"]


class PDAEngine:
    """Deterministic PDA for a^n b^m x y^p c^m a^n (n >= 2, m >= 1, p >= 0).

    One stack with sentinel Z0 carries the A/B marks; four counters back the
    numeric side conditions. Every committed transition appends a TraceEntry,
    starting with the initial configuration recorded by load_input().

    Two entry points share the same transition primitive:
      - step() applies exactly one transition and returns control.
      - run_to_completion() applies transitions until an outcome exists.
    """

    def __init__(self, text: str | None = None):
        self._handlers: dict[State, _Handler] = {
            State.Q0: self._on_q0,
            State.Q1: self._on_q1,
            State.Q2: self._on_q2,
            State.Q3: self._on_q3,
            State.Q4: self._on_q4,
        }
        self.reset()
        if text is not None:
            self.load_input(text)

    def reset(self) -> None:
        self.config = Configuration()
        self._trace: list[TraceEntry] = []
        self._outcome: Outcome = Running()
        self._loaded = False

    def load_input(self, text: str) -> None:
        """Validate and load `text`, then record the initial configuration.

        Surrounding whitespace is stripped. On an invalid symbol the engine
        is left exactly as it was.
        """
        tape = text.strip()
        bad = first_invalid(tape)
        if bad is not None:
            pos, sym = bad
            logger.warning("rejecting input %r: invalid symbol %r at %d", tape, sym, pos)
            raise InvalidSymbolError(sym, pos)
        self.reset()
        self.config.tape = tape
        self._loaded = True
        self._record()
        logger.debug("loaded input %r", tape)

    def step(self) -> StepResult:
        if self.halted:
            return StepResult.ALREADY_HALTED
        self._require_input()
        self._transition()
        return StepResult.HALTED if self.halted else StepResult.ADVANCED

    def run_to_completion(self) -> RunOutcome:
        if not self.halted:
            self._require_input()
        while not self.halted:
            self._transition()
        return self._outcome

    # -------------------- read interface --------------------
    @property
    def current_state(self) -> State:
        return self.config.state

    @property
    def stack_contents(self) -> tuple[Symbol, ...]:
        return tuple(self.config.stack)

    @property
    def trace_entries(self) -> tuple[TraceEntry, ...]:
        return tuple(self._trace)

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def halted(self) -> bool:
        return not isinstance(self._outcome, Running)

    @property
    def halting_state(self) -> State | None:
        if isinstance(self._outcome, Accepted):
            return State.QF
        if isinstance(self._outcome, Rejected):
            return State.QR
        return None

    @property
    def counters(self) -> Counters:
        return replace(self.config.counters)

    @property
    def cursor(self) -> int:
        return self.config.cursor

    @property
    def input_text(self) -> str:
        return self.config.tape

    @property
    def remaining_input(self) -> str:
        return self.config.remaining

    def expected_symbols(self) -> frozenset[str | None]:
        """Symbols the current state has a rule for (None means end of input)."""
        if self.halted:
            return frozenset()
        return EXPECTED[self.config.state]

    # -------------------- transition primitive --------------------
    def _require_input(self) -> None:
        if not self._loaded:
            raise NoInputError("no input loaded; call load_input() first")

    def _record(self) -> None:
        self._trace.append(self.config.snapshot())

    def _transition(self) -> None:
        cfg = self.config
        before = cfg.state
        sym = cfg.current_symbol
        result = self._handlers[before](sym)
        if isinstance(result, Rejected):
            self._outcome = result
            logger.info("rejected %r: %s", cfg.tape, result)
            return
        if isinstance(result, Accepted):
            cfg.state = State.QF
            self._record()
            self._outcome = result
            logger.info("accepted %r", cfg.tape)
            return
        self._record()
        logger.debug("%s on '%s' -> %s", before, describe(sym), cfg.state)

    def _reject(self, category: RejectCategory, sym: str | None, detail: str = "") -> Rejected:
        return Rejected(category, self.config.state, sym, detail)

    def _unexpected(self, sym: str | None) -> Rejected:
        return self._reject(UNEXPECTED[self.config.state], sym, f"found '{describe(sym)}'")

    def _on_q0(self, sym: str | None) -> Accepted | Rejected | None:
        cfg = self.config
        if sym == "a":
            cfg.push(MARK_A)
            cfg.counters.initial_a += 1
            cfg.consume()
        elif sym == "b":
            cfg.state = State.Q1
        elif sym == "x":
            return self._reject(RejectCategory.M_AT_LEAST_ONE, sym, "at least one b before x")
        else:
            return self._unexpected(sym)
        return None

    def _on_q1(self, sym: str | None) -> Accepted | Rejected | None:
        cfg = self.config
        if sym == "b":
            cfg.push(MARK_B)
            cfg.counters.b_count += 1
            cfg.consume()
        elif sym == "x":
            if cfg.counters.b_count < 1:
                return self._reject(RejectCategory.M_AT_LEAST_ONE, sym, "at least one b before x")
            cfg.consume()
            cfg.state = State.Q2
        else:
            return self._unexpected(sym)
        return None

    def _on_q2(self, sym: str | None) -> Accepted | Rejected | None:
        cfg = self.config
        if sym == "y":
            cfg.consume()
        elif sym == "c":
            if cfg.top != MARK_B:
                return self._reject(RejectCategory.NO_B_MARKS, sym)
            cfg.state = State.Q3
        else:
            return self._unexpected(sym)
        return None

    def _on_q3(self, sym: str | None) -> Accepted | Rejected | None:
        cfg = self.config
        ctr = cfg.counters
        if sym == "c":
            if cfg.top != MARK_B:
                return self._reject(RejectCategory.TOP_NOT_B, sym)
            cfg.pop()
            ctr.c_count += 1
            cfg.consume()
        elif sym == "a":
            if ctr.b_count != ctr.c_count:
                return self._reject(
                    RejectCategory.BC_MISMATCH, sym, f"{ctr.c_count} c against {ctr.b_count} b"
                )
            if ctr.c_count < 1:
                return self._reject(RejectCategory.M_AT_LEAST_ONE, sym, "at least one c")
            # the leading a-run is complete once q3 is reached
            if ctr.initial_a < 2:
                return self._reject(
                    RejectCategory.N_AT_LEAST_TWO, sym, f"{ctr.initial_a} leading a"
                )
            cfg.state = State.Q4
        else:
            return self._unexpected(sym)
        return None

    def _on_q4(self, sym: str | None) -> Accepted | Rejected | None:
        cfg = self.config
        ctr = cfg.counters
        if sym == "a":
            if cfg.top != MARK_A:
                return self._reject(RejectCategory.NO_A_TO_POP, sym)
            cfg.pop()
            ctr.final_a += 1
            cfg.consume()
            return None
        if sym is None:
            if ctr.initial_a != ctr.final_a:
                return self._reject(
                    RejectCategory.A_COUNT_MISMATCH,
                    sym,
                    f"{ctr.final_a} trailing a against {ctr.initial_a} leading a",
                )
            if not cfg.at_base():
                return self._reject(RejectCategory.STACK_NOT_AT_BASE, sym)
            if ctr.initial_a < 2:
                return self._reject(
                    RejectCategory.N_AT_LEAST_TWO, sym, f"{ctr.initial_a} leading a"
                )
            return Accepted()
        return self._unexpected(sym)


def run(text: str) -> PDAEngine:
    """Load `text` into a fresh engine and drive it to an outcome."""
    engine = PDAEngine(text)
    engine.run_to_completion()
    return engine


def accepts(text: str) -> bool:
    return isinstance(run(text).outcome, Accepted)
