from __future__ import annotations

from dataclasses import dataclass, field

from .automaton import State
from .symbols import SENTINEL, Symbol


@dataclass
class Counters:
    initial_a: int = 0
    b_count: int = 0
    c_count: int = 0
    final_a: int = 0


@dataclass(frozen=True)
class TraceEntry:
    state: State
    remaining: str
    stack: tuple[Symbol, ...]

    def __str__(self) -> str:
        return f'({self.state}, "{self.remaining}", [{", ".join(self.stack)}])'


@dataclass
class Configuration:
    """Instantaneous description of the automaton: state, tape position, stack, counters."""
    state: State = State.Q0
    tape: str = ""
    cursor: int = 0
    stack: list[Symbol] = field(default_factory=lambda: [SENTINEL])
    counters: Counters = field(default_factory=Counters)

    @property
    def current_symbol(self) -> str | None:
        return self.tape[self.cursor] if self.cursor < len(self.tape) else None

    @property
    def remaining(self) -> str:
        return self.tape[self.cursor:]

    @property
    def top(self) -> Symbol:
        return self.stack[-1]

    def at_base(self) -> bool:
        return len(self.stack) == 1 and self.stack[0] == SENTINEL

    def push(self, sym: Symbol) -> None:
        self.stack.append(sym)

    def pop(self) -> Symbol:
        if self.at_base():
            raise IndexError("cannot pop the bottom-of-stack sentinel")
        return self.stack.pop()

    def consume(self) -> None:
        self.cursor += 1

    def snapshot(self) -> TraceEntry:
        return TraceEntry(self.state, self.remaining, tuple(self.stack))
