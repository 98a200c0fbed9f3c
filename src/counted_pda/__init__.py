from .automaton import RejectCategory, State
from .configuration import Configuration, Counters, TraceEntry
from .engine import PDAEngine, accepts, run
from .errors import InvalidSymbolError, NoInputError, ValidationError
from .outcome import Accepted, Rejected, Running, StepResult

__all__ = [
    "PDAEngine",
    "run",
    "accepts",
    "State",
    "RejectCategory",
    "Configuration",
    "Counters",
    "TraceEntry",
    "Accepted",
    "Rejected",
    "Running",
    "StepResult",
    "ValidationError",
    "InvalidSymbolError",
    "NoInputError",
]
