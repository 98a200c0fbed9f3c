class ValidationError(ValueError):
    """Input rejected before the automaton runs."""


class InvalidSymbolError(ValidationError):
    def __init__(self, symbol: str, position: int) -> None:
        super().__init__(
            f"invalid symbol {symbol!r} at position {position}; only a b x y c are allowed"
        )
        self.symbol = symbol
        self.position = position


class NoInputError(RuntimeError):
    """step() or run_to_completion() called before load_input()."""
