from __future__ import annotations

import re
from typing import Final

Symbol = str
SENTINEL: Final[Symbol] = "Z0"  # permanent bottom-of-stack marker
MARK_A: Final[Symbol] = "A"
MARK_B: Final[Symbol] = "B"

ALPHABET: Final[frozenset[str]] = frozenset("abxyc")
END_OF_INPUT: Final[None] = None

_INVALID = re.compile("[^" + "".join(sorted(ALPHABET)) + "]")


def first_invalid(text: str) -> tuple[int, str] | None:
    """Return (position, char) of the first character outside the alphabet, if any."""
    m = _INVALID.search(text)
    if m is None:
        return None
    return m.start(), m.group()


def describe(sym: str | None) -> str:
    return "EOF" if sym is None else sym
