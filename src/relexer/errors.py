"""Exception types raised by relexer."""

from __future__ import annotations


class FsmError(Exception):
    """Base class for automaton construction failures."""


class ConstructionError(FsmError, ValueError):
    """A postfix expression could not be turned into an automaton.

    Raised for operand-stack underflow, leftover fragments, empty input, or a
    character that is neither an operator nor an alphabet symbol.  No partial
    automaton is ever returned alongside it.

    Args:
        message: Human-readable description.
        position: Index into the postfix string where the problem was found,
            or None when it concerns the expression as a whole.
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class StateLimitError(FsmError):
    """Subset construction discovered more states than the configured cap.

    Args:
        limit: The ``max_states`` value that was exceeded.
    """

    def __init__(self, limit: int) -> None:
        super().__init__(f"Determinization exceeded max_states={limit}")
        self.limit = limit
