"""DFA simulation."""

from __future__ import annotations

from relexer.fsm.automaton import Automaton


def walk(dfa: Automaton, text: str, start_state: int | None = None) -> int | None:
    """Walk the DFA on a string, returning the final state or None if stuck.

    Args:
        dfa: A deterministic automaton.
        text: Input string to walk.
        start_state: Starting state (defaults to ``dfa.start``).

    Returns:
        Id of the state reached, or None if a dead transition was encountered.
    """
    state = start_state if start_state is not None else dfa.start
    for ch in text:
        target = dfa.states[state].move(ch)
        if target is None:
            return None
        state = target
    return state


def accepts(dfa: Automaton, text: str) -> bool:
    """Check whether the DFA accepts a string.

    A symbol with no outgoing transition rejects immediately; it is not an
    error.  The empty string is accepted iff the start state is final.

    Args:
        dfa: A deterministic automaton.
        text: Input string to test.

    Returns:
        True if the string is accepted.
    """
    state = walk(dfa, text)
    return state is not None and state in dfa.finals
