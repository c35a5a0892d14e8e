"""DFA minimization by Brzozowski's algorithm.

Determinizing the reversal of a DFA merges every pair of states with the
same right language.  Doing it twice, ``determinize(reverse(determinize(
reverse(dfa))))``, yields the unique minimal DFA for the language without
any partition refinement.
"""

from __future__ import annotations

from relexer.fsm.automaton import Automaton
from relexer.fsm.determinize import determinize
from relexer.fsm.reverse import reverse
from relexer.log import get_logger

logger = get_logger(__name__)


def minimize(dfa: Automaton, *, max_states: int | None = None) -> Automaton:
    """Return the minimal DFA accepting the same language as ``dfa``.

    The result is partial: states from which no final state is reachable are
    dropped, so a missing transition means rejection.  An already-minimal
    DFA comes back isomorphic to itself.

    Args:
        dfa: Automaton to minimize.  Nondeterministic input is accepted too.
        max_states: Optional cap forwarded to both determinization passes.

    Returns:
        The minimal DFA.

    Raises:
        StateLimitError: If either determinization exceeds ``max_states``.
    """
    backward = determinize(reverse(dfa), max_states=max_states)
    minimal = determinize(reverse(backward), max_states=max_states)
    logger.debug("minimized %d states to %d", len(dfa), len(minimal))
    return minimal
