"""Automaton reversal.

Reversing flips every edge and swaps the roles of start and final states.
Copies keep the ids of the states they mirror, which makes a reversed
automaton directly comparable with the original in tests.
"""

from __future__ import annotations

from collections import deque

from relexer.fsm.automaton import EPSILON, Automaton, State
from relexer.log import get_logger

logger = get_logger(__name__)


def reverse(fsm: Automaton) -> Automaton:
    """Build the automaton accepting the reversal of ``fsm``'s language.

    - With exactly one final state F, the reversed start is the copy of F.
    - Otherwise a synthetic start (id ``max(fsm.states) + 1``) gets an
      epsilon edge to the copy of each final state.

    In both cases the only final state of the result is the copy of
    ``fsm.start``.  A start state that is also final is copied once, so its
    reversed edges are registered exactly once.

    Args:
        fsm: Automaton to reverse; it is not modified.

    Returns:
        A new automaton, usually nondeterministic.
    """
    states: dict[int, State] = {}

    def copy_of(state_id: int) -> State:
        state = states.get(state_id)
        if state is None:
            state = State(state_id)
            states[state_id] = state
        return state

    # Breadth-first over the original, adding each edge u --c--> v as v' --c--> u'.
    visited = {fsm.start}
    queue = deque([fsm.start])
    copy_of(fsm.start)
    while queue:
        u = queue.popleft()
        for label, v in fsm.states[u].transitions:
            copy_of(v).add_move(label, u)
            if v not in visited:
                visited.add(v)
                queue.append(v)

    finals = sorted(fsm.finals)
    if len(finals) == 1:
        start = copy_of(finals[0])
    else:
        start = State(max(fsm.states) + 1)
        for final in finals:
            start.add_move(EPSILON, copy_of(final).id)
        states[start.id] = start

    logger.debug("reversed automaton %s: %d states, start s%d", fsm, len(states), start.id)
    return Automaton(states=states, start=start.id, finals={fsm.start})
