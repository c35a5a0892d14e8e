"""Epsilon closure and subset construction (NFA to DFA)."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from relexer.errors import StateLimitError
from relexer.fsm.automaton import EPSILON, Automaton, IdAllocator, State
from relexer.log import get_logger

logger = get_logger(__name__)


def epsilon_closure(fsm: Automaton, state_ids: Iterable[int]) -> frozenset[int]:
    """Compute the epsilon closure of a set of states.

    Args:
        fsm: Automaton the ids belong to.
        state_ids: Starting states.

    Returns:
        Every state reachable from ``state_ids`` using only epsilon edges,
        including the starting states themselves.
    """
    stack = list(state_ids)
    closure = set(stack)
    while stack:
        s = stack.pop()
        for label, target in fsm.states[s].transitions:
            if label == EPSILON and target not in closure:
                closure.add(target)
                stack.append(target)
    return frozenset(closure)


def move(fsm: Automaton, state_ids: Iterable[int], symbol: str) -> frozenset[int]:
    """Compute the set of states reachable from ``state_ids`` on one ``symbol`` edge."""
    result: set[int] = set()
    for s in state_ids:
        result.update(fsm.states[s].targets(symbol))
    return frozenset(result)


def _symbols(fsm: Automaton, state_ids: frozenset[int]) -> list[str]:
    """Sorted non-epsilon labels leaving any state in the set."""
    symbols: set[str] = set()
    for s in state_ids:
        symbols.update(fsm.states[s].labels())
    return sorted(symbols)


def _important(fsm: Automaton, state_ids: frozenset[int]) -> frozenset[int]:
    """States of the set that have a symbol edge or are final.

    Epsilon-only states never affect a subset's moves or acceptance, so two
    closures with the same important states are the same DFA state.
    """
    return frozenset(s for s in state_ids if s in fsm.finals or fsm.states[s].labels())


def determinize(nfa: Automaton, *, max_states: int | None = None) -> Automaton:
    """Convert an automaton to an equivalent DFA via subset construction.

    Each DFA state stands for an epsilon-closed set of NFA states; sets are
    identified by their important states (see :func:`_important`), which
    keeps the synthetic epsilon start of a reversed automaton from splitting
    a state in two.  A DFA state is final iff its set contains a final state.

    DFA state ids are assigned from 0 in breadth-first discovery order, so
    the result is reproducible for identical input.  The input is only read.
    Running this on an automaton that is already deterministic yields an
    isomorphic copy, since every subset collapses to a singleton.

    Args:
        nfa: The automaton to convert; may contain epsilon edges.
        max_states: Optional cap on the number of DFA states.

    Returns:
        A deterministic automaton accepting the same language.

    Raises:
        StateLimitError: If more than ``max_states`` states would be created.
    """
    ids = IdAllocator()

    # Map from important NFA states of a subset -> DFA state ID.
    subset_ids: dict[frozenset[int], int] = {}
    states: dict[int, State] = {}
    dfa = Automaton(states=states, start=0)
    worklist: deque[tuple[int, frozenset[int]]] = deque()

    def discover(closure: frozenset[int]) -> int:
        key = _important(nfa, closure)
        state_id = subset_ids.get(key)
        if state_id is not None:
            return state_id
        if max_states is not None and len(states) >= max_states:
            raise StateLimitError(max_states)
        state = State(ids.allocate())
        states[state.id] = state
        subset_ids[key] = state.id
        if not closure.isdisjoint(nfa.finals):
            dfa.finals.add(state.id)
        worklist.append((state.id, key))
        return state.id

    dfa.start = discover(epsilon_closure(nfa, [nfa.start]))

    while worklist:
        current_id, current = worklist.popleft()
        for symbol in _symbols(nfa, current):
            target = epsilon_closure(nfa, move(nfa, current, symbol))
            states[current_id].add_move(symbol, discover(target))

    logger.debug(
        "determinized %d NFA states into %d DFA states (%d final)",
        len(nfa.states),
        len(states),
        len(dfa.finals),
    )
    return dfa


def nfa_to_dfa(nfa: Automaton, *, max_states: int | None = None) -> Automaton:
    """Alias of :func:`determinize` for the NFA-to-DFA pipeline stage."""
    return determinize(nfa, max_states=max_states)
