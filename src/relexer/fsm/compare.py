"""Structural comparison of automata."""

from __future__ import annotations

from collections import Counter, deque

from relexer.fsm.automaton import Automaton


def same_structure(a: Automaton, b: Automaton) -> bool:
    """Check that two automata are identical, ids included.

    Compares the start id, the final ids, the set of reachable ids and, for
    each reachable state, the multiset of ``(label, target_id)`` pairs.
    Transition order does not matter.
    """
    if a is b:
        return True
    if a.start != b.start or a.finals != b.finals:
        return False
    reachable = set(a.reachable())
    if reachable != set(b.reachable()):
        return False
    return all(
        Counter(a.states[s].transitions) == Counter(b.states[s].transitions) for s in reachable
    )


def is_isomorphic(a: Automaton, b: Automaton) -> bool:
    """Check that two DFAs have the same shape up to state renumbering.

    Walks both automata in lock step from their start states, building a
    bijection between ids.  Only reachable states take part.

    Raises:
        ValueError: If either automaton is not deterministic.
    """
    for fsm in (a, b):
        if not fsm.is_deterministic():
            raise ValueError(f"is_isomorphic requires deterministic automata, got {fsm}")

    forward: dict[int, int] = {a.start: b.start}
    backward: dict[int, int] = {b.start: a.start}
    queue = deque([(a.start, b.start)])
    while queue:
        sa, sb = queue.popleft()
        if (sa in a.finals) != (sb in b.finals):
            return False
        moves_a = dict(a.states[sa].transitions)
        moves_b = dict(b.states[sb].transitions)
        if moves_a.keys() != moves_b.keys():
            return False
        for label, ta in moves_a.items():
            tb = moves_b[label]
            if ta in forward or tb in backward:
                if forward.get(ta) != tb or backward.get(tb) != ta:
                    return False
                continue
            forward[ta] = tb
            backward[tb] = ta
            queue.append((ta, tb))
    return True
