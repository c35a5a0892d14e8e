"""States, automata, and the per-call id allocator.

Automata are stored as an arena: a dict of states keyed by integer id, with
every transition pointing at a target *id* rather than a state object.  This
keeps cyclic graphs (from ``*`` and ``+``) as plain data and lets a stage read
another stage's states by id without ever holding a mutable reference into
them.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field

# Label of a transition that consumes no input.
EPSILON = "ε"

# Characters consumed by the infix-to-postfix step; never literal symbols.
RESERVED_CHARS = frozenset(".|*+()")

# Printable ASCII (space through tilde) minus the reserved characters.
ALPHABET = frozenset(chr(i) for i in range(32, 127)) - RESERVED_CHARS


# ---------------------------------------------------------------------------
# Id allocation
# ---------------------------------------------------------------------------


class IdAllocator:
    """Sequential state-id source for a single construction call.

    Args:
        start: First id to hand out.
    """

    def __init__(self, start: int = 0) -> None:
        self._next = start

    def allocate(self) -> int:
        """Return the next unused id."""
        state_id = self._next
        self._next += 1
        return state_id

    @property
    def allocated(self) -> int:
        """Number of ids handed out so far (when started from 0)."""
        return self._next


# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------


@dataclass
class State:
    """A node with an ordered multiset of labeled outgoing edges.

    Attributes:
        id: Identifier, unique within the automaton that owns the state.
        transitions: ``(label, target_id)`` pairs in insertion order.  The
            label is an alphabet symbol or ``EPSILON``.
    """

    id: int
    transitions: list[tuple[str, int]] = field(default_factory=list)

    def add_move(self, label: str, target: int) -> None:
        self.transitions.append((label, target))

    def add_moves(self, moves: Iterable[tuple[str, int]]) -> None:
        self.transitions.extend(moves)

    def labels(self) -> list[str]:
        """Distinct non-epsilon labels in first-appearance order."""
        seen: dict[str, None] = {}
        for label, _target in self.transitions:
            if label != EPSILON:
                seen.setdefault(label, None)
        return list(seen)

    def targets(self, label: str) -> list[int]:
        """All target ids reachable by one edge labeled ``label``."""
        return [target for lbl, target in self.transitions if lbl == label]

    def move(self, label: str) -> int | None:
        """Target of the first edge labeled ``label``, or None."""
        for lbl, target in self.transitions:
            if lbl == label:
                return target
        return None

    def __str__(self) -> str:
        return f"s{self.id}"


# ---------------------------------------------------------------------------
# Automaton
# ---------------------------------------------------------------------------


@dataclass
class Automaton:
    """A start state plus a set of final states over an id-indexed arena.

    NFAs may carry epsilon edges and repeated labels; a DFA is an automaton
    with neither.  The arena may hold states not reachable from ``start``
    (a reversed automaton keeps copies of states that cannot reach a final
    state of the original), so graph-level queries go through
    :meth:`reachable`.

    Attributes:
        states: Arena of states keyed by id.
        start: Id of the start state.
        finals: Ids of the accepting states.
    """

    states: dict[int, State]
    start: int
    finals: set[int] = field(default_factory=set)

    def state(self, state_id: int) -> State:
        return self.states[state_id]

    def is_final(self, state_id: int) -> bool:
        return state_id in self.finals

    def reachable(self) -> list[int]:
        """Ids reachable from the start state, in breadth-first order."""
        order = [self.start]
        visited = {self.start}
        queue = deque([self.start])
        while queue:
            current = queue.popleft()
            for _label, target in self.states[current].transitions:
                if target not in visited:
                    visited.add(target)
                    order.append(target)
                    queue.append(target)
        return order

    def alphabet(self) -> list[str]:
        """Sorted non-epsilon labels used by reachable states."""
        symbols: set[str] = set()
        for state_id in self.reachable():
            symbols.update(self.states[state_id].labels())
        return sorted(symbols)

    def is_deterministic(self) -> bool:
        """True if no reachable state has an epsilon edge or a repeated label."""
        for state_id in self.reachable():
            labels = [label for label, _target in self.states[state_id].transitions]
            if EPSILON in labels or len(labels) != len(set(labels)):
                return False
        return True

    def transition_count(self) -> int:
        return sum(len(self.states[s].transitions) for s in self.reachable())

    def __len__(self) -> int:
        return len(self.reachable())

    def __str__(self) -> str:
        finals = ", ".join(f"s{f}" for f in sorted(self.finals))
        return f"s{self.start} -> {{{finals}}}"
