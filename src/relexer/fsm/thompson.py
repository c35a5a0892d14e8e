"""Postfix regex to NFA compiler (Thompson construction).

The input is a regular expression already rewritten in postfix form, so
construction is a single left-to-right scan over a stack of fragments:

- symbol ``c``: push ``start --c--> final``
- ``.``: concatenate the top two fragments
- ``|``: alternate the top two fragments
- ``*``: zero or more of the top fragment
- ``+``: one or more of the top fragment
"""

from __future__ import annotations

from dataclasses import dataclass

from relexer.errors import ConstructionError
from relexer.fsm.automaton import ALPHABET, EPSILON, Automaton, IdAllocator, State
from relexer.log import get_logger

logger = get_logger(__name__)

CONCAT = "."
ALTERNATE = "|"
ZERO_OR_MORE = "*"
ONE_OR_MORE = "+"


@dataclass
class _Fragment:
    """A partially built automaton: one start and one or more finals."""

    start: int
    finals: list[int]

    def __str__(self) -> str:
        return f"s{self.start} -> {{{', '.join(f's{f}' for f in self.finals)}}}"


class _ThompsonBuilder:
    """Holds the arena and id allocator for one :func:`build_nfa` call."""

    def __init__(self, postfix: str) -> None:
        self.postfix = postfix
        self.ids = IdAllocator()
        self.states: dict[int, State] = {}
        self.stack: list[_Fragment] = []

    def new_state(self) -> State:
        state = State(self.ids.allocate())
        self.states[state.id] = state
        return state

    def pop(self, op: str, pos: int) -> _Fragment:
        if not self.stack:
            raise ConstructionError(
                f"Operator {op!r} at position {pos} has too few operands in {self.postfix!r}",
                position=pos,
            )
        return self.stack.pop()

    def build(self) -> Automaton:
        for pos, ch in enumerate(self.postfix):
            if ch == CONCAT:
                f2 = self.pop(ch, pos)
                f1 = self.pop(ch, pos)
                fragment = self._concat(f1, f2)
            elif ch == ALTERNATE:
                f2 = self.pop(ch, pos)
                f1 = self.pop(ch, pos)
                fragment = self._alternate(f1, f2)
            elif ch == ZERO_OR_MORE:
                fragment = self._star(self.pop(ch, pos))
            elif ch == ONE_OR_MORE:
                fragment = self._plus(self.pop(ch, pos))
            elif ch in ALPHABET:
                fragment = self._symbol(ch)
            else:
                raise ConstructionError(
                    f"Unexpected character {ch!r} at position {pos} in {self.postfix!r}",
                    position=pos,
                )
            logger.debug("step %d (%r): %s", pos + 1, ch, fragment)
            self.stack.append(fragment)

        if not self.stack:
            raise ConstructionError("Empty postfix expression")
        if len(self.stack) > 1:
            raise ConstructionError(
                f"{len(self.stack)} fragments left on the stack after {self.postfix!r}; "
                f"missing {len(self.stack) - 1} binary operator(s)"
            )

        result = self.stack.pop()
        nfa = Automaton(states=self.states, start=result.start, finals=set(result.finals))
        # Concatenation orphans the right operand's start state.
        nfa.states = {state_id: self.states[state_id] for state_id in sorted(nfa.reachable())}
        return nfa

    def _symbol(self, ch: str) -> _Fragment:
        start = self.new_state()
        final = self.new_state()
        start.add_move(ch, final.id)
        return _Fragment(start.id, [final.id])

    def _concat(self, f1: _Fragment, f2: _Fragment) -> _Fragment:
        # f2.start never has incoming edges, so copying its moves is safe.
        moves = list(self.states[f2.start].transitions)
        for final in f1.finals:
            self.states[final].add_moves(moves)
        return _Fragment(f1.start, list(f2.finals))

    def _alternate(self, f1: _Fragment, f2: _Fragment) -> _Fragment:
        start = self.new_state()
        start.add_move(EPSILON, f1.start)
        start.add_move(EPSILON, f2.start)
        final = self.new_state()
        for f in (*f1.finals, *f2.finals):
            self.states[f].add_move(EPSILON, final.id)
        return _Fragment(start.id, [final.id])

    def _star(self, inner: _Fragment) -> _Fragment:
        start = self.new_state()
        final = self.new_state()
        start.add_move(EPSILON, inner.start)
        start.add_move(EPSILON, final.id)
        self._loop(inner, final.id)
        return _Fragment(start.id, [final.id])

    def _plus(self, inner: _Fragment) -> _Fragment:
        start = self.new_state()
        final = self.new_state()
        start.add_move(EPSILON, inner.start)
        self._loop(inner, final.id)
        return _Fragment(start.id, [final.id])

    def _loop(self, inner: _Fragment, final: int) -> None:
        for f in inner.finals:
            self.states[f].add_move(EPSILON, inner.start)
            self.states[f].add_move(EPSILON, final)


def build_nfa(postfix: str) -> Automaton:
    """Build a Thompson NFA from a postfix regular expression.

    State ids are allocated from 0 for every call, so identical input always
    yields an identical automaton.

    Args:
        postfix: Expression over alphabet symbols and the operators
            ``. | * +``.

    Returns:
        An NFA whose arena holds exactly the states reachable from its start.

    Raises:
        ConstructionError: If the expression is malformed.
    """
    return _ThompsonBuilder(postfix).build()
