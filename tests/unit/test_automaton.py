"""Unit tests for State, Automaton, and IdAllocator."""

from __future__ import annotations

from relexer.fsm.automaton import ALPHABET, EPSILON, Automaton, IdAllocator, State


def _chain() -> Automaton:
    """0 --a--> 1 --b--> 2, plus an unreachable state 3."""
    states = {i: State(i) for i in range(4)}
    states[0].add_move("a", 1)
    states[1].add_move("b", 2)
    states[3].add_move("c", 0)
    return Automaton(states=states, start=0, finals={2})


class TestIdAllocator:
    def test_sequential_from_zero(self) -> None:
        ids = IdAllocator()
        assert [ids.allocate() for _ in range(3)] == [0, 1, 2]
        assert ids.allocated == 3

    def test_custom_start(self) -> None:
        assert IdAllocator(7).allocate() == 7

    def test_independent_allocators(self) -> None:
        first = IdAllocator()
        first.allocate()
        assert IdAllocator().allocate() == 0


class TestState:
    def test_moves_keep_order_and_duplicates(self) -> None:
        s = State(0)
        s.add_move("a", 1)
        s.add_move("a", 2)
        s.add_moves([(EPSILON, 3), ("b", 1)])
        assert s.transitions == [("a", 1), ("a", 2), (EPSILON, 3), ("b", 1)]

    def test_labels_skip_epsilon(self) -> None:
        s = State(0, [("b", 1), (EPSILON, 2), ("a", 1), ("b", 3)])
        assert s.labels() == ["b", "a"]

    def test_targets_and_move(self) -> None:
        s = State(0, [("a", 1), ("b", 2), ("a", 3)])
        assert s.targets("a") == [1, 3]
        assert s.move("a") == 1
        assert s.move("c") is None

    def test_str(self) -> None:
        assert str(State(4)) == "s4"


class TestAutomaton:
    def test_reachable_excludes_orphans(self) -> None:
        assert _chain().reachable() == [0, 1, 2]
        assert len(_chain()) == 3

    def test_reachable_handles_cycles(self) -> None:
        states = {0: State(0, [("a", 1)]), 1: State(1, [("b", 0), ("a", 1)])}
        fsm = Automaton(states=states, start=0, finals={1})
        assert fsm.reachable() == [0, 1]

    def test_alphabet_ignores_unreachable(self) -> None:
        assert _chain().alphabet() == ["a", "b"]

    def test_is_deterministic(self) -> None:
        assert _chain().is_deterministic()

    def test_epsilon_is_not_deterministic(self) -> None:
        fsm = Automaton(states={0: State(0, [(EPSILON, 1)]), 1: State(1)}, start=0, finals={1})
        assert not fsm.is_deterministic()

    def test_repeated_label_is_not_deterministic(self) -> None:
        states = {0: State(0, [("a", 1), ("a", 2)]), 1: State(1), 2: State(2)}
        fsm = Automaton(states=states, start=0, finals={1})
        assert not fsm.is_deterministic()

    def test_state_lookup(self) -> None:
        fsm = _chain()
        assert fsm.state(1).transitions == [("b", 2)]
        assert fsm.is_final(2)
        assert not fsm.is_final(0)

    def test_transition_count(self) -> None:
        assert _chain().transition_count() == 2

    def test_str(self) -> None:
        fsm = Automaton(states={0: State(0), 3: State(3), 1: State(1)}, start=0, finals={3, 1})
        assert str(fsm) == "s0 -> {s1, s3}"


class TestAlphabet:
    def test_excludes_operators_and_epsilon(self) -> None:
        for ch in ".|*+()":
            assert ch not in ALPHABET
        assert EPSILON not in ALPHABET

    def test_includes_printable_symbols(self) -> None:
        for ch in "az09 _-?[]{}~":
            assert ch in ALPHABET
