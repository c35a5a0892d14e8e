"""Finite automata: Thompson construction, subset construction, reversal, minimization."""

from relexer.fsm.automaton import ALPHABET, EPSILON, Automaton, IdAllocator, State
from relexer.fsm.compare import is_isomorphic, same_structure
from relexer.fsm.determinize import determinize, epsilon_closure, move, nfa_to_dfa
from relexer.fsm.minimize import minimize
from relexer.fsm.reverse import reverse
from relexer.fsm.simulate import accepts, walk
from relexer.fsm.thompson import build_nfa

__all__ = [
    "ALPHABET",
    "EPSILON",
    "Automaton",
    "IdAllocator",
    "State",
    "accepts",
    "build_nfa",
    "determinize",
    "epsilon_closure",
    "is_isomorphic",
    "minimize",
    "move",
    "nfa_to_dfa",
    "reverse",
    "same_structure",
    "walk",
]
