"""relexer: postfix regular expressions to minimal DFAs."""

from relexer.config import FsmConfig
from relexer.errors import ConstructionError, FsmError, StateLimitError
from relexer.fsm import Automaton, State, accepts, build_nfa, determinize, minimize, reverse
from relexer.log import get_logger, setup_logging
from relexer.pipeline import compile_postfix, matches

__all__ = [
    "Automaton",
    "ConstructionError",
    "FsmConfig",
    "FsmError",
    "State",
    "StateLimitError",
    "accepts",
    "build_nfa",
    "compile_postfix",
    "determinize",
    "get_logger",
    "matches",
    "minimize",
    "reverse",
    "setup_logging",
]
