"""Postfix regex to minimal DFA, end to end."""

from __future__ import annotations

from relexer.config import FsmConfig
from relexer.fsm.automaton import Automaton
from relexer.fsm.determinize import nfa_to_dfa
from relexer.fsm.minimize import minimize
from relexer.fsm.simulate import accepts
from relexer.fsm.thompson import build_nfa
from relexer.log import get_logger

logger = get_logger(__name__)


def compile_postfix(postfix: str, config: FsmConfig | None = None) -> Automaton:
    """Compile a postfix regular expression into a DFA.

    Args:
        postfix: Expression over alphabet symbols and the operators ``. | * +``.
        config: Pipeline options; defaults to ``FsmConfig()``.

    Returns:
        A DFA, minimal unless ``config.minimize`` is False.

    Raises:
        ConstructionError: If the expression is malformed.
        StateLimitError: If a determinization pass exceeds
            ``config.max_dfa_states``.
    """
    if config is None:
        config = FsmConfig()

    nfa = build_nfa(postfix)
    dfa = nfa_to_dfa(nfa, max_states=config.max_dfa_states)
    logger.debug("%r: NFA %d states, DFA %d states", postfix, len(nfa), len(dfa))
    if not config.minimize:
        return dfa

    minimal = minimize(dfa, max_states=config.max_dfa_states)
    logger.debug("%r: minimal DFA %d states", postfix, len(minimal))
    return minimal


def matches(postfix: str, text: str, config: FsmConfig | None = None) -> bool:
    """Compile ``postfix`` and check whether it accepts ``text``."""
    return accepts(compile_postfix(postfix, config), text)
