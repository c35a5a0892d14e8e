"""Language-level properties checked against Python's ``re`` on every short string."""

from __future__ import annotations

import itertools
import re

import pytest

from relexer.fsm.automaton import Automaton
from relexer.fsm.compare import is_isomorphic
from relexer.fsm.determinize import determinize
from relexer.fsm.minimize import minimize
from relexer.fsm.reverse import reverse
from relexer.fsm.simulate import accepts
from relexer.fsm.thompson import build_nfa

# (postfix, equivalent infix for ``re``, alphabet, max string length)
_CASES = [
    ("ab|*a.b.b.", "(a|b)*abb", "ab", 7),
    ("a*", "a*", "ab", 5),
    ("a+", "a+", "ab", 5),
    ("ab.c.*de.f.g.*.", "(abc)*(defg)*", "abcdefg", 4),
    ("a+ab*.|b.", "(a+|ab*)b", "ab", 6),
    ("b+ab+.a.c*|+.b.", "b+(ab+a|c*)+b", "abc", 5),
    ("abb.+.a.", "a(bb)+a", "ab", 7),
    ("0101*.00.*.0.*.1.*|*", "(0|(1(01*(00)*0)*1)*)*", "01", 8),
    ("ab*.a.ba*.b.|+", "(ab*a|ba*b)+", "ab", 6),
]

_IDS = [case[1] for case in _CASES]


def _strings(alphabet: str, max_len: int) -> list[str]:
    return [
        "".join(p) for n in range(max_len + 1) for p in itertools.product(alphabet, repeat=n)
    ]


def _check_language(dfa: Automaton, infix: str, alphabet: str, max_len: int) -> None:
    pattern = re.compile(infix)
    for text in _strings(alphabet, max_len):
        assert accepts(dfa, text) == (pattern.fullmatch(text) is not None), text


@pytest.mark.parametrize("postfix,infix,alphabet,max_len", _CASES, ids=_IDS)
class TestLanguage:
    def test_determinized(self, postfix: str, infix: str, alphabet: str, max_len: int) -> None:
        _check_language(determinize(build_nfa(postfix)), infix, alphabet, max_len)

    def test_minimized(self, postfix: str, infix: str, alphabet: str, max_len: int) -> None:
        dfa = determinize(build_nfa(postfix))
        minimal = minimize(dfa)
        for text in _strings(alphabet, max_len):
            assert accepts(minimal, text) == accepts(dfa, text), text
        _check_language(minimal, infix, alphabet, max_len)

    def test_minimize_nfa_directly(
        self, postfix: str, infix: str, alphabet: str, max_len: int
    ) -> None:
        _check_language(minimize(build_nfa(postfix)), infix, alphabet, max_len)

    def test_double_reverse(self, postfix: str, infix: str, alphabet: str, max_len: int) -> None:
        dfa = determinize(build_nfa(postfix))
        _check_language(determinize(reverse(reverse(dfa))), infix, alphabet, max_len)

    def test_reverse_language(self, postfix: str, infix: str, alphabet: str, max_len: int) -> None:
        backward = determinize(reverse(determinize(build_nfa(postfix))))
        pattern = re.compile(infix)
        for text in _strings(alphabet, max_len):
            assert accepts(backward, text) == (pattern.fullmatch(text[::-1]) is not None), text


@pytest.mark.parametrize("postfix,infix,alphabet,max_len", _CASES, ids=_IDS)
class TestStructure:
    def test_determinism(self, postfix: str, infix: str, alphabet: str, max_len: int) -> None:
        dfa = determinize(build_nfa(postfix))
        assert dfa.is_deterministic()
        assert minimize(dfa).is_deterministic()

    def test_idempotent(self, postfix: str, infix: str, alphabet: str, max_len: int) -> None:
        once = minimize(determinize(build_nfa(postfix)))
        assert is_isomorphic(minimize(once), once)

    def test_minimal_from_nfa_and_dfa_agree(
        self, postfix: str, infix: str, alphabet: str, max_len: int
    ) -> None:
        nfa = build_nfa(postfix)
        assert is_isomorphic(minimize(nfa), minimize(determinize(nfa)))
