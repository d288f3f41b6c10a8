"""Both engines agree with a brute-force scan and always terminate."""

import random

import pytest

from stepsearch.algorithms import BoyerMoore, KMP
from stepsearch.algorithms.base import State

from tests.conftest import SEED, all_strings, drive, make_engine, naive_find

# KMP advances k + i or k on every step; Boyer-Moore stays near 3n.
STEP_BOUND = {
    KMP: lambda n, m: 2 * n,
    BoyerMoore: lambda n, m: 4 * n + m,
}


def _check(engine_cls, text: str, pattern: str) -> None:
    engine = make_engine(engine_cls, text, pattern)
    bound = STEP_BOUND[engine_cls](len(text), len(pattern))
    steps = drive(engine, limit=bound + 1)
    assert len(steps) <= bound, (text, pattern, len(steps))

    expected = naive_find(text, pattern)
    if expected == -1:
        assert engine.state() is State.NO_MATCH, (text, pattern)
    else:
        assert engine.state() is State.MATCH_FOUND, (text, pattern)
        assert engine.pattern_offset() == expected, (text, pattern)


class TestExhaustive:
    """Every small text/pattern pair over tiny alphabets."""

    def test_binary_alphabet(self, engine_cls):
        patterns = all_strings("ab", 4, min_length=1)
        for text in all_strings("ab", 7):
            for pattern in patterns:
                _check(engine_cls, text, pattern)

    def test_ternary_alphabet(self, engine_cls):
        patterns = all_strings("abc", 3, min_length=1)
        for text in all_strings("abc", 5):
            for pattern in patterns:
                _check(engine_cls, text, pattern)


class TestRandomized:
    """Longer seeded random inputs, including planted occurrences."""

    @pytest.mark.parametrize("alphabet", ["ab", "abc", "ACGT"])
    def test_random_pairs(self, engine_cls, alphabet):
        rng = random.Random(SEED)
        for _ in range(300):
            text = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 40)))
            pattern = "".join(rng.choice(alphabet) for _ in range(rng.randint(1, 8)))
            _check(engine_cls, text, pattern)

    def test_planted_pattern(self, engine_cls):
        rng = random.Random(SEED)
        for _ in range(200):
            pattern = "".join(rng.choice("ab") for _ in range(rng.randint(1, 6)))
            left = "".join(rng.choice("abc") for _ in range(rng.randint(0, 20)))
            right = "".join(rng.choice("abc") for _ in range(rng.randint(0, 20)))
            text = left + pattern + right
            _check(engine_cls, text, pattern)
            engine = make_engine(engine_cls, text, pattern)
            drive(engine)
            assert engine.state() is State.MATCH_FOUND

    @pytest.mark.parametrize(
        "text,pattern",
        [
            ("a" * 50, "a" * 10),
            ("a" * 50, "b" + "a" * 9),
            ("a" * 50, "a" * 9 + "b"),
            ("ab" * 25, "abab" + "b"),
            ("abc" * 20 + "abd", "abcabd"),
        ],
    )
    def test_periodic_inputs(self, engine_cls, text, pattern):
        _check(engine_cls, text, pattern)


class TestEnginesAgree:

    def test_same_match_start(self):
        rng = random.Random(SEED + 1)
        for _ in range(200):
            text = "".join(rng.choice("xyz") for _ in range(rng.randint(5, 30)))
            pattern = text[rng.randint(0, 3):][: rng.randint(1, 4)]
            kmp = make_engine(KMP, text, pattern)
            bm = make_engine(BoyerMoore, text, pattern)
            drive(kmp)
            drive(bm)
            assert kmp.state() is bm.state() is State.MATCH_FOUND
            assert kmp.pattern_offset() == bm.pattern_offset() == text.find(pattern)
