"""Shared helpers and fixtures for the stepsearch tests."""

from __future__ import annotations

import itertools

import pytest

from stepsearch.algorithms import BoyerMoore, KMP, MatchInfo, SearchAlgorithm

SEED = 42

ENGINES = [KMP, BoyerMoore]


def naive_find(text: str, pattern: str) -> int:
    """Brute-force forward scan: first index where pattern occurs, or -1."""
    for start in range(len(text) - len(pattern) + 1):
        if all(text[start + p] == pattern[p] for p in range(len(pattern))):
            return start
    return -1


def make_engine(cls: type[SearchAlgorithm], text: str, pattern: str) -> SearchAlgorithm:
    engine = cls()
    engine.set_text(text)
    engine.set_pattern(pattern)
    return engine


def drive(engine: SearchAlgorithm, limit: int = 10_000) -> list[MatchInfo]:
    """Step until the engine is no longer ready, failing after `limit` steps."""
    steps: list[MatchInfo] = []
    while engine.ready():
        if len(steps) >= limit:
            pytest.fail(f"engine still running after {limit} steps")
        steps.append(engine.step())
    return steps


def snapshot(engine: SearchAlgorithm) -> tuple:
    """Everything a driver can observe about an engine."""
    tables: tuple = ()
    if isinstance(engine, KMP):
        tables = (engine.failure_table,)
    elif isinstance(engine, BoyerMoore):
        tables = (dict(engine.bad_char_table), engine.good_suffix_table)
    return (
        engine.text,
        engine.pattern,
        engine.state(),
        engine.ready(),
        engine.pattern_offset(),
        engine.last_match,
        tables,
    )


def all_strings(alphabet: str, max_length: int, min_length: int = 0) -> list[str]:
    """Every string over `alphabet` with length in [min_length, max_length]."""
    out: list[str] = []
    for n in range(min_length, max_length + 1):
        out.extend("".join(chars) for chars in itertools.product(alphabet, repeat=n))
    return out


@pytest.fixture(params=ENGINES, ids=lambda cls: cls.__name__)
def engine_cls(request: pytest.FixtureRequest) -> type[SearchAlgorithm]:
    return request.param
