"""Stepwise string search engines and the registry that names them.

Drivers pick an engine by name:

    from stepsearch.algorithms import create
    engine = create("boyer-moore")
"""

from stepsearch.algorithms.base import MatchInfo, NO_COMPARISON, SearchAlgorithm, State
from stepsearch.algorithms.boyer_moore import (
    BoyerMoore,
    bad_char_shift,
    build_bad_char_table,
    build_good_suffix_table,
)
from stepsearch.algorithms.kmp import KMP, build_failure_table


class UnknownAlgorithm(ValueError):
    """Raised when an algorithm name is not in the registry."""


ALGORITHMS: dict[str, type[SearchAlgorithm]] = {
    "kmp": KMP,
    "boyer-moore": BoyerMoore,
}

_ALIASES = {
    "knuth-morris-pratt": "kmp",
    "bm": "boyer-moore",
    "boyer_moore": "boyer-moore",
}


def resolve(name: str) -> str:
    """Return the canonical registry name for `name` or an alias of it."""
    key = name.strip().lower()
    key = _ALIASES.get(key, key)
    if key not in ALGORITHMS:
        raise UnknownAlgorithm(
            f"unknown algorithm '{name}', expected one of {', '.join(ALGORITHMS)}"
        )
    return key


def create(name: str) -> SearchAlgorithm:
    """Instantiate a fresh engine by name."""
    return ALGORITHMS[resolve(name)]()


__all__ = [
    "ALGORITHMS",
    "BoyerMoore",
    "KMP",
    "MatchInfo",
    "NO_COMPARISON",
    "SearchAlgorithm",
    "State",
    "UnknownAlgorithm",
    "bad_char_shift",
    "build_bad_char_table",
    "build_failure_table",
    "build_good_suffix_table",
    "create",
    "resolve",
]
