"""Stepwise Knuth-Morris-Pratt and Boyer-Moore string search.

Re-exports the public types for convenient access:
    from stepsearch import KMP, BoyerMoore, SearchSession, State
"""
from stepsearch.algorithms import (
    ALGORITHMS,
    BoyerMoore,
    KMP,
    MatchInfo,
    SearchAlgorithm,
    State,
    UnknownAlgorithm,
    create,
)
from stepsearch.session import Field, SearchSession

__all__ = [
    "ALGORITHMS",
    "BoyerMoore",
    "Field",
    "KMP",
    "MatchInfo",
    "SearchAlgorithm",
    "SearchSession",
    "State",
    "UnknownAlgorithm",
    "create",
]
