"""Knuth-Morris-Pratt search, one comparison per step.

KMP (1977) never re-reads a text character it has already matched.
Before searching it compares the pattern against itself to build a
failure table: for each pattern position, how much of the match so far
can be kept when the next comparison fails.

    table[0] == -1       nothing to keep, move past this text char
    table[p] == q >= 0   keep q chars, resume comparing at pattern[q]

The table built here is the "strong" variant: when pattern[p] equals
the character we would fall back to, the entry is copied from that
earlier position instead, because the fallback comparison is known to
fail too. It has one extra slot, table[len(pattern)], describing where
to resume after a full match.

The engine keeps two cursors:

    k   start of the current alignment in the text
    i   number of pattern characters matched at that alignment

so every comparison is pattern[i] against text[k + i].
"""

from __future__ import annotations

import logging

from stepsearch.algorithms.base import (
    NO_COMPARISON,
    Annotation,
    MatchInfo,
    SearchAlgorithm,
    State,
)

log = logging.getLogger(__name__)


def build_failure_table(pattern: str) -> list[int]:
    """Compute the KMP failure table for `pattern`.

    The result has len(pattern) + 1 entries. Patterns of length 0 and 1
    stop right after table[0] = -1, so "x" yields [-1, 0].
    """
    table = [0] * (len(pattern) + 1)
    table[0] = -1
    if len(pattern) <= 1:
        return table

    cnd = 0  # index in pattern of the next char of the current candidate
    pos = 1  # position being computed
    while pos < len(pattern):
        if pattern[pos] == pattern[cnd]:
            table[pos] = table[cnd]
        else:
            table[pos] = cnd
            while cnd >= 0 and pattern[pos] != pattern[cnd]:
                cnd = table[cnd]
        pos += 1
        cnd += 1
    table[pos] = cnd
    return table


class KMP(SearchAlgorithm):
    """Stepwise Knuth-Morris-Pratt matcher.

    Usage:
        kmp = KMP()
        kmp.set_text("abcabd")
        kmp.set_pattern("abd")
        while kmp.ready():
            info = kmp.step()
        kmp.state()           # State.MATCH_FOUND
        kmp.pattern_offset()  # 3
    """

    title = "Knuth-Morris-Pratt"

    def __init__(self, text: str = "", pattern: str = "") -> None:
        self._text = text
        self._pattern = pattern
        self._table = build_failure_table(pattern)
        self._k = 0
        self._i = 0
        self._last_match = NO_COMPARISON

    @property
    def text(self) -> str:
        return self._text

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def last_match(self) -> MatchInfo:
        return self._last_match

    @property
    def failure_table(self) -> tuple[int, ...]:
        """Read-only copy of the failure table, sentinel slot included."""
        return tuple(self._table)

    def state(self) -> State:
        text, pattern = self._text, self._pattern
        if (
            not text
            or not pattern
            or len(pattern) > len(text)
            or self._k + len(pattern) > len(text)
        ):
            return State.NO_MATCH
        # Re-checks the last compared pair even though i == len(pattern)
        # can only be reached through a match.
        i = self._i
        if i == len(pattern) and pattern[i - 1] == text[self._k + i - 1]:
            return State.MATCH_FOUND
        return State.IN_PROGRESS

    def set_text(self, s: str) -> None:
        self._text = s
        self._restart()

    def set_pattern(self, s: str) -> None:
        self._pattern = s
        self._table = build_failure_table(s)
        log.debug("failure table for %r: %s", s, self._table)
        self._restart()

    def pattern_offset(self) -> int:
        return self._k

    def step(self) -> MatchInfo:
        if self.state().is_terminal():
            return self._last_match

        k, i = self._k, self._i
        if self._pattern[i] == self._text[k + i]:
            match = MatchInfo(k + i, i, True)
            self._i = i + 1
        else:
            match = MatchInfo(k + i, i, False)
            fallback = self._table[i]
            if fallback == -1:
                # nothing reusable: restart just past the failed char
                self._k = k + i + 1
                self._i = 0
            else:
                self._k = k + i - fallback
                self._i = fallback

        self._last_match = match
        state = self.state()
        if state.is_terminal():
            log.debug("KMP finished with %s at offset %d", state.name, self._k)
        return match

    def pattern_annotations(self) -> list[Annotation]:
        """Each pattern char paired with its failure table entry."""
        return [(c, self._table[p]) for p, c in enumerate(self._pattern)]

    def _restart(self) -> None:
        self._k = 0
        self._i = 0
        self._last_match = NO_COMPARISON
