"""Boyer-Moore search, one comparison per step.

Boyer-Moore (1977) lines the pattern up against the text and compares
right to left. On a mismatch it shifts the pattern right by the larger
of two precomputed distances:

    Bad-character rule: slide until the mismatched text char lines up
    with its rightmost occurrence in the pattern. A char that never
    occurs in the pattern lets us jump the whole pattern length.

    Good-suffix rule: the chars matched so far form a suffix of the
    pattern. Slide until that suffix lines up with another occurrence
    of it in the pattern, or, failing that, with the longest prefix of
    the pattern that is also a suffix of it.

Both tables are expressed as jumps of the *text cursor* i, not of the
alignment start. After a mismatch i moves forward by the jump and the
pattern cursor j goes back to the last pattern char, so the next
comparison is the rightmost char of the new alignment.

The good-suffix table is built in two passes and the order matters:
the second pass (recurring suffixes) overwrites the first (prefixes),
and its shifts are never larger.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from stepsearch.algorithms.base import (
    NO_COMPARISON,
    Annotation,
    MatchInfo,
    SearchAlgorithm,
    State,
)

log = logging.getLogger(__name__)


def build_bad_char_table(pattern: str) -> dict[str, int]:
    """Map each pattern char to the text-cursor jump for the bad-character rule.

    Later occurrences overwrite earlier ones, so every value comes from
    the rightmost occurrence. The last char gets 1 rather than 0.
    Absent chars are not stored; see bad_char_shift().
    """
    m = len(pattern)
    table: dict[str, int] = {}
    for p, c in enumerate(pattern):
        table[c] = max(1, m - p - 1)
    return table


def bad_char_shift(table: Mapping[str, int], c: str, pattern_length: int) -> int:
    """Look up `c`, defaulting to a full pattern-length jump."""
    return table.get(c, pattern_length)


def build_good_suffix_table(pattern: str) -> list[int]:
    """Text-cursor jumps indexed by how many chars matched before the mismatch."""
    m = len(pattern)
    table = [0] * m

    # Prefix pass: widest matched suffix that is also a prefix.
    last = m
    for p in range(m, 0, -1):
        if _is_prefix(pattern, p):
            last = p
        table[m - p] = last - p + m

    # Suffix pass: matched suffix recurring elsewhere. Overwrites the above.
    for p in range(m - 1):
        length = _suffix_length(pattern, p)
        table[length] = m - 1 - p + length

    return table


def _is_prefix(pattern: str, p: int) -> bool:
    """Whether pattern[p:] is also a prefix of pattern."""
    j = 0
    for i in range(p, len(pattern)):
        if pattern[i] != pattern[j]:
            return False
        j += 1
    return True


def _suffix_length(pattern: str, p: int) -> int:
    """Length of the longest suffix of pattern that ends at position p."""
    length = 0
    i, j = p, len(pattern) - 1
    while i >= 0 and pattern[i] == pattern[j]:
        length += 1
        i -= 1
        j -= 1
    return length


class BoyerMoore(SearchAlgorithm):
    """Stepwise Boyer-Moore matcher.

    Usage:
        bm = BoyerMoore()
        bm.set_text("HERE IS A SIMPLE EXAMPLE")
        bm.set_pattern("EXAMPLE")
        while bm.ready():
            bm.step()
        bm.state()           # State.MATCH_FOUND
        bm.pattern_offset()  # 17

    Match detection looks at the previous comparison: the search is
    over once the comparison at pattern index 0 succeeded.
    """

    title = "Boyer-Moore"

    def __init__(self, text: str = "", pattern: str = "") -> None:
        self._text = text
        self._pattern = pattern
        self._bad_char = build_bad_char_table(pattern)
        self._good_suffix = build_good_suffix_table(pattern)
        self._i = len(pattern) - 1  # text cursor
        self._j = len(pattern) - 1  # pattern cursor
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
    def bad_char_table(self) -> Mapping[str, int]:
        """Read-only view of the bad-character table."""
        return MappingProxyType(self._bad_char)

    @property
    def good_suffix_table(self) -> tuple[int, ...]:
        """Read-only copy of the good-suffix table."""
        return tuple(self._good_suffix)

    def state(self) -> State:
        text, pattern = self._text, self._pattern
        if (
            not text
            or not pattern
            or len(pattern) > len(text)
            or self._i >= len(text)
        ):
            return State.NO_MATCH
        if self._last_match.matched and self._last_match.pattern_index == 0:
            return State.MATCH_FOUND
        return State.IN_PROGRESS

    def set_text(self, s: str) -> None:
        self._text = s
        self._restart()

    def set_pattern(self, s: str) -> None:
        self._pattern = s
        self._bad_char = build_bad_char_table(s)
        self._good_suffix = build_good_suffix_table(s)
        log.debug(
            "tables for %r: bad_char=%s good_suffix=%s",
            s, self._bad_char, self._good_suffix,
        )
        self._restart()

    def pattern_offset(self) -> int:
        if self.state() is State.MATCH_FOUND:
            return self._last_match.text_index
        return self._i - self._j

    def step(self) -> MatchInfo:
        if self.state().is_terminal():
            return self._last_match

        i, j = self._i, self._j
        m = len(self._pattern)
        if self._pattern[j] == self._text[i]:
            match = MatchInfo(i, j, True)
            self._i = i - 1
            self._j = j - 1
        else:
            match = MatchInfo(i, j, False)
            self._i = i + max(
                self._good_suffix[m - j - 1],
                bad_char_shift(self._bad_char, self._text[i], m),
            )
            self._j = m - 1

        self._last_match = match
        state = self.state()
        if state.is_terminal():
            log.debug("Boyer-Moore finished with %s at offset %d",
                      state.name, self.pattern_offset())
        return match

    def text_annotations(self) -> list[Annotation]:
        """Each text char paired with its bad-character jump.

        Without a pattern there are no tables, so every value is None.
        """
        if not self._pattern:
            return [(c, None) for c in self._text]
        m = len(self._pattern)
        return [(c, bad_char_shift(self._bad_char, c, m)) for c in self._text]

    def pattern_annotations(self) -> list[Annotation]:
        """Each pattern char paired with its good-suffix table entry."""
        return [(c, self._good_suffix[p]) for p, c in enumerate(self._pattern)]

    def _restart(self) -> None:
        self._i = len(self._pattern) - 1
        self._j = len(self._pattern) - 1
        self._last_match = NO_COMPARISON
