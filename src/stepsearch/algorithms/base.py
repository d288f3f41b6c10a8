"""Abstract base for stepwise string search algorithms.

KMP and BoyerMoore both implement this interface. A driver (the
session, the CLI, or any renderer) talks only to this contract: load a
text and a pattern, poll state(), call step() one comparison at a time,
and read pattern_offset() to know where to draw the pattern.

Every edge case is a state, not an exception. Empty inputs and a
pattern longer than the text are NO_MATCH; stepping a finished search
does nothing and hands back the last comparison.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto


class State(Enum):
    IN_PROGRESS = auto()
    MATCH_FOUND = auto()
    NO_MATCH = auto()

    def is_terminal(self) -> bool:
        """True for MATCH_FOUND and NO_MATCH."""
        return self is not State.IN_PROGRESS


@dataclass(frozen=True, slots=True)
class MatchInfo:
    """Outcome of one character comparison.

    text_index and pattern_index are the positions that were compared;
    matched says whether the two characters were equal.
    """
    text_index: int
    pattern_index: int
    matched: bool


# Placeholder reported before the first comparison of a search.
NO_COMPARISON = MatchInfo(0, 0, False)

Annotation = tuple[str, int | None]


class SearchAlgorithm(ABC):
    """Interface that both stepwise engines implement."""

    #: Human-readable algorithm name, used by drivers for display.
    title: str = ""

    def ready(self) -> bool:
        """True if there is at least one more comparison to make."""
        return bool(self.text and self.pattern) and self.state() is State.IN_PROGRESS

    @abstractmethod
    def state(self) -> State:
        """Current search state. Never mutates anything."""
        ...

    @property
    @abstractmethod
    def text(self) -> str:
        ...

    @property
    @abstractmethod
    def pattern(self) -> str:
        ...

    @property
    @abstractmethod
    def last_match(self) -> MatchInfo:
        """The comparison made by the most recent step()."""
        ...

    @abstractmethod
    def set_text(self, s: str) -> None:
        """Replace the text and restart the search."""
        ...

    @abstractmethod
    def set_pattern(self, s: str) -> None:
        """Replace the pattern, rebuild its tables and restart the search."""
        ...

    @abstractmethod
    def pattern_offset(self) -> int:
        """Text index at which the pattern is currently aligned."""
        ...

    @abstractmethod
    def step(self) -> MatchInfo:
        """Make exactly one character comparison and return it."""
        ...

    def text_annotations(self) -> list[Annotation]:
        """Per-character (char, value) pairs for the text row."""
        return [(c, None) for c in self.text]

    def pattern_annotations(self) -> list[Annotation]:
        """Per-character (char, value) pairs for the pattern row."""
        return [(c, None) for c in self.pattern]
