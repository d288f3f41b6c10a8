"""SearchSession: drives one stepwise engine on behalf of a front end.

A front end (the CLI here, or a GUI) owns a session rather than an
engine. The session remembers the text and pattern across algorithm
switches, keeps the history of comparisons, and answers the questions
a renderer asks after every step: is stepping still allowed, where is
the pattern drawn, and which part of the text should be highlighted.

Usage:
    session = SearchSession(algorithm="boyer-moore")
    session.set_text("HERE IS A SIMPLE EXAMPLE")
    session.set_pattern("EXAMPLE")
    session.run()
    session.state()       # State.MATCH_FOUND
    session.match_span()  # (17, 24)
"""
from __future__ import annotations

import logging
from enum import Enum, auto

from stepsearch.algorithms import ALGORITHMS, create, resolve
from stepsearch.algorithms.base import Annotation, MatchInfo, SearchAlgorithm, State

log = logging.getLogger(__name__)

# Per-character step budget for run(). KMP never needs more than two
# steps per text char; Boyer-Moore gets a looser bound.
_STEP_FACTOR = {
    "kmp": 2,
    "boyer-moore": 4,
}


class Field(Enum):
    TEXT = auto()
    PATTERN = auto()


class SearchSession:
    """One text, one pattern, one selected engine.

    Args:
        algorithm: registry name or alias of the engine to start with
        text: initial text
        pattern: initial pattern
    """

    def __init__(self, algorithm: str = "kmp", text: str = "", pattern: str = "") -> None:
        self._algorithm = resolve(algorithm)
        self._engine: SearchAlgorithm = create(self._algorithm)
        self._text = ""
        self._pattern = ""
        self._history: list[MatchInfo] = []
        self.set_text(text)
        self.set_pattern(pattern)

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @property
    def engine(self) -> SearchAlgorithm:
        return self._engine

    @property
    def text(self) -> str:
        return self._text

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def history(self) -> list[MatchInfo]:
        """Comparisons made since the last reset, oldest first."""
        return list(self._history)

    @property
    def steps_taken(self) -> int:
        return len(self._history)

    def select(self, algorithm: str) -> None:
        """Switch engine, carrying the current text and pattern over."""
        name = resolve(algorithm)
        if name != self._algorithm:
            log.info("switching algorithm %s -> %s", self._algorithm, name)
        self._algorithm = name
        self._engine = create(name)
        self.update(self._text, Field.TEXT)
        self.update(self._pattern, Field.PATTERN)

    def update(self, value: str, field: Field) -> None:
        """Replace one input field. Restarts the search."""
        if field is Field.TEXT:
            self._text = value
            self._engine.set_text(value)
        else:
            self._pattern = value
            self._engine.set_pattern(value)
        self._history.clear()

    def set_text(self, value: str) -> None:
        self.update(value, Field.TEXT)

    def set_pattern(self, value: str) -> None:
        self.update(value, Field.PATTERN)

    def ready(self) -> bool:
        return self._engine.ready()

    def state(self) -> State:
        return self._engine.state()

    def pattern_offset(self) -> int:
        return self._engine.pattern_offset()

    def step(self) -> MatchInfo:
        """Advance the engine one comparison.

        Only comparisons that were actually made go into the history;
        stepping a finished search returns the engine's last match.
        """
        if not self._engine.ready():
            return self._engine.step()
        match = self._engine.step()
        self._history.append(match)
        return match

    def default_step_limit(self) -> int:
        return _STEP_FACTOR[self._algorithm] * len(self._text) + len(self._pattern) + 1

    def run(self, max_steps: int | None = None) -> list[MatchInfo]:
        """Step until the search ends or `max_steps` steps were taken.

        Returns the comparisons made by this call.
        """
        if max_steps is None:
            max_steps = self.default_step_limit()
        elif max_steps <= 0:
            raise ValueError(f"max_steps must be positive, got {max_steps}")

        made: list[MatchInfo] = []
        while self._engine.ready() and len(made) < max_steps:
            made.append(self.step())
        log.debug(
            "%s: %d steps, state=%s",
            self._algorithm, len(made), self._engine.state().name,
        )
        return made

    def match_span(self) -> tuple[int, int] | None:
        """[start, end) of the occurrence found, or None."""
        if self._engine.state() is not State.MATCH_FOUND:
            return None
        start = self._engine.pattern_offset()
        return start, start + len(self._pattern)

    def highlight(self) -> tuple[int, int] | None:
        """Text range to color once the search is over.

        The match on MATCH_FOUND, the whole text on NO_MATCH, and
        nothing while the search is still running.
        """
        state = self._engine.state()
        if state is State.MATCH_FOUND:
            return self.match_span()
        if state is State.NO_MATCH:
            return 0, len(self._text)
        return None

    def annotations(self, field: Field) -> list[Annotation]:
        if field is Field.TEXT:
            return self._engine.text_annotations()
        return self._engine.pattern_annotations()


def available_algorithms() -> dict[str, str]:
    """Registry names mapped to display titles."""
    return {name: cls.title for name, cls in ALGORITHMS.items()}
