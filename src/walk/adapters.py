"""Reusable Visitor and Generator implementations.

`DistanceVisitor` carries the best-known-distance bookkeeping every domain
needs, so a domain only supplies its goal test, its state key and its
successor enumeration.
"""

from abc import abstractmethod
from typing import Any, Callable, Dict, Hashable, Iterable, Optional

from .model import CONTINUE, Break, Generator, Item, Next, Sink, VisitDecision, Visitor


class FunctionGenerator(Generator):
    """Adapt a plain `fn(sink)` callable to the Generator interface."""

    def __init__(self, fn: Callable[[Sink], None]):
        self.fn = fn

    def generate(self, sink: Sink) -> None:
        self.fn(sink)


def successors_of(item: Item, states: Iterable[Any]) -> Generator:
    """Generator pushing `item.advance(s)` for each state, in iteration order."""

    def _generate(sink: Sink) -> None:
        for state in states:
            sink(item.advance(state))

    return FunctionGenerator(_generate)


class DistanceVisitor(Visitor):
    """
    Visitor with goal test and distance deduplication.

    A state key is accepted only when no distance <= the current step count has
    been recorded for it, so each key is expanded at most once, at the smallest
    step count it is reached with. Ties are not re-expanded.
    """

    def __init__(self) -> None:
        self.best: Dict[Hashable, int] = {}

    @abstractmethod
    def is_goal(self, item: Item) -> bool:
        ...

    @abstractmethod
    def expand(self, item: Item) -> Generator:
        ...

    def state_key(self, state: Any) -> Hashable:
        return state

    def result(self, item: Item) -> Any:
        return item.steps

    def reset(self) -> None:
        """Forget recorded distances so the visitor can drive a fresh walk."""
        self.best = {}

    def visit(self, item: Item) -> VisitDecision:
        if self.is_goal(item):
            return Break(self.result(item))

        key = self.state_key(item.state)
        previous = self.best.get(key)
        if previous is not None and previous <= item.steps:
            return CONTINUE

        self.best[key] = item.steps
        return Next(self.expand(item))


class FunctionVisitor(DistanceVisitor):
    """DistanceVisitor assembled from plain callables."""

    def __init__(
        self,
        is_goal: Callable[[Any], bool],
        neighbours: Callable[[Any], Iterable[Any]],
        state_key: Optional[Callable[[Any], Hashable]] = None,
    ) -> None:
        super().__init__()
        self._is_goal = is_goal
        self._neighbours = neighbours
        self._state_key = state_key

    def is_goal(self, item: Item) -> bool:
        return self._is_goal(item.state)

    def expand(self, item: Item) -> Generator:
        return successors_of(item, self._neighbours(item.state))

    def state_key(self, state: Any) -> Hashable:
        if self._state_key is None:
            return state
        return self._state_key(state)
