"""Walk data structures and the Visitor/Generator capability contracts."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, NamedTuple, TypeVar, Union

ResultT = TypeVar("ResultT")


class Item(NamedTuple):
    """
    One frontier entry: a step count paired with a domain-defined state.

    Step counts are plain ints, so there is no width limit on path length.
    """

    steps: int
    state: Any

    def advance(self, state: Any) -> "Item":
        """Successor of this item, exactly one step further on."""
        return Item(self.steps + 1, state)


Sink = Callable[[Item], None]


class Generator(ABC):
    """Lazily enumerates the direct successors of one item."""

    @abstractmethod
    def generate(self, sink: Sink) -> None:
        """
        Call `sink` once per successor, in a fixed order.
        Every successor must be exactly one step beyond its source.
        """


@dataclass(frozen=True)
class Continue:
    """Skip this item; a previous visit already dominates it."""


@dataclass(frozen=True)
class Break(Generic[ResultT]):
    """Stop the whole walk and return `result`."""

    result: ResultT


@dataclass(frozen=True)
class Next:
    """Expand this item with `generator`."""

    generator: Generator


CONTINUE = Continue()

VisitDecision = Union[Continue, Break, Next]


class Visitor(ABC, Generic[ResultT]):
    """Decides, per item, whether to stop, skip or expand."""

    @abstractmethod
    def visit(self, item: Item) -> VisitDecision:
        """Return CONTINUE, Break(result) or Next(generator) for `item`."""
