"""Breadth-first walk engine driven by a Visitor and its Generators."""

from collections import deque
from typing import Any, Optional

from .model import Break, Continue, Item, Next, Visitor
from src.utils.trace import Tracer


def walk(visitor: Visitor, initial_item: Item, tracer: Optional[Tracer] = None) -> Optional[Any]:
    """
    Walk breadth-first from `initial_item`.
    Returns the payload of the first Break the visitor produces, or None if the
    frontier empties first. Remaining queued items are dropped on Break.
    Without a tracer the walk records nothing.
    """
    if tracer is None:
        tracer = Tracer(enabled=False)
    queue: deque[Item] = deque([initial_item])

    while queue:
        item = queue.popleft()
        decision = visitor.visit(item)

        if isinstance(decision, Break):
            tracer.log_goal(
                depth=item.steps,
                state=item.state,
                result=decision.result,
                frontier_size=len(queue),
            )
            return decision.result

        if isinstance(decision, Continue):
            tracer.log_prune(depth=item.steps, state=item.state, frontier_size=len(queue))
            continue

        if isinstance(decision, Next):
            before = len(queue)
            decision.generator.generate(queue.append)
            tracer.log_expand(
                depth=item.steps,
                state=item.state,
                produced=len(queue) - before,
                frontier_size=len(queue),
            )
            continue

        raise TypeError(
            f"visit() must return Continue, Break or Next, got {type(decision).__name__}"
        )

    tracer.log_exhausted()
    return None
