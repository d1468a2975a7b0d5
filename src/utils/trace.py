"""Tracing module: logs walk engine steps and writes to CSV."""

import csv
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class TraceStep:
    """A single step in the walk."""

    timestamp: float
    step_number: int
    action_type: str  # 'expand', 'prune', 'goal', 'exhausted'
    depth: Optional[int] = None  # step count of the item being visited
    state: Optional[str] = None
    produced: Optional[int] = None  # successors pushed by the generator
    frontier_size: Optional[int] = None
    result: Optional[str] = None
    reason: Optional[str] = None


class Tracer:
    """Records walk steps for logging and analysis."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.steps: List[TraceStep] = []
        self.start_time = datetime.now().timestamp()
        self.step_counter = 0
        self.max_frontier = 0

    def _get_timestamp(self) -> float:
        """Get elapsed time in seconds since tracer creation."""
        return datetime.now().timestamp() - self.start_time

    def _record(self, action_type: str, **fields: Any) -> None:
        self.step_counter += 1
        self.steps.append(TraceStep(
            timestamp=self._get_timestamp(),
            step_number=self.step_counter,
            action_type=action_type,
            **fields,
        ))

    def log_expand(self, depth: int, state: Any, produced: int, frontier_size: int):
        """Log an item handed to its generator."""
        if not self.enabled:
            return
        self.max_frontier = max(self.max_frontier, frontier_size)
        self._record(
            'expand',
            depth=depth,
            state=str(state),
            produced=produced,
            frontier_size=frontier_size,
        )

    def log_prune(self, depth: int, state: Any, frontier_size: int):
        """Log an item discarded as dominated."""
        if not self.enabled:
            return
        self._record(
            'prune',
            depth=depth,
            state=str(state),
            frontier_size=frontier_size,
            reason="Already reached at an equal or smaller step count",
        )

    def log_goal(self, depth: int, state: Any, result: Any, frontier_size: int):
        """Log the item that stopped the walk."""
        if not self.enabled:
            return
        self._record(
            'goal',
            depth=depth,
            state=str(state),
            result=str(result),
            frontier_size=frontier_size,
            reason=f"Discarded {frontier_size} queued items",
        )

    def log_exhausted(self):
        """Log a walk that emptied its frontier without reaching a goal."""
        if not self.enabled:
            return
        self._record('exhausted', frontier_size=0, reason="Frontier empty, no goal reached")

    def to_csv(self, filepath: Path) -> None:
        """Write trace to CSV file."""
        if not self.steps:
            print("No trace steps to write")
            return

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        fieldnames = [
            'timestamp', 'step_number', 'action_type', 'depth', 'state',
            'produced', 'frontier_size', 'result', 'reason'
        ]

        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()

            for step in self.steps:
                writer.writerow(asdict(step))

        print(f"Trace written to {filepath} ({len(self.steps)} steps)")

    def summary(self) -> Dict[str, Any]:
        """Get a summary of the trace."""
        action_counts = {}
        for step in self.steps:
            action_counts[step.action_type] = action_counts.get(step.action_type, 0) + 1

        return {
            'total_steps': len(self.steps),
            'elapsed_time_seconds': self._get_timestamp(),
            'action_counts': action_counts,
            'num_expansions': action_counts.get('expand', 0),
            'num_pruned': action_counts.get('prune', 0),
            'max_frontier': self.max_frontier,
        }


# Global tracer instance
_global_tracer: Optional[Tracer] = None


def get_tracer() -> Tracer:
    """Get or create the global tracer."""
    global _global_tracer
    if _global_tracer is None:
        _global_tracer = Tracer(enabled=True)
    return _global_tracer


def reset_tracer() -> None:
    """Reset the global tracer."""
    global _global_tracer
    _global_tracer = None


def enable_tracing(enabled: bool = True) -> None:
    """Enable or disable tracing."""
    get_tracer().enabled = enabled
