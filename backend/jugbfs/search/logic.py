"""
Plain-text narration of the BFS bookkeeping behind each solution step.

Clients stepping through a solution show these lines next to the jugs so
the reader can follow what the queue and visited set were doing.
"""

from typing import List, Sequence

from .state import SearchStep


def _fmt(step: SearchStep) -> str:
    return f"({step.a}, {step.b})"


def describe_step_logic(path: Sequence[SearchStep], index: int) -> List[str]:
    """Return the BFS operation lines for ``path[index]``."""
    if not 0 <= index < len(path):
        raise IndexError(f"step index {index} out of range for a path of {len(path)} steps")

    step = path[index]
    if index == 0:
        return [
            f"Algorithm starts with both jugs empty {_fmt(step)}.",
            f"Queue initialized: [{_fmt(step)}].",
            f"Visited set initialized: {{{_fmt(step)}}}.",
        ]

    parent = path[index - 1]
    return [
        f"Dequeued parent state {_fmt(parent)}.",
        f"Generated neighbor state {_fmt(step)} by applying rule {step.action}.",
        "Checked visited set: state was new.",
        "Enqueued state and recorded path.",
    ]


def describe_path_logic(path: Sequence[SearchStep]) -> List[List[str]]:
    return [describe_step_logic(path, i) for i in range(len(path))]
