"""
Breadth-first search over water jug states.

Starting from two empty jugs, states are expanded level by level with the
rules in ``state.TRANSITIONS``. A state is marked visited when it is
enqueued, so each state is discovered exactly once and the first path that
leaves jug A holding ``goal`` litres is a shortest one.

Paths are stored as parent-pointer chains. Frontier entries share their
common prefix without sharing anything mutable, and the list of steps is
only built for the winning entry.
"""

import logging
from collections import deque
from typing import Callable, List, NamedTuple, Optional

from .state import JugState, SearchStep, start_step, successors

logger = logging.getLogger(__name__)

EnqueueHook = Callable[[JugState, SearchStep], None]


class _PathNode(NamedTuple):
    step: SearchStep
    parent: Optional["_PathNode"]


def _materialize(node: _PathNode) -> List[SearchStep]:
    path = []
    current: Optional[_PathNode] = node
    while current is not None:
        path.append(current.step)
        current = current.parent
    path.reverse()
    return path


def search(
    cap_a: int,
    cap_b: int,
    goal: int,
    on_enqueue: Optional[EnqueueHook] = None,
) -> Optional[List[SearchStep]]:
    """
    Find a shortest sequence of moves that leaves ``goal`` litres in jug A.

    Args:
        cap_a: Capacity of jug A.
        cap_b: Capacity of jug B.
        goal: Amount jug A must hold. Only jug A is checked.
        on_enqueue: Optional callback receiving every state as it joins the
            frontier, the start state included.

    Returns:
        The path from the synthetic Start step to the goal state, or None
        when no reachable state has ``a == goal``.

    Inputs are not validated here; see ``pipeline.solve.validate_params``.
    """
    start = start_step()
    frontier = deque([(start.state, _PathNode(start, None))])
    visited = {start.state}
    if on_enqueue is not None:
        on_enqueue(start.state, start)

    expanded = 0
    while frontier:
        state, node = frontier.popleft()
        expanded += 1

        if state.a == goal:
            logger.debug(
                f"BFS({cap_a}, {cap_b}, {goal}) reached {tuple(state)} "
                f"after expanding {expanded} states"
            )
            return _materialize(node)

        for step in successors(state, cap_a, cap_b):
            next_state = step.state
            if next_state in visited:
                continue
            visited.add(next_state)
            frontier.append((next_state, _PathNode(step, node)))
            if on_enqueue is not None:
                on_enqueue(next_state, step)

    logger.debug(
        f"BFS({cap_a}, {cap_b}, {goal}) exhausted {len(visited)} states without a solution"
    )
    return None


PSEUDOCODE: List[str] = [
    "def search(cap_a, cap_b, goal):",
    "    queue <- [((0, 0), [Start])]",
    "    visited <- {(0, 0)}",
    "    while queue is not empty:",
    "        (a, b), path <- queue.dequeue()",
    "        if a == goal: return path",
    "        for rule in [Fill A, Fill B, Empty A, Empty B, Pour A -> B, Pour B -> A]:",
    "            next <- rule(a, b)",
    "            if next not in visited:",
    "                visited.add(next)",
    "                queue.enqueue((next, path + [rule]))",
    "    return NO SOLUTION",
]
