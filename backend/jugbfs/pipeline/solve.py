"""
Caller-side layer around the search engine.

Validates user supplied parameters, runs the search and shapes the result
into plain dictionaries for the HTTP API and the CLI. An unreachable goal
is a normal result here; only malformed parameters raise.
"""

import logging
import os
from typing import Dict, List, Optional, Sequence

from ..search.bfs import search
from ..search.logic import describe_path_logic
from ..search.state import JugState, SearchStep, start_step, successors

logger = logging.getLogger(__name__)

MAX_CAPACITY = int(os.getenv('JUG_MAX_CAPACITY', '1000'))

NO_SOLUTION_MESSAGE = "No solution possible for these parameters."


class InvalidParameters(ValueError):
    """Raised when capacities or goal cannot be handed to the search engine."""


def coerce_int(value, name: str) -> int:
    """Accept ints and integer strings such as form fields send."""
    if isinstance(value, bool):
        raise InvalidParameters("capA, capB and goal must be integers.")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        digits = text[1:] if text[:1] in ("+", "-") else text
        # optional sign, then ASCII digits only
        if digits.isascii() and digits.isdecimal():
            return int(text)
    logger.warning(f"Rejected non-integer {name}: {value!r}")
    raise InvalidParameters("capA, capB and goal must be integers.")


def validate_params(cap_a: int, cap_b: int, goal: int, max_capacity: Optional[int] = None) -> None:
    limit = MAX_CAPACITY if max_capacity is None else max_capacity

    for value in (cap_a, cap_b, goal):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidParameters("capA, capB and goal must be integers.")

    if goal > max(cap_a, cap_b):
        raise InvalidParameters("Goal cannot exceed the capacity of the largest jug.")
    if goal < 0 or cap_a <= 0 or cap_b <= 0:
        raise InvalidParameters("Capacities and goal must be positive.")
    if cap_a > limit or cap_b > limit:
        raise InvalidParameters(f"Jug capacities cannot exceed {limit}L.")


def steps_to_dicts(path: Sequence[SearchStep]) -> List[Dict[str, object]]:
    steps = [step.to_dict() for step in path]
    for step, logic in zip(steps, describe_path_logic(path)):
        step['logic'] = logic
    return steps


def _is_step_dict(step) -> bool:
    if not isinstance(step, dict) or not {'a', 'b', 'action'} <= set(step):
        return False
    return all(isinstance(step[k], int) and not isinstance(step[k], bool) for k in ('a', 'b'))


def validate_steps(cap_a: int, cap_b: int, goal: int, steps) -> None:
    """
    Check that client supplied steps form a real path for these jugs.

    Each entry needs ``a``, ``b`` and ``action``; the first must be the
    Start state, every later one must be a legal move from the previous
    state, and the last must leave ``goal`` litres in jug A.
    """
    if not isinstance(steps, list) or not steps or not all(
        _is_step_dict(s) for s in steps
    ):
        raise InvalidParameters("steps must be a list of {a, b, action} objects with integer a and b.")

    start = start_step()
    first = steps[0]
    if (first['a'], first['b'], first['action']) != (start.a, start.b, start.action):
        raise InvalidParameters("steps must begin with the Start state (0, 0).")

    for i in range(1, len(steps)):
        prev, step = steps[i - 1], steps[i]
        moves = successors(JugState(prev['a'], prev['b']), cap_a, cap_b)
        if not any(
            (m.a, m.b, m.action) == (step['a'], step['b'], step['action']) for m in moves
        ):
            raise InvalidParameters(f"Step {i} ({step['action']}) is not a legal move from the previous state.")

    if steps[-1]['a'] != goal:
        raise InvalidParameters("steps must end with the goal amount in Jug A.")


def solve_puzzle(cap_a: int, cap_b: int, goal: int, max_capacity: Optional[int] = None) -> Dict[str, object]:
    """
    Validate the parameters and run the search.

    Returns a dictionary:

      {
        "params": {"capA": ..., "capB": ..., "goal": ...},
        "solvable": bool,
        "steps": [step dicts] or None,
        "transitions": number of moves after Start (when solvable),
        "message": reason (when not solvable)
      }

    Raises InvalidParameters before the engine runs.
    """
    try:
        validate_params(cap_a, cap_b, goal, max_capacity=max_capacity)
    except InvalidParameters as e:
        logger.warning(f"Invalid parameters capA={cap_a!r} capB={cap_b!r} goal={goal!r}: {e}")
        raise

    params = {'capA': cap_a, 'capB': cap_b, 'goal': goal}
    path = search(cap_a, cap_b, goal)

    if path is None:
        logger.info(f"No solution for {params}")
        return {
            'params': params,
            'solvable': False,
            'steps': None,
            'message': NO_SOLUTION_MESSAGE,
        }

    logger.info(f"Solved {params} in {len(path) - 1} moves")
    return {
        'params': params,
        'solvable': True,
        'steps': steps_to_dicts(path),
        'transitions': len(path) - 1,
    }
