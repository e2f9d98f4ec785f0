from typing import Mapping, Sequence, Union

from ..search.state import SearchStep

StepLike = Union[SearchStep, Mapping[str, object]]


def _field(step: StepLike, name: str):
    if isinstance(step, Mapping):
        return step[name]
    return getattr(step, name)


def format_steps(steps: Sequence[StepLike]) -> str:
    return "\n".join(
        f"{i + 1}. {_field(s, 'action')} (A={_field(s, 'a')}, B={_field(s, 'b')})"
        for i, s in enumerate(steps)
    )


def generate_explain_prompt(cap_a: int, cap_b: int, goal: int, steps: Sequence[StepLike]) -> str:
    """Build the tutor prompt asking the model to explain a BFS solution."""
    steps_text = format_steps(steps)
    return f"""You are an expert algorithm tutor.
The user is solving the Water Jug Problem with BFS.

Parameters:
Jug A Capacity: {cap_a}L
Jug B Capacity: {cap_b}L
Target Goal in Jug A: {goal}L

The BFS algorithm found the following solution path:
{steps_text}

Please provide a concise, natural language explanation of the strategy used in this specific solution.
Explain *why* these steps lead to the solution. Keep it under 150 words.
"""
