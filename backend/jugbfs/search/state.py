"""
Jug states, solution steps and the six transition rules.

The rules are kept in a fixed order because the order decides which of
several equally short solutions the search reports first.
"""

from dataclasses import asdict, dataclass
from typing import Callable, Dict, Iterator, NamedTuple, Tuple


class JugState(NamedTuple):
    a: int
    b: int


@dataclass(frozen=True)
class SearchStep:
    """State reached after applying ``action``, plus a readable description."""
    a: int
    b: int
    action: str
    description: str

    @property
    def state(self) -> JugState:
        return JugState(self.a, self.b)

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


START_ACTION = "Start"


def start_step() -> SearchStep:
    return SearchStep(0, 0, START_ACTION, "Start with both jugs empty")


def _fill_a(a: int, b: int, cap_a: int, cap_b: int) -> Tuple[int, int, str]:
    return cap_a, b, f"Fill Jug A ({cap_a}L)"


def _fill_b(a: int, b: int, cap_a: int, cap_b: int) -> Tuple[int, int, str]:
    return a, cap_b, f"Fill Jug B ({cap_b}L)"


def _empty_a(a: int, b: int, cap_a: int, cap_b: int) -> Tuple[int, int, str]:
    return 0, b, "Empty Jug A"


def _empty_b(a: int, b: int, cap_a: int, cap_b: int) -> Tuple[int, int, str]:
    return a, 0, "Empty Jug B"


def _pour_a_to_b(a: int, b: int, cap_a: int, cap_b: int) -> Tuple[int, int, str]:
    # Limited by what A holds and the free space in B
    amount = min(a, cap_b - b)
    return a - amount, b + amount, f"Pour {amount}L from A to B"


def _pour_b_to_a(a: int, b: int, cap_a: int, cap_b: int) -> Tuple[int, int, str]:
    amount = min(b, cap_a - a)
    return a + amount, b - amount, f"Pour {amount}L from B to A"


Rule = Callable[[int, int, int, int], Tuple[int, int, str]]

TRANSITIONS: Tuple[Tuple[str, Rule], ...] = (
    ("Fill A", _fill_a),
    ("Fill B", _fill_b),
    ("Empty A", _empty_a),
    ("Empty B", _empty_b),
    ("Pour A -> B", _pour_a_to_b),
    ("Pour B -> A", _pour_b_to_a),
)


def successors(state: JugState, cap_a: int, cap_b: int) -> Iterator[SearchStep]:
    """Yield one step per rule, in rule order. No-op moves are included."""
    for name, rule in TRANSITIONS:
        a, b, description = rule(state.a, state.b, cap_a, cap_b)
        yield SearchStep(a, b, name, description)
