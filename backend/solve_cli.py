"""
Solve a water jug puzzle from the command line and print the steps.

    python solve_cli.py 4 3 2
    python solve_cli.py 4 3 2 --trace --explain
"""
import argparse
import logging
import os
import sys

# Add the backend directory to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from jugbfs.llm.explainer import explain_solution
from jugbfs.pipeline.solve import InvalidParameters, coerce_int, validate_params
from jugbfs.search.bfs import search

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Water Jug puzzle solver (BFS)")
    parser.add_argument("cap_a", help="Capacity of Jug A")
    parser.add_argument("cap_b", help="Capacity of Jug B")
    parser.add_argument("goal", help="Target amount in Jug A")
    parser.add_argument("--trace", action="store_true", help="Log every state added to the queue")
    parser.add_argument("--explain", action="store_true", help="Ask Gemini to explain the solution")
    return parser.parse_args(argv)


def print_solution(path):
    print("Solution Found:")
    print(f"{'Step':<5} | {'Action':<25} | {'State (A, B)':<15}")
    print("-" * 50)
    for i, step in enumerate(path):
        print(f"{i:<5} | {step.action:<25} | ({step.a}, {step.b})")


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        cap_a = coerce_int(args.cap_a, "capA")
        cap_b = coerce_int(args.cap_b, "capB")
        goal = coerce_int(args.goal, "goal")
        validate_params(cap_a, cap_b, goal)
    except InvalidParameters as e:
        print(f"Invalid parameters: {e}", file=sys.stderr)
        return 2

    print(f"Starting BFS with Jug A={cap_a}L, Jug B={cap_b}L, Goal={goal}L in A\n")

    hook = None
    if args.trace:
        def hook(state, step):
            logger.info(f"enqueue {tuple(state)} via {step.action}")

    path = search(cap_a, cap_b, goal, on_enqueue=hook)
    if path is None:
        print("No solution found.")
        return 1

    print_solution(path)

    if args.explain:
        print()
        print(explain_solution(cap_a, cap_b, goal, path))
    return 0


if __name__ == "__main__":
    sys.exit(main())
