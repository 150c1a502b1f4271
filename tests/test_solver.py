#!/usr/bin/env python3
"""
Tests for the least-energy burrow solver.

The two example regressions use the canonical puzzle example:
12521 for the shallow burrow, 44169 once unfolded.
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from burrow import Configuration, apply_move, available_moves, goal_configuration, unfold
from solver import (
    SearchInvariantError, Solution, _reconstruct_path, path_moves, puzzle_variants,
    solve, solve_puzzle,
)

EXAMPLE = Configuration('.......' 'BA..' 'CD..' 'BC..' 'DA..')
DEADLOCK = Configuration('...DA..' '.A..' 'BB..' 'CC..' '.D..')
ONE_STEP = Configuration('..B....' 'AA..' '.B..' 'CC..' 'DD..')


def test_example_shallow():
    """The shallow example costs 12521."""
    solution = solve(EXAMPLE, goal_configuration(2), 2)
    assert solution is not None
    assert solution.cost == 12521, f"Expected 12521, got {solution.cost}"
    assert solution.path is None
    print("  PASS test_example_shallow")


def test_example_unfolded():
    """The unfolded example costs 44169."""
    solution = solve(unfold(EXAMPLE), goal_configuration(4), 4)
    assert solution is not None
    assert solution.cost == 44169, f"Expected 44169, got {solution.cost}"
    print("  PASS test_example_unfolded")


def test_default_depth_from_amphipod_count():
    assert solve(EXAMPLE, goal_configuration(2)).cost == 12521
    print("  PASS test_default_depth_from_amphipod_count")


def test_start_is_goal():
    """A solved burrow costs nothing and its path is just itself."""
    goal = goal_configuration(2)
    solution = solve(goal, goal, 2, with_path=True)
    assert solution == Solution(0, [goal])
    print("  PASS test_start_is_goal")


def test_single_move():
    solution = solve(ONE_STEP, goal_configuration(2), 2, with_path=True)
    assert solution.cost == 20
    assert solution.path == [ONE_STEP, goal_configuration(2)]
    print("  PASS test_single_move")


def test_deadlock_is_unreachable():
    """Two hallway amphipods blocking each other can never get home."""
    assert solve(DEADLOCK, goal_configuration(2), 2) is None
    assert solve(DEADLOCK, goal_configuration(2), 2, with_path=True) is None
    print("  PASS test_deadlock_is_unreachable")


def test_solve_is_idempotent():
    first = solve(EXAMPLE, goal_configuration(2), 2, with_path=True)
    second = solve(EXAMPLE, goal_configuration(2), 2, with_path=True)
    assert first.cost == second.cost
    assert first.path == second.path
    print("  PASS test_solve_is_idempotent")


def test_path_is_a_chain_of_legal_moves():
    """Every step of the path is a legal move and the step costs add up."""
    solution = solve(EXAMPLE, goal_configuration(2), 2, with_path=True)
    path = solution.path
    assert path[0] == EXAMPLE
    assert path[-1] == goal_configuration(2)

    moves = path_moves(path)
    assert len(moves) == len(path) - 1
    assert sum(m.cost for m in moves) == solution.cost

    for before, after, move in zip(path, path[1:], moves):
        assert move in available_moves(before, 2)
        assert apply_move(before, move) == after
    print("  PASS test_path_is_a_chain_of_legal_moves")


def test_path_moves_rejects_non_moves():
    try:
        path_moves([EXAMPLE, goal_configuration(2)])
    except ValueError:
        pass
    else:
        raise AssertionError("Unrelated configurations are not a single move")
    assert path_moves([EXAMPLE]) == []
    print("  PASS test_path_moves_rejects_non_moves")


def test_path_prefixes_are_cheapest():
    """Each configuration on the cheapest path is itself reached as cheaply as possible."""
    solution = solve(EXAMPLE, goal_configuration(2), 2, with_path=True)
    moves = path_moves(solution.path)
    total = 0
    for config, move in zip(solution.path[1:], moves):
        assert move.cost > 0
        total += move.cost
        assert solve(EXAMPLE, config, 2).cost == total
    assert total == solution.cost
    print("  PASS test_path_prefixes_are_cheapest")


def test_missing_predecessor_is_fatal():
    """Losing a predecessor link raises instead of returning a wrong path."""
    goal = goal_configuration(2)
    try:
        _reconstruct_path(EXAMPLE, goal, {})
    except SearchInvariantError:
        pass
    else:
        raise AssertionError("Expected SearchInvariantError")
    assert issubclass(SearchInvariantError, RuntimeError)
    print("  PASS test_missing_predecessor_is_fatal")


def test_puzzle_variants():
    variants = puzzle_variants(EXAMPLE)
    assert variants[1] == (EXAMPLE, 2)
    assert variants[2] == (unfold(EXAMPLE), 4)
    assert list(puzzle_variants(unfold(EXAMPLE))) == [1]
    print("  PASS test_puzzle_variants")


def test_solve_puzzle_deep_start():
    """A deep start only has one part."""
    part1, part2 = solve_puzzle(goal_configuration(4))
    assert part1.cost == 0
    assert part2 is None
    print("  PASS test_solve_puzzle_deep_start")


if __name__ == '__main__':
    print("Running solver tests...")
    test_example_shallow()
    test_example_unfolded()
    test_default_depth_from_amphipod_count()
    test_start_is_goal()
    test_single_move()
    test_deadlock_is_unreachable()
    test_solve_is_idempotent()
    test_path_is_a_chain_of_legal_moves()
    test_path_moves_rejects_non_moves()
    test_path_prefixes_are_cheapest()
    test_missing_predecessor_is_fatal()
    test_puzzle_variants()
    test_solve_puzzle_deep_start()
    print("\nAll solver tests passed!")
