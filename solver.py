"""
Least-energy solver for the amphipod burrow puzzle.

Runs Dijkstra's algorithm over whole-burrow configurations. Nodes are keyed
by the configuration's canonical base-5 key; edges are the legal moves
produced by burrow.available_moves, weighted by their energy cost.

Usage:
    from burrow import goal_configuration
    from solver import solve, solve_puzzle
    solution = solve(start, goal_configuration(2), with_path=True)
    if solution is not None:
        print(solution.cost, len(solution.path))
    part1, part2 = solve_puzzle(start)
"""

import heapq
from collections import namedtuple
from math import inf

from burrow import (
    Move, apply_move, available_moves, goal_configuration, room_depth_for, unfold,
)
from burrow_layout import EMPTY, distance, KIND_COST

Solution = namedtuple('Solution', ['cost', 'path'])


class SearchInvariantError(RuntimeError):
    """Raised when the search bookkeeping is inconsistent (a solver bug)."""


def _reconstruct_path(start, goal, previous):
    path = [goal]
    current = goal
    while current != start:
        current = previous.get(current.key)
        if current is None:
            raise SearchInvariantError(
                f"No predecessor recorded for {path[-1]!r} while rebuilding the path"
            )
        path.append(current)
    path.reverse()
    return path


def solve(start, goal, max_depth=None, with_path=False):
    """
    Find the least total energy needed to turn `start` into `goal`.

    max_depth defaults to the depth implied by the amphipod count.

    Returns a Solution(cost, path), where path is the list of configurations
    from start to goal when with_path is set and None otherwise. Returns None
    when the goal cannot be reached.
    """
    if max_depth is None:
        max_depth = room_depth_for(start)

    best = {start.key: 0}
    previous = {}
    frontier = [(0, 0, start)]
    seq = 0  # tie-breaker so configurations are never compared

    while frontier:
        cost, _, current = heapq.heappop(frontier)

        # A cheaper entry for this configuration was already expanded
        if cost > best.get(current.key, inf):
            continue

        if current == goal:
            path = _reconstruct_path(start, current, previous) if with_path else None
            return Solution(cost, path)

        for move in available_moves(current, max_depth):
            neighbor = apply_move(current, move)
            alt = cost + move.cost
            if alt < best.get(neighbor.key, inf):
                best[neighbor.key] = alt
                previous[neighbor.key] = current
                seq += 1
                heapq.heappush(frontier, (alt, seq, neighbor))

    return None


def path_moves(path):
    """Returns the Move taken between each consecutive pair of configurations."""
    moves = []
    for before, after in zip(path, path[1:]):
        changed = [i for i, (a, b) in enumerate(zip(before.cells, after.cells)) if a != b]
        if len(changed) != 2:
            raise ValueError(f"{before!r} -> {after!r} is not a single move")
        first, second = changed
        if before[first] != EMPTY and after[first] == EMPTY:
            origin, destination = first, second
        else:
            origin, destination = second, first
        kind = before[origin]
        if kind == EMPTY or after[destination] != kind or before[destination] != EMPTY:
            raise ValueError(f"{before!r} -> {after!r} is not a single move")
        moves.append(Move(origin, destination, distance(origin, destination) * KIND_COST[kind]))
    return moves


def puzzle_variants(start):
    """
    Map part number -> (start, room depth) for a parsed start configuration.

    Part 1 is the burrow as given. A shallow (depth 2) burrow also has a
    part 2: the same burrow unfolded to depth 4.
    """
    depth = room_depth_for(start)
    variants = {1: (start, depth)}
    if depth == 2:
        variants[2] = (unfold(start), 4)
    return variants


def solve_puzzle(start, with_path=False):
    """
    Solve both puzzle variants for a parsed start configuration.

    Returns (part1, part2); each is a Solution, or None if unreachable.
    part2 is also None when the start is already a deep burrow.
    """
    results = {}
    for part, (part_start, depth) in puzzle_variants(start).items():
        results[part] = solve(part_start, goal_configuration(depth), depth, with_path)
    return results[1], results.get(2)
