#!/usr/bin/env python3
"""
Solve the amphipod burrow puzzle for a grid file, printing the least energy
for the shallow puzzle and for its unfolded (depth 4) counterpart.

Usage:
    python3 solve_burrow.py input.txt               # solve both parts
    python3 solve_burrow.py - < input.txt           # read the grid from stdin
    python3 solve_burrow.py --example --show-path   # canonical example, print each step
    python3 solve_burrow.py input.txt --part 2      # unfolded puzzle only
    python3 solve_burrow.py input.txt --use-cache   # read/write the DynamoDB cache
    python3 solve_burrow.py input.txt --use-cache --dry-run  # read cache, don't write
"""

import argparse
import sys
import time

from burrow import goal_configuration
from puzzle_input import EXAMPLE_GRID, PuzzleInputError, format_burrow, parse_burrow
from solver import path_moves, puzzle_variants, solve


def print_path(path, depth):
    for config, move in zip(path[1:], path_moves(path)):
        print(f"  cell {move.origin} -> cell {move.destination}  (+{move.cost})")
        print(format_burrow(config, depth))


def solve_part(part, start, depth, show_path=False, cache=None, dry_run=False):
    goal = goal_configuration(depth)

    if cache is not None:
        cached = cache.get_solution(start, depth)
        if cached == 'NO_SOLUTION':
            print(f"Part {part}: no solution (cached)")
            return None
        if cached and not show_path:
            print(f"Part {part}: {cached['cost']} (cached)")
            return cached['cost']

    begin = time.monotonic()
    solution = solve(start, goal, depth, with_path=show_path or cache is not None)
    elapsed = time.monotonic() - begin

    if solution is None:
        print(f"Part {part}: no solution ({elapsed:.2f}s)")
        if cache is not None and not dry_run:
            cache.put_no_solution(start, depth)
        return None

    print(f"Part {part}: {solution.cost} ({elapsed:.2f}s)")
    if show_path:
        print(format_burrow(start, depth))
        print_path(solution.path, depth)

    if cache is not None:
        if dry_run:
            print("  (dry-run) Skipping cache write")
        else:
            cache.cache_solution_path(depth, solution)
            print(f"  Cached {len(solution.path)} configurations")
    return solution.cost


def main(argv=None):
    parser = argparse.ArgumentParser(description='Solve the amphipod burrow puzzle')
    parser.add_argument('input', nargs='?', default=None,
                        help="Grid file, or '-' for stdin")
    parser.add_argument('--example', action='store_true',
                        help='Solve the built-in example grid')
    parser.add_argument('--part', type=int, choices=(1, 2), default=None,
                        help='Solve only one part (default: both)')
    parser.add_argument('--show-path', action='store_true',
                        help='Print every configuration along the cheapest path')
    parser.add_argument('--use-cache', action='store_true',
                        help='Look up and store results in the DynamoDB cache')
    parser.add_argument('--dry-run', action='store_true',
                        help='With --use-cache, read the cache but do not write to it')
    args = parser.parse_args(argv)

    if args.example:
        text = EXAMPLE_GRID
    elif args.input is None or args.input == '-':
        text = sys.stdin.read()
    else:
        with open(args.input) as f:
            text = f.read()

    try:
        start = parse_burrow(text)
    except PuzzleInputError as e:
        print(f"Invalid burrow grid: {e}")
        return 1

    cache = None
    if args.use_cache:
        from solver_cache import get_solver_cache
        print("Initializing solver cache table...", flush=True)
        cache = get_solver_cache()
        cache.create_table_if_not_exists()

    parts = [args.part] if args.part else [1, 2]
    variants = puzzle_variants(start)
    for part in parts:
        if part not in variants:
            print(f"Part {part}: not available for a depth-4 burrow")
            continue
        part_start, depth = variants[part]
        solve_part(part, part_start, depth, args.show_path, cache, args.dry_run)
    return 0


if __name__ == '__main__':
    sys.exit(main())
