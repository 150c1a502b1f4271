"""
DynamoDB cache for solved burrow puzzles.

Stores minimum energy costs keyed by room depth and the canonical base-5 key
that uniquely identifies each start configuration. Supports write-through
caching of an entire solution path so that every intermediate configuration
along a solved path is also cached with its remaining cost.
"""

import boto3
import json
import os
from datetime import datetime
from typing import Dict, List, Optional, Tuple, Union
from botocore.exceptions import ClientError
from dotenv import load_dotenv

from burrow import Configuration, goal_configuration
from solver import Solution, path_moves

load_dotenv()

NO_SOLUTION = 'NO_SOLUTION'


def _cache_key(start_key: int, max_depth: int, goal_key: Optional[int] = None) -> str:
    """Build the DynamoDB hash key, suffixed with the goal key for non-standard goals."""
    if goal_key is None or goal_key == goal_configuration(max_depth).key:
        return f"{max_depth}:{start_key}"
    return f"{max_depth}:{start_key}:{goal_key}"


def _path_entries(solution: Solution) -> List[Tuple[Configuration, int, List[int]]]:
    """Split a solution into (configuration, remaining cost, remaining path keys) per step."""
    path = solution.path
    if not path:
        raise ValueError("Solution has no path; solve with with_path=True to cache it")
    step_costs = [move.cost for move in path_moves(path)]
    remaining = solution.cost
    entries = []
    for i, config in enumerate(path):
        entries.append((config, remaining, [c.key for c in path[i:]]))
        if i < len(step_costs):
            remaining -= step_costs[i]
    return entries


class SolverCache:
    def __init__(self, table=None):
        self.table_name = os.getenv('BURROW_CACHE_TABLE_NAME', 'amphipod-burrow-solver-cache')
        self.dynamodb = None
        if table is None:
            self.dynamodb = boto3.resource('dynamodb')
            table = self.dynamodb.Table(self.table_name)
        self.table = table

    def create_table_if_not_exists(self):
        """Create the DynamoDB table if it doesn't exist."""
        try:
            self.table.load()
        except ClientError as e:
            if e.response['Error']['Code'] == 'ResourceNotFoundException':
                if self.dynamodb is None:
                    self.dynamodb = boto3.resource('dynamodb')
                self.table = self.dynamodb.create_table(
                    TableName=self.table_name,
                    KeySchema=[
                        {
                            'AttributeName': 'board_state',
                            'KeyType': 'HASH'
                        }
                    ],
                    AttributeDefinitions=[
                        {
                            'AttributeName': 'board_state',
                            'AttributeType': 'S'
                        }
                    ],
                    BillingMode='PAY_PER_REQUEST'
                )
                self.table.meta.client.get_waiter('table_exists').wait(
                    TableName=self.table_name
                )
            else:
                raise e

    def get_solution(self, start: Configuration, max_depth: int,
                     goal: Optional[Configuration] = None) -> Union[None, str, Dict]:
        """Look up a cached result for a start configuration.

        Returns:
            None          - cache miss (never seen this configuration)
            "NO_SOLUTION" - definitively unreachable
            dict          - {'cost': int, 'path': [configuration keys]}
        """
        try:
            key = _cache_key(start.key, max_depth, goal.key if goal else None)
            response = self.table.get_item(Key={'board_state': key})
            if 'Item' in response:
                item = response['Item']
                if item['solution'] == NO_SOLUTION:
                    return NO_SOLUTION
                return {'cost': int(item['cost']), 'path': json.loads(item['solution'])}
            return None
        except ClientError as e:
            print(f"Solver cache lookup error: {e}")
            return None

    def put_solution(self, start: Configuration, max_depth: int, solution: Solution,
                     goal: Optional[Configuration] = None):
        """Store a single solution in the cache."""
        try:
            key = _cache_key(start.key, max_depth, goal.key if goal else None)
            path = [c.key for c in solution.path] if solution.path else []
            self.table.put_item(Item={
                'board_state': key,
                'solution': json.dumps(path),
                'cost': solution.cost,
                'amphipod_count': start.token_count(),
                'created_at': datetime.now().isoformat(),
            })
        except ClientError as e:
            print(f"Solver cache write error: {e}")

    def put_no_solution(self, start: Configuration, max_depth: int,
                        goal: Optional[Configuration] = None):
        """Cache that a start configuration cannot reach its goal."""
        try:
            key = _cache_key(start.key, max_depth, goal.key if goal else None)
            self.table.put_item(Item={
                'board_state': key,
                'solution': NO_SOLUTION,
                'amphipod_count': start.token_count(),
                'created_at': datetime.now().isoformat(),
            })
        except ClientError as e:
            print(f"Solver cache write error (no_solution): {e}")

    def cache_solution_path(self, max_depth: int, solution: Solution,
                            goal: Optional[Configuration] = None):
        """Cache every intermediate configuration along the solution path.

        Each configuration on a least-cost path reaches the goal at the
        remaining cost via the remaining suffix of the path.
        Uses Table.batch_writer() which auto-chunks into batches of 25.
        """
        try:
            with self.table.batch_writer() as batch:
                for config, remaining_cost, remaining_path in _path_entries(solution):
                    batch.put_item(Item={
                        'board_state': _cache_key(config.key, max_depth, goal.key if goal else None),
                        'solution': json.dumps(remaining_path),
                        'cost': remaining_cost,
                        'amphipod_count': config.token_count(),
                        'created_at': datetime.now().isoformat(),
                    })
        except ClientError as e:
            print(f"Solver cache batch write error: {e}")


_solver_cache = None


def get_solver_cache() -> SolverCache:
    """Return the process-wide cache, connecting to DynamoDB on first use."""
    global _solver_cache
    if _solver_cache is None:
        _solver_cache = SolverCache()
    return _solver_cache
