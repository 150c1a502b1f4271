from flask import Flask, jsonify, request
import os
from dotenv import load_dotenv

from burrow import goal_configuration
from puzzle_input import EXAMPLE_GRID, PuzzleInputError, format_burrow, parse_burrow
from solver import puzzle_variants, solve

# Load environment variables
load_dotenv()

app = Flask(__name__)


def _solution_payload(solution, depth, with_path):
    payload = {'cost': solution.cost if solution else None}
    if with_path:
        payload['path'] = [format_burrow(config, depth) for config in solution.path] if solution else []
    return payload


@app.route('/api/burrow/example')
def get_example():
    """Return the canonical example grid"""
    return jsonify({'grid': EXAMPLE_GRID})


@app.route('/api/burrow/solve', methods=['POST'])
def solve_burrow():
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not isinstance(data.get('grid'), str):
        return jsonify({'error': "Expected a JSON body with a 'grid' string"}), 400

    part = data.get('part')
    if part is not None and (type(part) is not int or part not in (1, 2)):
        return jsonify({'error': f"Unknown part {part!r}"}), 400
    with_path = bool(data.get('path', False))

    try:
        start = parse_burrow(data['grid'])
    except PuzzleInputError as e:
        return jsonify({'error': str(e)}), 400

    variants = puzzle_variants(start)
    result = {}
    for number in ([part] if part else [1, 2]):
        if number not in variants:
            continue
        part_start, part_depth = variants[number]
        solution = solve(part_start, goal_configuration(part_depth), part_depth, with_path)
        result[f'part{number}'] = _solution_payload(solution, part_depth, with_path)
    return jsonify(result)


if __name__ == '__main__':
    debug = os.getenv('FLASK_DEBUG', '0') == '1'
    app.run(host='0.0.0.0', port=int(os.getenv('PORT', '5000')), debug=debug)
