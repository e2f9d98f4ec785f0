from flask import Flask, request, jsonify
from flask_cors import CORS
import os
import inspect
import logging

from dotenv import load_dotenv

from jugbfs.llm.explainer import explain_solution
from jugbfs.pipeline.solve import (
    InvalidParameters,
    coerce_int,
    solve_puzzle,
    validate_params,
    validate_steps,
)
from jugbfs.search import bfs

# Load environment variables
load_dotenv()

# Initialize Flask app
app = Flask(__name__)
CORS(app)

app.logger.setLevel(logging.INFO)

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def read_params(payload):
    """Pull capA, capB and goal out of a JSON body as integers."""
    if not isinstance(payload, dict):
        raise InvalidParameters("Request body must be a JSON object.")
    missing = [key for key in ('capA', 'capB', 'goal') if payload.get(key) is None]
    if missing:
        raise InvalidParameters(f"Missing parameters: {', '.join(missing)}")
    return (
        coerce_int(payload['capA'], 'capA'),
        coerce_int(payload['capB'], 'capB'),
        coerce_int(payload['goal'], 'goal'),
    )


def invalid_response(err):
    return jsonify({
        'error': 'Invalid parameters',
        'details': str(err)
    }), 400


@app.route('/')
def index():
    """Describe the API."""
    return jsonify({
        'name': 'Water Jug BFS',
        'endpoints': {
            'POST /solve': 'Shortest fill/empty/pour sequence leaving the goal amount in Jug A',
            'POST /explain': 'Natural-language explanation of a solution',
            'GET /algorithm': 'Pseudocode and source of the search',
        }
    })


@app.route('/solve', methods=['POST'])
def solve():
    try:
        cap_a, cap_b, goal = read_params(request.get_json(silent=True))
        result = solve_puzzle(cap_a, cap_b, goal)
    except InvalidParameters as e:
        return invalid_response(e)
    except Exception as e:
        logger.error(f'Error running BFS: {str(e)}', exc_info=True)
        return jsonify({
            'error': 'Internal server error',
            'details': str(e)
        }), 500

    return jsonify({'success': True, **result})


@app.route('/explain', methods=['POST'])
def explain():
    payload = request.get_json(silent=True)
    try:
        cap_a, cap_b, goal = read_params(payload)
        validate_params(cap_a, cap_b, goal)
        steps = payload.get('steps')
        if not steps:
            result = solve_puzzle(cap_a, cap_b, goal)
            if not result['solvable']:
                return jsonify({
                    'error': 'No solution to explain',
                    'details': result['message']
                }), 422
            steps = result['steps']
        else:
            validate_steps(cap_a, cap_b, goal, steps)

        explanation = explain_solution(cap_a, cap_b, goal, steps)
    except InvalidParameters as e:
        return invalid_response(e)
    except Exception as e:
        logger.error(f'Error generating explanation: {str(e)}', exc_info=True)
        return jsonify({
            'error': 'Internal server error',
            'details': str(e)
        }), 500

    return jsonify({'success': True, 'explanation': explanation})


@app.route('/algorithm', methods=['GET'])
def algorithm():
    """Pseudocode and Python source shown in the client's logic panel."""
    return jsonify({
        'pseudocode': bfs.PSEUDOCODE,
        'source': inspect.getsource(bfs.search),
    })


if __name__ == '__main__':
    port = int(os.getenv('PORT', 5001))
    app.run(host='0.0.0.0', port=port)
