# backend/decorators.py
from functools import wraps
from flask import jsonify, request
from backend.logging_config import setup_logging

logger = setup_logging()


def json_body_required(f):
    """Reject requests whose body is not a JSON object."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not isinstance(request.get_json(silent=True), dict):
            logger.warning(f"Request to {request.path} without a JSON object body.")
            return jsonify({'message': 'Invalid request body'}), 400
        return f(*args, **kwargs)
    return decorated_function
