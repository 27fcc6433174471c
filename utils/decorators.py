"""
Decorators Module - Route guards
"""

from functools import wraps
from flask import jsonify
from .security import check_rate_limit


def rate_limited(endpoint):
    """Decorator to reject callers over the per-IP rate limit with a JSON 429"""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            if not check_rate_limit(endpoint):
                return jsonify({
                    'success': False,
                    'message': 'Too many requests. Please try again later.'
                }), 429
            return f(*args, **kwargs)
        return decorated_function
    return decorator
