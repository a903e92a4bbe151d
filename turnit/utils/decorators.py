"""
Authentication Decorators

Contains decorators for authenticated HTTP endpoints.
"""

from functools import wraps

from flask import request

from .errors import AuthenticationError
from .helpers import error_response


def _authenticate() -> dict:
    """Resolve the bearer token on the current request to a user dict."""
    from ..services.auth_service import get_auth_service
    from ..services.game_service import get_game_service

    auth_service = get_auth_service()
    if not auth_service:
        raise AuthenticationError('Authentication service unavailable')

    auth_header = request.headers.get('Authorization')
    if not auth_header or not auth_header.startswith('Bearer '):
        raise AuthenticationError('Authorization token required')

    result = auth_service.verify_token(auth_header.split(' ', 1)[1])
    if not result['success']:
        raise AuthenticationError(result['error'])

    user = result['user']
    game_service = get_game_service()
    if game_service:
        game_service.users.remember(user['id'], user['username'])
    return user


def require_auth(f):
    """
    Decorator to require authentication for protected HTTP endpoints.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            user = _authenticate()
        except AuthenticationError as e:
            return error_response(e, 'authenticate')

        # Add user data to request context
        request.user = user
        return f(*args, **kwargs)

    return decorated_function


def optional_auth(f):
    """
    Decorator that attaches the user when a valid token is sent and
    request.user = None otherwise.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            request.user = _authenticate()
        except AuthenticationError:
            request.user = None
        return f(*args, **kwargs)

    return decorated_function
