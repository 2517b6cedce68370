import logging
from functools import wraps

from flask import g, jsonify, request

from seice.services.auth_service import AuthService
from seice.services.kv_store import KVStoreError

logger = logging.getLogger(__name__)


def _bearer_token():
    header = request.headers.get('Authorization', '')
    parts = header.split(' ')
    if len(parts) < 2 or not parts[1]:
        return None
    return parts[1]


def require_auth(view):
    """Exige Authorization: Bearer <token> y deja la sesión en g.user."""
    @wraps(view)
    def wrapper(*args, **kwargs):
        token = _bearer_token()
        if not token:
            return jsonify({"error": "No authorization token provided"}), 401
        try:
            session = AuthService.resolve(token)
        except KVStoreError as e:
            logger.error("Auth middleware error: %s", e)
            return jsonify({"error": "Authorization failed"}), 401
        if not session or not session.get('userId'):
            return jsonify({"error": "Invalid authorization token"}), 401

        g.user = session
        g.token = token
        return view(*args, **kwargs)
    return wrapper


def current_user_id():
    return g.user['userId']
