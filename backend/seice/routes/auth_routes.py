from datetime import datetime, timezone

from flask import Blueprint, current_app, g, jsonify

from seice.auth import require_auth
from seice.routes.helpers import json_body, server_error, service_error
from seice.services.auth_service import AuthService
from seice.services.errors import ServiceError

auth_bp = Blueprint('auth', __name__)


# REGISTRO
@auth_bp.route('/signup', methods=['POST'])
def signup():
    try:
        user = AuthService.signup(json_body())
        return jsonify({"success": True, "user": user})
    except ServiceError as e:
        return service_error(e)
    except Exception:
        return server_error('Internal server error during signup')


# LOGIN
@auth_bp.route('/login', methods=['POST'])
def login():
    try:
        token, user = AuthService.login(json_body(), ttl=current_app.config['SESSION_TTL'])
        return jsonify({"success": True, "accessToken": token, "user": user})
    except ServiceError as e:
        return service_error(e)
    except Exception:
        return server_error('Internal server error during login')


# LOGOUT
@auth_bp.route('/logout', methods=['POST'])
@require_auth
def logout():
    try:
        AuthService.logout(g.token)
        return jsonify({"success": True})
    except Exception:
        return server_error('Failed to logout')


@auth_bp.route('/health', methods=['GET'])
def health():
    return jsonify({"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()})
