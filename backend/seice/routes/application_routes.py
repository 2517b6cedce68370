from flask import Blueprint, jsonify

from seice.auth import current_user_id, require_auth
from seice.routes.helpers import json_body, server_error, service_error
from seice.services.application_service import ApplicationService
from seice.services.errors import ServiceError

application_bp = Blueprint('applications', __name__)


@application_bp.route('', methods=['POST'])
@require_auth
def create():
    try:
        application = ApplicationService.create_application(current_user_id(), json_body())
        return jsonify({"success": True, "application": application})
    except ServiceError as e:
        return service_error(e)
    except Exception:
        return server_error('Failed to save application')


@application_bp.route('', methods=['GET'])
@require_auth
def get_all():
    try:
        return jsonify({"success": True, "applications": ApplicationService.get_all(current_user_id())})
    except Exception:
        return server_error('Failed to fetch applications')


@application_bp.route('/<application_id>', methods=['PUT'])
@require_auth
def update(application_id):
    try:
        application = ApplicationService.update(current_user_id(), application_id, json_body())
        return jsonify({"success": True, "application": application})
    except ServiceError as e:
        return service_error(e)
    except Exception:
        return server_error('Failed to update application')


@application_bp.route('/<application_id>', methods=['DELETE'])
@require_auth
def delete(application_id):
    try:
        ApplicationService.delete(current_user_id(), application_id)
        return jsonify({"success": True})
    except Exception:
        return server_error('Failed to delete application')
