from flask import Blueprint, jsonify

from seice.auth import current_user_id, require_auth
from seice.routes.helpers import json_body, server_error, service_error
from seice.services.class_service import ClassService
from seice.services.errors import ServiceError

class_bp = Blueprint('classes', __name__)


@class_bp.route('', methods=['GET'])
@require_auth
def get_all():
    try:
        return jsonify({"success": True, "classes": ClassService.get_all(current_user_id())})
    except Exception:
        return server_error('Failed to fetch classes')


@class_bp.route('', methods=['POST'])
@require_auth
def create():
    try:
        school_class = ClassService.create_class(current_user_id(), json_body())
        return jsonify({"success": True, "class": school_class})
    except ServiceError as e:
        return service_error(e)
    except Exception:
        return server_error('Failed to save class')


@class_bp.route('/<class_id>', methods=['PUT'])
@require_auth
def update(class_id):
    try:
        school_class = ClassService.update(current_user_id(), class_id, json_body())
        return jsonify({"success": True, "class": school_class})
    except ServiceError as e:
        return service_error(e)
    except Exception:
        return server_error('Failed to update class')


@class_bp.route('/<class_id>', methods=['DELETE'])
@require_auth
def delete(class_id):
    try:
        ClassService.delete(current_user_id(), class_id)
        return jsonify({"success": True})
    except Exception:
        return server_error('Failed to delete class')
