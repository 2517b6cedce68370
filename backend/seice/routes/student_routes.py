import logging

from flask import Blueprint, jsonify

from seice.auth import current_user_id, require_auth
from seice.routes.helpers import json_body, server_error, service_error
from seice.services.errors import ServiceError
from seice.services.kv_store import KVStoreError
from seice.services.student_service import StudentService

logger = logging.getLogger(__name__)

student_bp = Blueprint('students', __name__)


# OBTENER TODOS
@student_bp.route('', methods=['GET'])
@require_auth
def get_all():
    try:
        students = StudentService.get_valid(current_user_id())
    except KVStoreError as e:
        # Una caída del KV no rompe la vista de listado
        logger.warning("KV error fetching students, returning empty array: %s", e)
        students = []
    return jsonify({"success": True, "students": students, "count": len(students)})


# ALTA MASIVA (importación)
@student_bp.route('', methods=['POST'])
@require_auth
def create():
    try:
        students = StudentService.create_many(current_user_id(), json_body().get('students'))
        return jsonify({"success": True, "students": students})
    except ServiceError as e:
        return service_error(e)
    except Exception:
        return server_error('Failed to save students')


# OBTENER POR ID
@student_bp.route('/<student_id>', methods=['GET'])
@require_auth
def get_by_id(student_id):
    try:
        student = StudentService.get_or_404(current_user_id(), student_id)
        return jsonify({"success": True, "student": student})
    except ServiceError as e:
        return service_error(e)
    except Exception:
        return server_error('Failed to fetch student')


# MODIFICAR
@student_bp.route('/<student_id>', methods=['PUT'])
@require_auth
def update(student_id):
    try:
        student = StudentService.update_student(current_user_id(), student_id, json_body())
        return jsonify({"success": True, "student": student})
    except ServiceError as e:
        return service_error(e)
    except Exception:
        return server_error('Failed to update student')


# ELIMINAR
@student_bp.route('/<student_id>', methods=['DELETE'])
@require_auth
def delete(student_id):
    try:
        StudentService.delete_student(current_user_id(), student_id)
        return jsonify({"success": True})
    except Exception:
        return server_error('Failed to delete student')
