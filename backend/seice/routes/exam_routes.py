import logging

from flask import Blueprint, jsonify, request

from seice.auth import current_user_id, require_auth
from seice.routes.helpers import json_body, server_error, service_error
from seice.services.errors import ServiceError
from seice.services.exam_service import STATUS_ACTIVE, ExamService
from seice.services.kv_store import KVStoreError
from seice.services.submission_service import SubmissionService

logger = logging.getLogger(__name__)

exam_bp = Blueprint('exams', __name__)
public_bp = Blueprint('public', __name__)


@exam_bp.route('', methods=['GET'])
@require_auth
def get_all():
    try:
        exams = ExamService.get_valid(current_user_id())
    except KVStoreError as e:
        logger.warning("KV error fetching exams, returning empty array: %s", e)
        exams = []
    return jsonify({
        "success": True,
        "exams": exams,
        "count": len(exams),
        "activeCount": len([e for e in exams if e.get('status') == STATUS_ACTIVE]),
    })


@exam_bp.route('', methods=['POST'])
@require_auth
def create():
    try:
        exam = ExamService.create_exam(current_user_id(), json_body())
        return jsonify({"success": True, "exam": exam})
    except ServiceError as e:
        return service_error(e)
    except Exception:
        return server_error('Failed to save exam')


@exam_bp.route('/<exam_id>', methods=['PUT'])
@require_auth
def update(exam_id):
    try:
        exam = ExamService.update(current_user_id(), exam_id, json_body())
        return jsonify({"success": True, "exam": exam})
    except ServiceError as e:
        return service_error(e)
    except Exception:
        return server_error('Failed to update exam')


@exam_bp.route('/<exam_id>', methods=['DELETE'])
@require_auth
def delete(exam_id):
    try:
        ExamService.delete(current_user_id(), exam_id)
        return jsonify({"success": True})
    except Exception:
        return server_error('Failed to delete exam')


# ENTREGA Y CORRECCIÓN
@exam_bp.route('/<exam_id>/submit', methods=['POST'])
@require_auth
def submit(exam_id):
    logger.info("Processing exam submission for user %s, exam %s", current_user_id(), exam_id)
    try:
        submission = SubmissionService.submit(current_user_id(), exam_id, json_body())
        return jsonify({"success": True, "submission": submission})
    except ServiceError as e:
        return service_error(e)
    except Exception as e:
        logger.exception("Error processing exam submission")
        return jsonify({"error": f"Failed to submit exam: {e}"}), 500


# ACCESO PÚBLICO (alumnos, sin token)
@public_bp.route('/public/exam/<exam_id>', methods=['GET'])
def public_exam(exam_id):
    session_id = request.args.get('session')
    if not session_id:
        return jsonify({"error": "Session ID required"}), 400

    try:
        exam = ExamService.find_any(exam_id)
    except Exception:
        return server_error('Failed to fetch exam')

    if not exam or exam.get('status') != STATUS_ACTIVE:
        return jsonify({"error": "Exam not found or not active"}), 404

    return jsonify({"exam": ExamService.public_view(exam), "sessionId": session_id})
