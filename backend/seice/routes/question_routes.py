import logging

from flask import Blueprint, jsonify

from seice.auth import current_user_id, require_auth
from seice.routes.helpers import json_body, server_error, service_error
from seice.services.errors import ServiceError
from seice.services.kv_store import KVStoreError
from seice.services.question_service import QuestionService

logger = logging.getLogger(__name__)

question_bp = Blueprint('questions', __name__)


@question_bp.route('', methods=['GET'])
@require_auth
def get_all():
    try:
        questions = QuestionService.get_valid(current_user_id())
    except KVStoreError as e:
        logger.error("KV error fetching questions: %s", e)
        questions = []
    return jsonify({"success": True, "questions": questions, "count": len(questions)})


@question_bp.route('', methods=['POST'])
@require_auth
def create():
    try:
        question = QuestionService.create_question(current_user_id(), json_body())
        return jsonify({"success": True, "question": question})
    except ServiceError as e:
        return jsonify({"success": False, "error": str(e)}), e.status_code
    except Exception as e:
        logger.exception("Error saving question")
        return jsonify({"success": False, "error": f"Failed to save question: {e}"}), 500


@question_bp.route('/<question_id>', methods=['PUT'])
@require_auth
def update(question_id):
    try:
        question = QuestionService.update(current_user_id(), question_id, json_body())
        return jsonify({"success": True, "question": question})
    except ServiceError as e:
        return service_error(e)
    except Exception:
        return server_error('Failed to update question')


@question_bp.route('/<question_id>', methods=['DELETE'])
@require_auth
def delete(question_id):
    try:
        QuestionService.delete(current_user_id(), question_id)
        return jsonify({"success": True})
    except Exception:
        return server_error('Failed to delete question')
