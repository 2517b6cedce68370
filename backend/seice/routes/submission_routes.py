import logging

from flask import Blueprint, jsonify

from seice.auth import current_user_id, require_auth
from seice.routes.helpers import json_body, server_error, service_error
from seice.services.errors import ServiceError
from seice.services.kv_store import KVStoreError
from seice.services.scoring_service import GRADED
from seice.services.submission_service import SubmissionService

logger = logging.getLogger(__name__)

submission_bp = Blueprint('submissions', __name__)


@submission_bp.route('', methods=['POST'])
@require_auth
def create():
    try:
        submission = SubmissionService.record(current_user_id(), json_body())
        return jsonify({"success": True, "submission": submission})
    except ServiceError as e:
        return service_error(e)
    except Exception:
        return server_error('Failed to save submission')


@submission_bp.route('', methods=['GET'])
@require_auth
def get_all():
    try:
        submissions = SubmissionService.get_valid(current_user_id())
    except KVStoreError as e:
        logger.warning("KV error fetching submissions, returning empty array: %s", e)
        submissions = []
    return jsonify({
        "success": True,
        "submissions": submissions,
        "count": len(submissions),
        "gradedCount": len([s for s in submissions if s.get('gradingStatus') == GRADED]),
    })


# REVISIÓN MANUAL (notas, feedback y corrección de preguntas de desarrollo)
@submission_bp.route('/<submission_id>/review', methods=['PUT'])
@require_auth
def review(submission_id):
    try:
        submission = SubmissionService.review(
            current_user_id(), submission_id, json_body(), reviewer_id=current_user_id()
        )
        return jsonify({"success": True, "submission": submission})
    except ServiceError as e:
        return service_error(e)
    except Exception:
        return server_error('Failed to update submission review')


@submission_bp.route('/bulk-export', methods=['POST'])
@require_auth
def bulk_export():
    try:
        data = json_body()
        export = SubmissionService.bulk_export(
            current_user_id(), data.get('submissionIds'), data.get('format') or 'csv'
        )
        return jsonify({"success": True, "export": export})
    except ServiceError as e:
        return service_error(e)
    except Exception:
        return server_error('Failed to export submissions')
