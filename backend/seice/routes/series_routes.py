from flask import Blueprint, jsonify

from seice.auth import current_user_id, require_auth
from seice.routes.helpers import json_body, server_error, service_error
from seice.services.errors import ServiceError
from seice.services.series_service import SeriesService
from seice.services.student_service import StudentService

series_bp = Blueprint('series', __name__)


@series_bp.route('', methods=['GET'])
@require_auth
def get_all():
    try:
        return jsonify({"success": True, "data": SeriesService.get_sorted(current_user_id())})
    except Exception:
        return server_error('Failed to fetch series')


@series_bp.route('', methods=['POST'])
@require_auth
def create():
    try:
        serie = SeriesService.create_serie(current_user_id(), json_body())
        return jsonify({"success": True, "data": serie})
    except ServiceError as e:
        return service_error(e)
    except Exception:
        return server_error('Failed to create serie')


@series_bp.route('/<serie_id>', methods=['GET'])
@require_auth
def get_by_id(serie_id):
    try:
        return jsonify({"success": True, "data": SeriesService.get_or_404(current_user_id(), serie_id)})
    except ServiceError as e:
        return service_error(e)
    except Exception:
        return server_error('Failed to fetch serie')


@series_bp.route('/<serie_id>', methods=['PUT'])
@require_auth
def update(serie_id):
    try:
        serie = SeriesService.update_serie(current_user_id(), serie_id, json_body())
        return jsonify({"success": True, "data": serie})
    except ServiceError as e:
        return service_error(e)
    except Exception:
        return server_error('Failed to update serie')


@series_bp.route('/<serie_id>', methods=['DELETE'])
@require_auth
def delete(serie_id):
    try:
        SeriesService.delete_serie(current_user_id(), serie_id)
        return jsonify({"success": True})
    except ServiceError as e:
        return service_error(e)
    except Exception:
        return server_error('Failed to delete serie')


# Alumnos de la serie
@series_bp.route('/<serie_id>/students', methods=['GET'])
@require_auth
def students(serie_id):
    try:
        return jsonify({"success": True, "data": StudentService.get_by_serie(current_user_id(), serie_id)})
    except Exception:
        return server_error('Failed to fetch serie students')
