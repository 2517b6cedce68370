from flask import Blueprint, jsonify, request

from seice.auth import current_user_id, require_auth
from seice.routes.helpers import json_body, server_error, service_error
from seice.services.assembly_service import AssemblyService
from seice.services.errors import ServiceError

simulado_bp = Blueprint('simulados', __name__)


@simulado_bp.route('/subjects', methods=['GET'])
@require_auth
def subjects():
    """Preguntas disponibles por materia para el armado."""
    try:
        availability = AssemblyService.availability(
            current_user_id(),
            request.args.get('questionsPerSubject'),
            request.args.get('difficulty'),
        )
        return jsonify({"success": True, "subjects": availability})
    except ServiceError as e:
        return service_error(e)
    except Exception:
        return server_error('Failed to fetch subject availability')


@simulado_bp.route('', methods=['POST'])
@require_auth
def create():
    try:
        exam = AssemblyService.create_simulado(current_user_id(), json_body())
        return jsonify({"success": True, "exam": exam})
    except ServiceError as e:
        return service_error(e)
    except Exception:
        return server_error('Failed to create simulado')
