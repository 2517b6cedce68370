import logging

from flask import jsonify, request

from seice.services.errors import ValidationError

logger = logging.getLogger(__name__)


def json_body():
    """Body JSON como dict; {} si viene vacío."""
    data = request.get_json(silent=True)
    if data is None:
        if request.get_data(cache=True):
            raise ValidationError('Invalid JSON body')
        return {}
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data


def service_error(e):
    return jsonify({"error": str(e)}), e.status_code


def server_error(message):
    logger.exception(message)
    return jsonify({"error": message}), 500
