from flask import Blueprint, current_app, jsonify

from seice.auth import current_user_id, require_auth
from seice.routes.helpers import json_body, server_error, service_error
from seice.services.errors import ServiceError
from seice.services.image_service import ImageService

image_bp = Blueprint('images', __name__)


# Imágenes de pruebas impresas escaneadas
@image_bp.route('', methods=['POST'])
@require_auth
def upload():
    try:
        image = ImageService.register(
            current_user_id(), json_body(), current_app.config['IMAGE_PROCESSING_DELAY']
        )
        return jsonify({"success": True, "image": image})
    except ServiceError as e:
        return service_error(e)
    except Exception:
        return server_error('Failed to save image')


@image_bp.route('', methods=['GET'])
@require_auth
def get_all():
    try:
        return jsonify({"success": True, "images": ImageService.get_all(current_user_id())})
    except Exception:
        return server_error('Failed to fetch images')
