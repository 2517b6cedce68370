import logging

from flask import Flask, jsonify, request
from flask_cors import CORS
from flasgger import Swagger
from werkzeug.exceptions import HTTPException

from seice.config.database import init_redis
from seice.config.settings import Settings
from seice.routes.analytics_routes import analytics_bp
from seice.routes.application_routes import application_bp
from seice.routes.auth_routes import auth_bp
from seice.routes.class_routes import class_bp
from seice.routes.exam_routes import exam_bp, public_bp
from seice.routes.image_routes import image_bp
from seice.routes.question_routes import question_bp
from seice.routes.series_routes import series_bp
from seice.routes.simulado_routes import simulado_bp
from seice.routes.student_routes import student_bp
from seice.routes.submission_routes import submission_bp
from seice.swagger_template import build_swagger_template

logger = logging.getLogger(__name__)


def configure_logging(level):
    logging.basicConfig(level=level, format='[%(levelname)s] %(name)s: %(message)s')
    logging.getLogger('seice').setLevel(level)


def create_app(overrides=None, redis_client=None):
    app = Flask(__name__)
    app.config.from_object(Settings)
    if overrides:
        app.config.update(overrides)

    configure_logging(app.config['LOG_LEVEL'])

    # Evitar redirecciones por trailing slash (rompen el preflight de CORS)
    app.url_map.strict_slashes = False
    origins = app.config['CORS_ORIGINS']
    CORS(
        app,
        origins='*' if origins == '*' else [o.strip() for o in origins.split(',')],
        allow_headers=["Content-Type", "Authorization"],
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    )

    init_redis(app.config, client=redis_client)

    # Registros
    prefix = app.config['API_PREFIX'].rstrip('/')
    app.register_blueprint(auth_bp, url_prefix=prefix)
    app.register_blueprint(public_bp, url_prefix=prefix)
    app.register_blueprint(analytics_bp, url_prefix=prefix)
    app.register_blueprint(student_bp, url_prefix=f'{prefix}/students')
    app.register_blueprint(question_bp, url_prefix=f'{prefix}/questions')
    app.register_blueprint(exam_bp, url_prefix=f'{prefix}/exams')
    app.register_blueprint(simulado_bp, url_prefix=f'{prefix}/simulados')
    app.register_blueprint(submission_bp, url_prefix=f'{prefix}/submissions')
    app.register_blueprint(image_bp, url_prefix=f'{prefix}/images')
    app.register_blueprint(class_bp, url_prefix=f'{prefix}/classes')
    app.register_blueprint(series_bp, url_prefix=f'{prefix}/series')
    app.register_blueprint(application_bp, url_prefix=f'{prefix}/applications')

    # Swagger / OpenAPI - disponible en /apidocs
    Swagger(app, template=build_swagger_template(prefix or '/'))

    @app.after_request
    def log_request(response):
        logger.info("%s %s -> %s", request.method, request.path, response.status_code)
        return response

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        logger.exception("Unhandled error in %s %s", request.method, request.path)
        return jsonify({"error": "Internal server error"}), 500

    return app
