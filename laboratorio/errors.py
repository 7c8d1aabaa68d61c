from flask import jsonify
from flask_wtf.csrf import CSRFError
from werkzeug.exceptions import HTTPException


class StoreError(Exception):
    """Fallo de la capa de persistencia (conexión, consulta o commit)."""


class ConfigurationError(RuntimeError):
    """Falta un valor obligatorio de configuración."""


def register_error_handlers(app):
    @app.errorhandler(CSRFError)
    def handle_csrf_error(e):
        app.logger.warning('Petición rechazada por CSRF: %s', e.description)
        return jsonify({'message': 'Token CSRF inválido', 'error': e.description}), 403

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({'message': e.description}), e.code
