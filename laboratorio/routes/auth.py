# ARCHIVO: laboratorio/routes/auth.py

from flask import Blueprint, current_app, jsonify
from flask_wtf.csrf import generate_csrf

from laboratorio.errors import StoreError
from laboratorio.forms.forms import LoginForm
from laboratorio.services.auth_service import create_access_token, verify_password
from laboratorio.store import get_store
from laboratorio.utils import json_body_error

auth = Blueprint('auth', __name__)


def _rejected():
    # Misma respuesta para email desconocido y contraseña incorrecta
    return jsonify({'message': 'Credenciales inválidas', 'token': None}), 401


# --- Rutas ---
@auth.route('/login', methods=['POST'])
def login():
    error = json_body_error()
    if error:
        return error

    form = LoginForm()
    if not form.email.data or not form.password.data:
        return _rejected()

    try:
        usuario = get_store().find_one_by('usuarios', 'email', form.email.data)
    except StoreError as e:
        current_app.logger.error('Error al buscar el usuario: %s', e)
        return jsonify({'message': 'Error al iniciar sesión'}), 500

    if usuario is None or not verify_password(form.password.data, usuario['password']):
        current_app.logger.warning('Login fallido para %s', form.email.data)
        return _rejected()

    token = create_access_token(usuario['_id'])
    return jsonify({'message': 'Login exitoso', 'token': token})


@auth.route('/csrf-token', methods=['GET'])
def csrf_token():
    """Entrega el token anti-CSRF; el secreto viaja en la cookie de sesión."""
    return jsonify({'csrfToken': generate_csrf()})
