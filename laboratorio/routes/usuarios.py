from flask import Blueprint, current_app, jsonify

from laboratorio.errors import StoreError
from laboratorio.forms.forms import UsuarioForm
from laboratorio.store import get_store
from laboratorio.utils import json_body_error

usuarios = Blueprint('usuarios', __name__)


# --- Rutas para Usuarios ---
@usuarios.route('/usuarios', methods=['GET'])
def list_usuarios():
    try:
        return jsonify(get_store().find_all('usuarios'))
    except StoreError as e:
        current_app.logger.error('Error al obtener los usuarios: %s', e)
        return jsonify({'message': 'Error al obtener los usuarios'}), 500


@usuarios.route('/usuarios', methods=['POST'])
def create_usuario():
    error = json_body_error()
    if error:
        return error

    form = UsuarioForm()
    if not form.validate():
        return jsonify({'errors': form.error_list}), 400

    # La contraseña se convierte en hash antes del INSERT (ver models/user.py)
    try:
        usuario = get_store().insert('usuarios', form.document)
    except StoreError as e:
        current_app.logger.error('Error al crear el usuario: %s', e)
        return jsonify({'message': 'Error al crear el usuario'}), 500
    return jsonify(usuario)


@usuarios.route('/usuarios/<nombre>', methods=['DELETE'])
def delete_usuario(nombre):
    try:
        usuario = get_store().delete_by_field('usuarios', 'nombre', nombre)
    except StoreError as e:
        current_app.logger.error('Error al eliminar el usuario %s: %s', nombre, e)
        return jsonify({'message': 'Error al eliminar el usuario', 'error': str(e)}), 500

    if usuario is None:
        return jsonify({'message': 'Usuario no encontrado'}), 404
    return jsonify({'message': 'Usuario eliminado', 'usuario': usuario})
