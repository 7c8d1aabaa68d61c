# ARCHIVO: laboratorio/routes/items.py

from flask import Blueprint, current_app, jsonify

from laboratorio.errors import StoreError
from laboratorio.forms.forms import ItemForm
from laboratorio.services.auth_service import token_required
from laboratorio.store import get_store
from laboratorio.utils import json_body_error

items = Blueprint('items', __name__)


# --- Rutas para Items (equipos del laboratorio) ---
@items.route('/items', methods=['GET'])
def list_items():
    try:
        return jsonify(get_store().find_all('items'))
    except StoreError as e:
        current_app.logger.error('Error al obtener los items: %s', e)
        return jsonify({'message': 'Error al obtener los items'}), 500


@items.route('/items', methods=['POST'])
def create_item():
    error = json_body_error()
    if error:
        return error
    form = ItemForm()
    # Objetos y listas no se pueden guardar como texto
    if not form.validate():
        current_app.logger.error('Error al crear el item: %s', form.errors)
        return jsonify({'message': 'Error al crear el item'}), 500
    try:
        item = get_store().insert('items', form.document)
    except StoreError as e:
        current_app.logger.error('Error al crear el item: %s', e)
        return jsonify({'message': 'Error al crear el item'}), 500
    return jsonify(item)


@items.route('/items/<nombre>', methods=['DELETE'])
def delete_item(nombre):
    try:
        item = get_store().delete_by_field('items', 'nombre', nombre)
    except StoreError as e:
        current_app.logger.error('Error al eliminar el item %s: %s', nombre, e)
        return jsonify({'message': 'Error al eliminar el item', 'error': str(e)}), 500

    if item is None:
        return jsonify({'message': 'Item no encontrado'}), 404
    return jsonify({'message': 'Item eliminado', 'item': item})


@items.route('/items/protegidos', methods=['GET'])
@token_required
def list_protected_items():
    try:
        return jsonify(get_store().find_all('items'))
    except StoreError as e:
        current_app.logger.error('Error al obtener los items protegidos: %s', e)
        return jsonify({'message': 'Error al obtener los items'}), 500
