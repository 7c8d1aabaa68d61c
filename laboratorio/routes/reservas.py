from flask import Blueprint, current_app, jsonify

from laboratorio.errors import StoreError
from laboratorio.forms.forms import ReservaForm
from laboratorio.store import get_store
from laboratorio.utils import json_body_error

reservas = Blueprint('reservas', __name__)


# --- Rutas para Reservas ---
# No hay detección de solapamientos: dos reservas del mismo equipo y
# horario se aceptan por igual.
@reservas.route('/reservas', methods=['GET'])
def list_reservas():
    try:
        return jsonify(get_store().find_all('reservas'))
    except StoreError as e:
        current_app.logger.error('Error al obtener las reservas: %s', e)
        return jsonify({'message': 'Error al obtener las reservas'}), 500


@reservas.route('/reservas', methods=['POST'])
def create_reserva():
    error = json_body_error()
    if error:
        return error
    form = ReservaForm()
    if not form.validate():
        current_app.logger.error('Error al crear la reserva: %s', form.errors)
        return jsonify({'message': 'Error al crear la reserva'}), 500
    try:
        reserva = get_store().insert('reservas', form.document)
    except StoreError as e:
        current_app.logger.error('Error al crear la reserva: %s', e)
        return jsonify({'message': 'Error al crear la reserva'}), 500
    return jsonify(reserva)


@reservas.route('/reservas/<reserva_id>', methods=['DELETE'])
def delete_reserva(reserva_id):
    try:
        get_store().delete_by_id('reservas', reserva_id)
    except StoreError as e:
        current_app.logger.error('Error al eliminar la reserva %s: %s', reserva_id, e)
        return jsonify({'message': 'Error al eliminar la reserva'}), 500
    return jsonify({'message': 'Reserva eliminada'})
