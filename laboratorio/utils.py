# laboratorio/utils.py
from flask import jsonify, request


def json_body_error():
    """Devuelve una respuesta 400 si el cuerpo no es un objeto JSON, o None.

    Ejemplo:
        Input: POST con '[1, 2]' o con un formulario HTML
        Output: ({'message': 'Se esperaba un cuerpo JSON'}, 400)
    """
    if not isinstance(request.get_json(silent=True), dict):
        return jsonify({'message': 'Se esperaba un cuerpo JSON'}), 400
    return None
