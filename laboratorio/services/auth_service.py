from datetime import datetime, timedelta, timezone
from functools import wraps

import jwt
from flask import current_app, g, jsonify, request

from laboratorio.extensions import bcrypt

_JWT_ALG = 'HS256'


def verify_password(password, password_hash):
    if not password or not password_hash:
        return False
    try:
        return bcrypt.check_password_hash(password_hash, password)
    except ValueError:
        # Hash mal formado en la base de datos
        return False


def create_access_token(user_id, secret=None, expires_seconds=None):
    """Emite un JWT firmado con el id del usuario (1 hora por defecto)."""
    secret = secret or current_app.config['JWT_SECRET_KEY']
    if expires_seconds is None:
        expires_seconds = current_app.config['JWT_EXPIRES_SECONDS']

    now = datetime.now(timezone.utc)
    payload = {
        'id': user_id,
        'iat': int(now.timestamp()),
        'exp': int((now + timedelta(seconds=expires_seconds)).timestamp()),
    }
    return jwt.encode(payload, secret, algorithm=_JWT_ALG)


def decode_access_token(token, secret=None):
    secret = secret or current_app.config['JWT_SECRET_KEY']
    return jwt.decode(token, secret, algorithms=[_JWT_ALG])


def _bearer_token():
    header = request.headers.get('Authorization', '')
    scheme, _, token = header.partition(' ')
    if scheme.lower() != 'bearer' or not token.strip():
        return None
    return token.strip()


# --- Decorador para rutas protegidas ---
def token_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        token = _bearer_token()
        if token is None:
            return jsonify({'message': 'Token no proporcionado'}), 403
        try:
            payload = decode_access_token(token)
        except jwt.InvalidTokenError as e:
            current_app.logger.warning('Token rechazado: %s', e)
            return jsonify({'message': 'Token inválido'}), 401
        g.user_id = payload.get('id')
        return f(*args, **kwargs)
    return decorated_function
