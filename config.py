import os
from dotenv import load_dotenv

# Carga las variables de entorno del archivo .env
load_dotenv()

# Ruta base del proyecto
basedir = os.path.abspath(os.path.dirname(__file__))


def _env_bool(name, default=False):
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Configuración base."""
    # Sin valores por defecto: create_app() falla si faltan
    SECRET_KEY = os.environ.get('SECRET_KEY')
    JWT_SECRET_KEY = os.environ.get('JWT_SECRET_KEY')
    JWT_EXPIRES_SECONDS = 3600

    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///' + os.path.join(basedir, 'laboratorio.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    BCRYPT_LOG_ROUNDS = 10
    # bcrypt solo usa 72 bytes; se aplica SHA-256 antes del hash
    BCRYPT_HANDLE_LONG_PASSWORDS = True

    # --- CSRF (Flask-WTF) ---
    WTF_CSRF_ENABLED = True
    WTF_CSRF_TIME_LIMIT = None

    # --- SERVIDOR ---
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', 5000))
    USE_HTTPS = _env_bool('USE_HTTPS')
    SSL_CERT_FILE = os.environ.get('SSL_CERT_FILE', os.path.join(basedir, 'certs', 'cert.pem'))
    SSL_KEY_FILE = os.environ.get('SSL_KEY_FILE', os.path.join(basedir, 'certs', 'key.pem'))

    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'clave-de-pruebas'
    JWT_SECRET_KEY = 'jwt-de-pruebas'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    BCRYPT_LOG_ROUNDS = 4
    WTF_CSRF_ENABLED = False
    USE_HTTPS = False
