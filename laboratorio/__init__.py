from flask import Flask
from sqlalchemy.exc import SQLAlchemyError

from config import Config
from laboratorio.errors import ConfigurationError, register_error_handlers
from laboratorio.extensions import db, bcrypt, csrf, cors
from laboratorio.store import EXTENSION_KEY, ResourceStore

REQUIRED_SECRETS = ('SECRET_KEY', 'JWT_SECRET_KEY')


def create_app(config_class=Config):
    app = Flask(__name__, static_folder='frontend', static_url_path='')
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    missing = [key for key in REQUIRED_SECRETS if not app.config.get(key)]
    if missing:
        raise ConfigurationError('Faltan valores de configuración: ' + ', '.join(missing))

    # Inicializa las extensiones
    db.init_app(app)
    bcrypt.init_app(app)
    csrf.init_app(app)
    origins = [o.strip() for o in (app.config.get('CORS_ORIGINS') or '').split(',') if o.strip()]
    if origins:
        cors.init_app(app, origins=origins)

    # El almacén se construye aquí y las rutas lo obtienen de app.extensions
    store = ResourceStore(db)
    app.extensions[EXTENSION_KEY] = store

    with app.app_context():
        try:
            db.create_all()
        except SQLAlchemyError as e:
            # Modo degradado: el proceso sigue y cada petición fallará con 500
            app.logger.error('No se pudieron crear las tablas: %s', e)
        store.ping()

    # Registra los blueprints
    from laboratorio.routes.main import main as main_blueprint
    app.register_blueprint(main_blueprint)

    from laboratorio.routes.auth import auth as auth_blueprint
    app.register_blueprint(auth_blueprint)

    from laboratorio.routes.items import items as items_blueprint
    app.register_blueprint(items_blueprint)

    from laboratorio.routes.reservas import reservas as reservas_blueprint
    app.register_blueprint(reservas_blueprint)

    from laboratorio.routes.usuarios import usuarios as usuarios_blueprint
    app.register_blueprint(usuarios_blueprint)

    register_error_handlers(app)

    from laboratorio.commands import register_commands
    register_commands(app)

    return app
