from laboratorio.extensions import db
from laboratorio.models import Item, Reserva, Usuario


def register_commands(app):

    @app.shell_context_processor
    def make_shell_context():
        return {
            'db': db,
            'Item': Item,
            'Reserva': Reserva,
            'Usuario': Usuario,
        }

    @app.cli.command('seed_db')
    def seed_db_command():
        """Agrega items de ejemplo a la base de datos."""
        db.session.query(Item).delete()

        db.session.add_all([
            Item(nombre='Microscopio-1', tipo='óptico', estado='disponible'),
            Item(nombre='Centrífuga-1', tipo='centrífuga', estado='disponible'),
            Item(nombre='Espectrofotómetro-1', tipo='espectrofotómetro', estado='mantenimiento'),
        ])
        db.session.commit()
        print('Base de datos poblada con items de ejemplo.')
