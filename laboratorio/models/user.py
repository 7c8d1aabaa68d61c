from sqlalchemy import event, inspect

from laboratorio.extensions import db, bcrypt
from laboratorio.models import DocumentMixin


class Usuario(db.Model, DocumentMixin):
    __tablename__ = 'usuarios'
    __document_fields__ = ('nombre', 'email', 'password')

    id = db.Column(db.Integer, primary_key=True)
    nombre = db.Column(db.String(150), index=True)
    email = db.Column(db.String(150), index=True)
    # Siempre el hash bcrypt, nunca el texto plano
    password = db.Column(db.String(255))

    def __repr__(self):
        return f"Usuario('{self.nombre}', '{self.email}')"


def _hash_password(target):
    if target.password:
        target.password = bcrypt.generate_password_hash(target.password).decode('utf-8')


@event.listens_for(Usuario, 'before_insert')
def hash_password_on_insert(mapper, connection, target):
    _hash_password(target)


@event.listens_for(Usuario, 'before_update')
def hash_password_on_update(mapper, connection, target):
    # Solo se vuelve a calcular si la contraseña cambió
    if inspect(target).attrs.password.history.has_changes():
        _hash_password(target)
