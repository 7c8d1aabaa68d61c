from laboratorio.extensions import db
from laboratorio.models import DocumentMixin


class Item(db.Model, DocumentMixin):
    __tablename__ = 'items'
    __document_fields__ = ('nombre', 'tipo', 'estado')

    id = db.Column(db.Integer, primary_key=True)
    # Clave natural para el borrado, sin restricción de unicidad
    nombre = db.Column(db.String(150), index=True)
    tipo = db.Column(db.String(100))
    estado = db.Column(db.String(50))

    def __repr__(self):
        return f"Item('{self.nombre}', '{self.estado}')"


class Reserva(db.Model, DocumentMixin):
    __tablename__ = 'reservas'
    __document_fields__ = ('equipo', 'fecha', 'horaInicio', 'horaFin')

    id = db.Column(db.Integer, primary_key=True)
    equipo = db.Column(db.String(150))
    fecha = db.Column(db.String(20))
    horaInicio = db.Column('hora_inicio', db.String(10))
    horaFin = db.Column('hora_fin', db.String(10))

    def __repr__(self):
        return f"Reserva(Equipo: {self.equipo}, Fecha: {self.fecha}, Inicio: {self.horaInicio}, Fin: {self.horaFin})"
