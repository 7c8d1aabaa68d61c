"""Almacén de documentos del laboratorio.

``ResourceStore`` envuelve la sesión de Flask-SQLAlchemy y expone las tres
colecciones (``items``, ``reservas``, ``usuarios``) con operaciones de
documento: insertar, listar, buscar por campo y borrar por id o por campo.
Cada escritura se confirma de inmediato. Los documentos devueltos son
diccionarios planos, ya serializados.
"""
from contextlib import contextmanager

from flask import current_app
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from laboratorio.errors import StoreError
from laboratorio.models import COLLECTIONS

EXTENSION_KEY = 'laboratorio.store'


class ResourceStore:

    def __init__(self, db, collections=None):
        self.db = db
        self.collections = dict(collections or COLLECTIONS)

    # --- Context manager para la sesión ---
    @contextmanager
    def session_management(self):
        """Confirma al salir; ante cualquier error hace rollback.

        Los errores de SQLAlchemy se propagan como StoreError.
        """
        try:
            yield self.db.session
            self.db.session.commit()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            raise StoreError(str(e)) from e
        except Exception:
            self.db.session.rollback()
            raise

    def _model(self, collection):
        try:
            return self.collections[collection]
        except KeyError:
            raise StoreError(f'Colección desconocida: {collection}') from None

    def _column(self, model, field):
        if field != 'id' and field not in model.__document_fields__:
            raise StoreError(f'Campo desconocido en {model.__tablename__}: {field}')
        return getattr(model, field)

    def insert(self, collection, document):
        model = self._model(collection)
        with self.session_management() as session:
            record = model.from_document(document)
            session.add(record)
            session.flush()
            stored = record.to_dict()
        return stored

    def find_all(self, collection):
        model = self._model(collection)
        with self.session_management() as session:
            records = session.execute(self.db.select(model).order_by(model.id)).scalars().all()
            return [record.to_dict() for record in records]

    def _first(self, session, model, field, value):
        column = self._column(model, field)
        return session.execute(
            self.db.select(model).filter(column == value).order_by(model.id).limit(1)
        ).scalars().first()

    def find_one_by(self, collection, field, value):
        model = self._model(collection)
        with self.session_management() as session:
            record = self._first(session, model, field, value)
            return record.to_dict() if record is not None else None

    def delete_by_id(self, collection, ident):
        model = self._model(collection)
        try:
            ident = int(ident)
        except (TypeError, ValueError):
            raise StoreError(f'Identificador inválido: {ident!r}') from None
        with self.session_management() as session:
            record = session.get(model, ident)
            if record is None:
                return None
            document = record.to_dict()
            session.delete(record)
        return document

    def delete_by_field(self, collection, field, value):
        model = self._model(collection)
        with self.session_management() as session:
            record = self._first(session, model, field, value)
            if record is None:
                return None
            document = record.to_dict()
            session.delete(record)
        return document

    def ping(self):
        """Comprueba la conexión; el fallo se registra pero no es fatal."""
        try:
            self.db.session.execute(text('SELECT 1'))
            self.db.session.commit()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            current_app.logger.error('No se pudo conectar a la base de datos: %s', e)
            return False
        current_app.logger.info('Conectado a la base de datos')
        return True


def get_store():
    """Devuelve el almacén registrado en la aplicación actual."""
    return current_app.extensions[EXTENSION_KEY]
