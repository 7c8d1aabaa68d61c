# laboratorio/models/__init__.py


class DocumentMixin:
    """Serialización de un registro como documento JSON.

    Cada modelo declara en ``__document_fields__`` los atributos que
    forman parte del documento; el identificador se expone como ``_id``.
    """

    __document_fields__ = ()

    def to_dict(self):
        doc = {'_id': self.id}
        for field in self.__document_fields__:
            doc[field] = getattr(self, field)
        return doc

    @classmethod
    def from_document(cls, document):
        """Construye el registro ignorando las claves desconocidas."""
        values = {}
        for field in cls.__document_fields__:
            value = document.get(field)
            if isinstance(value, bool):
                value = 'true' if value else 'false'
            values[field] = None if value is None else str(value)
        return cls(**values)


from laboratorio.models.equipment import Item, Reserva  # noqa: E402
from laboratorio.models.user import Usuario  # noqa: E402

COLLECTIONS = {
    'items': Item,
    'reservas': Reserva,
    'usuarios': Usuario,
}
