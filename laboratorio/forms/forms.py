from flask import request
from flask_wtf import FlaskForm
from werkzeug.datastructures import ImmutableMultiDict
from wtforms import StringField
from wtforms.validators import Email, Length


class TextField(StringField):
    """Campo de texto para cuerpos JSON.

    Una clave ausente queda en None. Números y booleanos se guardan como
    texto (``true``/``false`` en minúsculas); objetos y listas se rechazan.
    """

    def process_formdata(self, valuelist):
        value = valuelist[0] if valuelist else None
        if value is None or isinstance(value, str):
            self.data = value
        elif isinstance(value, bool):
            self.data = 'true' if value else 'false'
        elif isinstance(value, (int, float)):
            self.data = str(value)
        else:
            self.data = None
            raise ValueError('Se esperaba un texto')


class JsonForm(FlaskForm):
    """Formulario alimentado por el cuerpo JSON de la petición.

    El CSRF lo valida CSRFProtect de forma global, no cada formulario.
    """

    class Meta:
        csrf = False

    def __init__(self, **kwargs):
        body = request.get_json(silent=True)
        if 'formdata' not in kwargs and isinstance(body, dict):
            # Un único valor por clave: las listas no se despliegan
            kwargs['formdata'] = ImmutableMultiDict(list(body.items()))
        super().__init__(**kwargs)

    @property
    def document(self):
        return {name: field.data for name, field in self._fields.items()}

    @property
    def error_list(self):
        return [
            {'param': name, 'msg': message}
            for name, messages in self.errors.items()
            for message in messages
        ]


# Formulario para item de laboratorio
class ItemForm(JsonForm):
    nombre = TextField('Nombre')
    tipo = TextField('Tipo')
    estado = TextField('Estado')


# Formulario para reserva
class ReservaForm(JsonForm):
    equipo = TextField('Equipo')
    fecha = TextField('Fecha')
    horaInicio = TextField('Hora de inicio')
    horaFin = TextField('Hora de fin')


# Formulario de registro de usuario
class UsuarioForm(JsonForm):
    nombre = TextField('Nombre')
    email = TextField('Email', validators=[Email(message='Email inválido')])
    password = TextField('Contraseña', validators=[
        Length(min=6, message='La contraseña debe tener al menos 6 caracteres')
    ])


class LoginForm(JsonForm):
    email = TextField('Email')
    password = TextField('Contraseña')
