import pytest

from config import TestingConfig
from laboratorio import create_app
from laboratorio.store import get_store

USUARIO = {'nombre': 'Ana', 'email': 'ana@laboratorio.org', 'password': 'secreta123'}


@pytest.fixture
def app():
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    with app.app_context():
        yield get_store()


@pytest.fixture
def usuario(client):
    response = client.post('/usuarios', json=USUARIO)
    assert response.status_code == 200
    return response.get_json()


@pytest.fixture
def token(client, usuario):
    response = client.post('/login', json={'email': USUARIO['email'], 'password': USUARIO['password']})
    return response.get_json()['token']
