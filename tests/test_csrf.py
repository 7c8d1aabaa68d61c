import pytest

import config
from laboratorio import create_app


class CsrfConfig(config.TestingConfig):
    WTF_CSRF_ENABLED = True


@pytest.fixture
def csrf_client():
    return create_app(CsrfConfig).test_client()


def test_mutation_without_csrf_token_rejected(csrf_client):
    response = csrf_client.post('/items', json={'nombre': 'Microscope-1'})
    assert response.status_code == 403
    assert response.get_json()['message'] == 'Token CSRF inválido'


def test_mutation_with_csrf_token_accepted(csrf_client):
    token = csrf_client.get('/csrf-token').get_json()['csrfToken']
    response = csrf_client.post('/items', json={'nombre': 'Microscope-1'}, headers={'X-CSRFToken': token})
    assert response.status_code == 200

    response = csrf_client.delete('/items/Microscope-1', headers={'X-CSRFToken': token})
    assert response.status_code == 200


def test_bad_csrf_token_rejected(csrf_client):
    csrf_client.get('/csrf-token')
    response = csrf_client.post('/items', json={'nombre': 'x'}, headers={'X-CSRFToken': 'falso'})
    assert response.status_code == 403


def test_reads_do_not_need_csrf_token(csrf_client):
    assert csrf_client.get('/items').status_code == 200
