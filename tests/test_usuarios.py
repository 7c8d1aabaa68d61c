USUARIO = {'nombre': 'Ana', 'email': 'ana@laboratorio.org', 'password': 'secreta123'}


def test_create_usuario_hashes_password(client):
    response = client.post('/usuarios', json=USUARIO)
    assert response.status_code == 200
    usuario = response.get_json()
    assert usuario['email'] == USUARIO['email']
    assert usuario['password'] != USUARIO['password']
    assert usuario['password'].startswith('$2')


def test_persisted_password_is_never_plaintext(client, usuario):
    stored = client.get('/usuarios').get_json()
    assert len(stored) == 1
    assert stored[0]['password'] != USUARIO['password']


def test_invalid_email_and_short_password(client):
    response = client.post('/usuarios', json={'email': 'bad-email', 'password': '12345'})
    assert response.status_code == 400
    errors = response.get_json()['errors']
    assert len(errors) == 2
    assert {e['param'] for e in errors} == {'email', 'password'}
    assert client.get('/usuarios').get_json() == []


def test_password_of_six_characters_accepted(client):
    response = client.post('/usuarios', json={'nombre': 'Luis', 'email': 'luis@laboratorio.org', 'password': '123456'})
    assert response.status_code == 200


def test_duplicate_email_not_rejected(client, usuario):
    response = client.post('/usuarios', json={**USUARIO, 'nombre': 'Otra Ana'})
    assert response.status_code == 200


def test_delete_usuario_by_nombre(client, usuario):
    response = client.delete('/usuarios/Ana')
    assert response.status_code == 200
    body = response.get_json()
    assert body['message'] == 'Usuario eliminado'
    assert body['usuario']['_id'] == usuario['_id']

    response = client.delete('/usuarios/Ana')
    assert response.status_code == 404
    assert response.get_json() == {'message': 'Usuario no encontrado'}


def test_password_longer_than_72_bytes(client):
    password = 'x' * 100
    response = client.post('/usuarios', json={'nombre': 'Larga', 'email': 'larga@laboratorio.org', 'password': password})
    assert response.status_code == 200
    assert response.get_json()['password'] != password

    login = client.post('/login', json={'email': 'larga@laboratorio.org', 'password': password})
    assert login.status_code == 200
    assert login.get_json()['token']

    # Solo difiere a partir del byte 72
    login = client.post('/login', json={'email': 'larga@laboratorio.org', 'password': 'x' * 99 + 'y'})
    assert login.status_code == 401


def test_object_email_rejected(client):
    response = client.post('/usuarios', json={'email': {'a': 1}, 'password': 'secreta123'})
    assert response.status_code == 400
    assert {e['param'] for e in response.get_json()['errors']} == {'email'}
