import jwt

from laboratorio.services.auth_service import create_access_token, decode_access_token

CREDENCIALES = {'email': 'ana@laboratorio.org', 'password': 'secreta123'}


def test_login_returns_token(client, usuario):
    response = client.post('/login', json=CREDENCIALES)
    assert response.status_code == 200
    body = response.get_json()
    assert body['message'] == 'Login exitoso'
    assert body['token']


def test_token_embeds_user_id(app, usuario, token):
    with app.app_context():
        payload = decode_access_token(token)
    assert payload['id'] == usuario['_id']
    assert payload['exp'] - payload['iat'] == 3600


def test_wrong_password_and_unknown_email_look_the_same(client, usuario):
    ok = client.post('/login', json=CREDENCIALES).get_json()
    wrong = client.post('/login', json={**CREDENCIALES, 'password': 'incorrecta'})
    unknown = client.post('/login', json={'email': 'nadie@laboratorio.org', 'password': 'secreta123'})

    assert wrong.status_code == unknown.status_code == 401
    assert wrong.get_json() == unknown.get_json() == {'message': 'Credenciales inválidas', 'token': None}
    assert set(wrong.get_json()) == set(ok)


def test_login_without_password(client, usuario):
    response = client.post('/login', json={'email': CREDENCIALES['email']})
    assert response.status_code == 401


def test_protected_items_with_token(client, token):
    client.post('/items', json={'nombre': 'Microscope-1', 'tipo': 'optical', 'estado': 'available'})
    response = client.get('/items/protegidos', headers={'Authorization': f'Bearer {token}'})
    assert response.status_code == 200
    assert [i['nombre'] for i in response.get_json()] == ['Microscope-1']


def test_protected_items_without_token(client):
    response = client.get('/items/protegidos')
    assert response.status_code == 403
    assert response.get_json() == {'message': 'Token no proporcionado'}


def test_protected_items_with_other_scheme(client, token):
    response = client.get('/items/protegidos', headers={'Authorization': f'Basic {token}'})
    assert response.status_code == 403


def test_protected_items_with_corrupted_token(client, token):
    response = client.get('/items/protegidos', headers={'Authorization': f'Bearer {token[:-4]}abcd'})
    assert response.status_code == 401
    assert response.get_json() == {'message': 'Token inválido'}


def test_protected_items_with_expired_token(app, client, usuario):
    with app.app_context():
        expired = create_access_token(usuario['_id'], expires_seconds=-60)
    response = client.get('/items/protegidos', headers={'Authorization': f'Bearer {expired}'})
    assert response.status_code == 401


def test_token_signed_with_another_secret(client, usuario):
    forged = jwt.encode({'id': usuario['_id']}, 'otro-secreto', algorithm='HS256')
    response = client.get('/items/protegidos', headers={'Authorization': f'Bearer {forged}'})
    assert response.status_code == 401
