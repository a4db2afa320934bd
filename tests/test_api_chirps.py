from fastapi.testclient import TestClient

from chirpy.db.init_db import init_db
from chirpy.main import app


def _auth_headers(client: TestClient, email: str) -> tuple[str, dict]:
    client.post('/api/v1/users', json={'email': email, 'password': 'secret123'})
    login = client.post('/api/v1/login', json={'email': email, 'password': 'secret123'})
    return login.json()['id'], {'Authorization': f"Bearer {login.json()['token']}"}


def test_create_chirp_cleans_profanity():
    init_db(drop_all=True)
    with TestClient(app) as client:
        user_id, headers = _auth_headers(client, 'a@x.com')
        created = client.post(
            '/api/v1/chirps',
            json={'body': 'This is a kerfuffle opinion I need to share with the world'},
            headers=headers,
        )
        assert created.status_code == 201
        assert created.json()['body'] == 'This is a **** opinion I need to share with the world'
        assert created.json()['user_id'] == user_id

        fetched = client.get(f"/api/v1/chirps/{created.json()['id']}")
        assert fetched.status_code == 200
        assert fetched.json()['body'] == created.json()['body']


def test_create_chirp_rejects_long_body():
    init_db(drop_all=True)
    with TestClient(app) as client:
        _, headers = _auth_headers(client, 'a@x.com')
        r = client.post('/api/v1/chirps', json={'body': 'x' * 141}, headers=headers)
        assert r.status_code == 400
        assert r.json()['detail'] == 'Chirp is too long'


def test_list_chirps_filters_and_sorts():
    init_db(drop_all=True)
    with TestClient(app) as client:
        a_id, a_headers = _auth_headers(client, 'a@x.com')
        _, b_headers = _auth_headers(client, 'b@x.com')
        client.post('/api/v1/chirps', json={'body': 'first'}, headers=a_headers)
        client.post('/api/v1/chirps', json={'body': 'second'}, headers=b_headers)
        client.post('/api/v1/chirps', json={'body': 'third'}, headers=a_headers)

        everything = client.get('/api/v1/chirps').json()
        assert [c['body'] for c in everything] == ['first', 'second', 'third']

        newest_first = client.get('/api/v1/chirps', params={'sort': 'desc'}).json()
        assert [c['body'] for c in newest_first] == ['third', 'second', 'first']

        mine = client.get('/api/v1/chirps', params={'author_id': a_id}).json()
        assert [c['body'] for c in mine] == ['first', 'third']


def test_get_missing_chirp_is_not_found():
    init_db(drop_all=True)
    with TestClient(app) as client:
        assert client.get('/api/v1/chirps/does-not-exist').status_code == 404


def test_delete_chirp_of_other_account_is_forbidden():
    init_db(drop_all=True)
    with TestClient(app) as client:
        _, a_headers = _auth_headers(client, 'a@x.com')
        _, b_headers = _auth_headers(client, 'b@x.com')
        chirp_id = client.post('/api/v1/chirps', json={'body': 'mine'}, headers=b_headers).json()['id']

        forbidden = client.delete(f"/api/v1/chirps/{chirp_id}", headers=a_headers)
        assert forbidden.status_code == 403

        assert client.delete(f"/api/v1/chirps/{chirp_id}").status_code == 401
        assert client.delete(f"/api/v1/chirps/{chirp_id}", headers=b_headers).status_code == 204
        assert client.get(f"/api/v1/chirps/{chirp_id}").status_code == 404


def test_create_chirp_after_account_deleted_is_unauthorized():
    init_db(drop_all=True)
    with TestClient(app) as client:
        _, headers = _auth_headers(client, 'a@x.com')
        assert client.post('/api/v1/admin/reset').status_code == 200

        r = client.post('/api/v1/chirps', json={'body': 'still here?'}, headers=headers)
        assert r.status_code == 401
        assert r.json()['detail'] == 'Unauthorized'
