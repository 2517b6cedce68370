import itertools

import fakeredis
import pytest

from seice.app import create_app
from seice.config.database import init_redis
from seice.services import exam_service

API = '/api/v1'


@pytest.fixture
def redis_server():
    return fakeredis.FakeServer()


@pytest.fixture
def redis_client(redis_server):
    return fakeredis.FakeRedis(server=redis_server, decode_responses=True)


@pytest.fixture
def kv(redis_client):
    """KV store apuntando a fakeredis, para tests de servicios sin app."""
    init_redis({}, client=redis_client)
    return redis_client


@pytest.fixture(autouse=True)
def unique_exam_ids(monkeypatch):
    # Dos exámenes creados en el mismo milisegundo comparten id
    counter = itertools.count(1)
    monkeypatch.setattr(exam_service, 'generate_exam_id', lambda: f"EVAL{next(counter):06d}")


@pytest.fixture
def app(redis_client):
    return create_app(
        {
            'TESTING': True,
            'IMAGE_PROCESSING_DELAY': 3600,
            'LOG_LEVEL': 'WARNING',
        },
        redis_client=redis_client,
    )


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def api():
    return lambda path: f"{API}{path}"


@pytest.fixture
def make_professor(client, api):
    def _make(email='prof@escola.br', name='Prof. Teste', password='segredo'):
        client.post(api('/signup'), json={"name": name, "email": email, "password": password})
        res = client.post(api('/login'), json={"email": email, "password": password})
        body = res.get_json()
        return {
            "id": body['user']['id'],
            "token": body['accessToken'],
            "headers": {"Authorization": f"Bearer {body['accessToken']}"},
        }
    return _make


@pytest.fixture
def professor(make_professor):
    return make_professor()


@pytest.fixture
def headers(professor):
    return professor['headers']
