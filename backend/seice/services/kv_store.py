"""
Fachada clave-valor sobre Redis.

Todas las entidades se guardan como JSON bajo claves con la forma
{tipo}:{ownerId}:{entityId}. Redis no valida nada del contenido, así que
las lecturas por prefijo pueden devolver registros incompletos; los
servicios los filtran después de leer.
"""
import json
import logging

import redis

from seice.config.database import get_redis

logger = logging.getLogger(__name__)

_GLOB_CHARS = '\\*?[]'


class KVStoreError(Exception):
    """Fallo del almacenamiento (conexión, timeout, comando rechazado)."""


def entity_key(kind, owner_id, entity_id):
    return f"{kind}:{owner_id}:{entity_id}"


def owner_prefix(kind, owner_id):
    return f"{kind}:{owner_id}:"


def _escape_glob(prefix):
    return ''.join('\\' + ch if ch in _GLOB_CHARS else ch for ch in prefix)


def _client():
    try:
        return get_redis()
    except ConnectionError as e:
        raise KVStoreError(str(e)) from e


class KVStore:
    @staticmethod
    def get(key):
        try:
            raw = _client().get(key)
        except redis.RedisError as e:
            raise KVStoreError(f"GET {key}: {e}") from e
        if raw is None:
            return None
        return json.loads(raw)

    @staticmethod
    def set(key, value, ttl=None):
        payload = json.dumps(value, default=str)
        try:
            if ttl:
                _client().setex(key, int(ttl), payload)
            else:
                _client().set(key, payload)
        except redis.RedisError as e:
            raise KVStoreError(f"SET {key}: {e}") from e

    @staticmethod
    def delete(key):
        try:
            return _client().delete(key) > 0
        except redis.RedisError as e:
            raise KVStoreError(f"DEL {key}: {e}") from e

    @staticmethod
    def get_by_prefix(prefix):
        """Devuelve los valores (no las claves) de todo lo que empieza con prefix."""
        client = _client()
        try:
            keys = list(client.scan_iter(match=_escape_glob(prefix) + '*', count=500))
            raw_values = client.mget(keys) if keys else []
        except redis.RedisError as e:
            raise KVStoreError(f"SCAN {prefix}: {e}") from e

        values = []
        for key, raw in zip(keys, raw_values):
            if raw is None:
                # La clave expiró o se borró entre el SCAN y el MGET
                continue
            try:
                values.append(json.loads(raw))
            except json.JSONDecodeError:
                logger.warning("Valor no JSON en %s, se ignora", key)
        return values
