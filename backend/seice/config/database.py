import logging

import redis

logger = logging.getLogger(__name__)

redis_client = None


def init_redis(config, client=None):
    """
    Abre la conexión a Redis a partir de la config de Flask.
    Si se recibe un cliente (tests), se usa tal cual.
    """
    global redis_client
    if client is not None:
        redis_client = client
        return redis_client

    try:
        if config.get('REDIS_URL'):
            candidate = redis.Redis.from_url(
                config['REDIS_URL'], decode_responses=True, socket_connect_timeout=5
            )
        else:
            candidate = redis.Redis(
                host=config['REDIS_HOST'],
                port=config['REDIS_PORT'],
                db=config['REDIS_DB'],
                decode_responses=True,
                socket_connect_timeout=5,
            )
        candidate.ping()
        redis_client = candidate
        logger.info("Redis conectado exitosamente")
    except redis.RedisError as e:
        logger.warning("No se pudo conectar a Redis: %s", e)
        logger.warning("Las rutas de lectura devolverán colecciones vacías hasta que Redis esté disponible")
        redis_client = None
    return redis_client


def get_redis():
    if redis_client is None:
        raise ConnectionError("Redis no está disponible. Verifica la conexión.")
    return redis_client
