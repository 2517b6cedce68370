import os


class Settings:
    """
    Configuración de la API leída del entorno.
    Se carga en Flask con app.config.from_object(Settings); los tests
    pisan valores pasando un dict a create_app.
    """
    # --- REDIS ---
    REDIS_URL = os.getenv('REDIS_URL')
    REDIS_HOST = os.getenv('REDIS_HOST', 'localhost')
    REDIS_PORT = int(os.getenv('REDIS_PORT', 6379))
    REDIS_DB = int(os.getenv('REDIS_DB', 0))

    # --- HTTP ---
    API_PREFIX = os.getenv('API_PREFIX', '/api/v1')
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')
    PORT = int(os.getenv('PORT', 5000))
    DEBUG = os.getenv('DEBUG', 'false').lower() == 'true'

    # Sesiones: 24 horas, igual que session:{id} en Redis
    SESSION_TTL = int(os.getenv('SESSION_TTL', 86400))

    # Segundos hasta que la imagen escaneada pasa a "Processada"
    IMAGE_PROCESSING_DELAY = float(os.getenv('IMAGE_PROCESSING_DELAY', 3.0))

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
