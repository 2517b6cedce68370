import logging
import random
import threading

from seice.services.kv_store import KVStoreError
from seice.services.record_service import RecordService, now_iso

logger = logging.getLogger(__name__)

STATUS_PROCESSING = 'Processando'
STATUS_PROCESSED = 'Processada'
EXTRACTED_ANSWERS = 10
OPTIONS_PER_QUESTION = 4


class ImageService(RecordService):
    kind = 'images'
    label = 'Image'
    created_field = 'uploadedAt'

    @classmethod
    def register(cls, owner_id, data, processing_delay):
        """
        Registra la imagen escaneada y agenda el procesamiento simulado.
        El timer es fire-and-forget: no se cancela ni sobrevive a un
        reinicio del proceso.
        """
        image = cls.create(owner_id, data, status=STATUS_PROCESSING)

        timer = threading.Timer(processing_delay, cls.process, args=(owner_id, image['id']))
        timer.daemon = True
        timer.start()
        return image

    @classmethod
    def process(cls, owner_id, image_id, rng=random):
        try:
            image = cls.get_by_id(owner_id, image_id)
            if not image:
                logger.warning("Imagen %s eliminada antes de procesarse", image_id)
                return None
            image.update({
                "status": STATUS_PROCESSED,
                "processedAt": now_iso(),
                "studentName": f"Aluno {rng.randint(1, 100)}",
                "extractedAnswers": [rng.randrange(OPTIONS_PER_QUESTION) for _ in range(EXTRACTED_ANSWERS)],
            })
            return cls.save(owner_id, image)
        except KVStoreError as e:
            logger.error("Error processing image %s: %s", image_id, e)
            return None
