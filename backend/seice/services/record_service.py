import logging
import uuid
from datetime import datetime, timezone

from seice.services.errors import NotFoundError
from seice.services.kv_store import KVStore, entity_key, owner_prefix

logger = logging.getLogger(__name__)


def now_iso():
    """Timestamp UTC con milisegundos y sufijo Z."""
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def new_id():
    return str(uuid.uuid4())


class RecordService:
    """
    CRUD genérico de una entidad del usuario en el KV store.
    Cada subclase define kind (prefijo de la clave), label (para los
    mensajes 404) y required_fields (campos sin los cuales una fila
    leída se considera inválida y se descarta).
    """
    kind = None
    label = 'Record'
    required_fields = ('id',)
    created_field = 'createdAt'
    not_found_message = None

    @classmethod
    def key(cls, owner_id, entity_id):
        return entity_key(cls.kind, owner_id, entity_id)

    @classmethod
    def get_all(cls, owner_id):
        return [r for r in KVStore.get_by_prefix(owner_prefix(cls.kind, owner_id)) if isinstance(r, dict)]

    @classmethod
    def get_valid(cls, owner_id):
        records = cls.get_all(owner_id)
        valid = [r for r in records if cls.is_valid(r)]
        if len(valid) != len(records):
            logger.warning("%s: %d registros inválidos descartados", cls.kind, len(records) - len(valid))
        return valid

    @classmethod
    def is_valid(cls, record):
        if not isinstance(record, dict):
            return False
        return all(record.get(field) for field in cls.required_fields)

    @classmethod
    def get_by_id(cls, owner_id, entity_id):
        return KVStore.get(cls.key(owner_id, entity_id))

    @classmethod
    def get_or_404(cls, owner_id, entity_id):
        record = cls.get_by_id(owner_id, entity_id)
        if not record:
            raise NotFoundError(cls.not_found_message or f"{cls.label} not found")
        return record

    @classmethod
    def create(cls, owner_id, data, entity_id=None, **server_fields):
        """
        Los campos del servidor (userId, timestamp y los que pase la
        subclase) pisan lo que venga en el body.
        """
        entity_id = entity_id or new_id()
        record = {'id': entity_id}
        record.update(data or {})
        record['id'] = entity_id
        record['userId'] = owner_id
        record[cls.created_field] = now_iso()
        record.update(server_fields)
        KVStore.set(cls.key(owner_id, entity_id), record)
        return record

    @classmethod
    def save(cls, owner_id, record):
        KVStore.set(cls.key(owner_id, record['id']), record)
        return record

    @classmethod
    def update(cls, owner_id, entity_id, data):
        existing = cls.get_or_404(owner_id, entity_id)
        updated = {**existing, **(data or {})}
        updated['id'] = existing.get('id', entity_id)
        updated['updatedAt'] = now_iso()
        return cls.save(owner_id, updated)

    @classmethod
    def delete(cls, owner_id, entity_id):
        return KVStore.delete(cls.key(owner_id, entity_id))
