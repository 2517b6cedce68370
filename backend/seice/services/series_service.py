import logging
from datetime import datetime

from seice.services.errors import ValidationError
from seice.services.record_service import RecordService, new_id, now_iso

logger = logging.getLogger(__name__)

DUPLICATE_CODE = 'Código já existe. Escolha outro código.'


def _to_int(value, default=None):
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


class SeriesService(RecordService):
    kind = 'series'
    label = 'Série'
    not_found_message = 'Série não encontrada'
    required_fields = ('id', 'code')

    @classmethod
    def get_sorted(cls, owner_id):
        return sorted(cls.get_all(owner_id), key=lambda s: s.get('createdAt') or '', reverse=True)

    @classmethod
    def _code_taken(cls, owner_id, code, exclude_id=None):
        wanted = code.strip().lower()
        for serie in cls.get_all(owner_id):
            if serie.get('id') == exclude_id:
                continue
            if str(serie.get('code') or '').strip().lower() == wanted:
                return True
        return False

    @classmethod
    def create_serie(cls, owner_id, data):
        name = data.get('name')
        code = data.get('code')
        if not isinstance(name, str) or not isinstance(code, str) or not name.strip() or not code.strip():
            raise ValidationError('Nome e código são obrigatórios')

        if cls._code_taken(owner_id, code):
            raise ValidationError(DUPLICATE_CODE)

        now = now_iso()
        serie = {
            "id": new_id(),
            "name": name.strip(),
            "code": code.strip().upper(),
            "description": (data.get('description') or '').strip(),
            "level": data.get('level') or 'fundamental1',
            "grade": _to_int(data.get('grade'), 1) or 1,
            "isActive": data['isActive'] if data.get('isActive') is not None else True,
            "studentCount": 0,
            "academicYear": data.get('academicYear') or str(datetime.now().year),
            "createdBy": owner_id,
            "createdAt": now,
            "updatedAt": now,
        }
        max_students = _to_int(data.get('maxStudents'))
        if max_students:
            serie['maxStudents'] = max_students

        return cls.save(owner_id, serie)

    @classmethod
    def update_serie(cls, owner_id, serie_id, data):
        existing = cls.get_or_404(owner_id, serie_id)

        code = data.get('code')
        if code and code != existing.get('code'):
            if cls._code_taken(owner_id, str(code), exclude_id=serie_id):
                raise ValidationError(DUPLICATE_CODE)

        updated = {**existing, **data}
        # id, creador y fecha de alta no se pueden pisar desde el body
        updated['id'] = serie_id
        updated['createdBy'] = existing.get('createdBy')
        updated['createdAt'] = existing.get('createdAt')
        updated['updatedAt'] = now_iso()
        updated = {k: v for k, v in updated.items() if v is not None}

        return cls.save(owner_id, updated)

    @classmethod
    def delete_serie(cls, owner_id, serie_id):
        serie = cls.get_or_404(owner_id, serie_id)
        if (_to_int(serie.get('studentCount'), 0) or 0) > 0:
            raise ValidationError('Não é possível excluir uma série que possui alunos')
        cls.delete(owner_id, serie_id)

    @classmethod
    def adjust_student_count(cls, owner_id, serie_id, delta):
        """
        Suma delta al contador de alumnos. Es una escritura independiente
        de la del alumno: si falla, el contador queda desfasado.
        """
        serie = cls.get_by_id(owner_id, serie_id)
        if not serie:
            logger.warning("Serie %s inexistente, no se actualiza studentCount", serie_id)
            return None
        current = _to_int(serie.get('studentCount'), 0) or 0
        serie['studentCount'] = max(0, current + delta)
        serie['updatedAt'] = now_iso()
        return cls.save(owner_id, serie)
