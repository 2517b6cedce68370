import logging
import time

from seice.services.kv_store import KVStore
from seice.services.record_service import RecordService, now_iso

logger = logging.getLogger(__name__)

STATUS_ACTIVE = 'Ativo'
STATUS_DRAFT = 'Rascunho'

PUBLIC_FIELDS = (
    'id', 'title', 'description', 'timeLimit', 'totalQuestions', 'questionsPerSubject', 'subjects',
)
ANSWER_KEY_FIELDS = ('correctAnswer', 'explanation')


def generate_exam_id():
    """EVAL + últimos seis dígitos del timestamp en milisegundos."""
    return f"EVAL{str(int(time.time() * 1000))[-6:]}"


class ExamService(RecordService):
    kind = 'exams'
    label = 'Exam'
    required_fields = ('id', 'title')

    @classmethod
    def create_exam(cls, owner_id, data):
        return cls.create(
            owner_id,
            data,
            entity_id=generate_exam_id(),
            appliedCount=0,
            studentsCount=0,
            averageScore=0,
            status=STATUS_DRAFT,
        )

    @classmethod
    def find_any(cls, exam_id):
        """Busca el examen entre los de todos los usuarios (acceso público)."""
        for exam in KVStore.get_by_prefix(f"{cls.kind}:"):
            if isinstance(exam, dict) and exam.get('id') == exam_id:
                return exam
        return None

    @classmethod
    def find_for_submission(cls, owner_id, exam_id):
        return cls.get_by_id(owner_id, exam_id) or cls.find_any(exam_id)

    @classmethod
    def register_application(cls, owner_id, exam_id):
        """
        Suma una aplicación al examen. No es atómico con la escritura de la
        submission que la origina.
        """
        exam = cls.get_by_id(owner_id, exam_id) if exam_id else None
        if not exam:
            return None
        exam['appliedCount'] = (exam.get('appliedCount') or 0) + 1
        exam['studentsCount'] = (exam.get('studentsCount') or 0) + 1
        exam['lastApplied'] = now_iso()
        return cls.save(owner_id, exam)

    @staticmethod
    def public_view(exam):
        view = {field: exam.get(field) for field in PUBLIC_FIELDS}
        view['questions'] = [
            {k: v for k, v in q.items() if k not in ANSWER_KEY_FIELDS}
            for q in (exam.get('questions') or [])
            if isinstance(q, dict)
        ]
        return view
