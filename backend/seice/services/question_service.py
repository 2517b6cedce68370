import logging

from seice.services.errors import ServiceError, ValidationError
from seice.services.kv_store import KVStore
from seice.services.record_service import RecordService, new_id, now_iso

logger = logging.getLogger(__name__)

MULTIPLE_CHOICE = 'multiple-choice'
ESSAY = 'essay'


class QuestionService(RecordService):
    kind = 'questions'
    label = 'Question'
    required_fields = ('question', 'subject', 'difficulty')

    @classmethod
    def create_question(cls, owner_id, data):
        if not data.get('question') or not data.get('subject') or not data.get('difficulty'):
            raise ValidationError('Missing required fields: question, subject, difficulty')

        question_id = new_id()
        question = {
            "id": question_id,
            "question": data['question'],
            "subject": data['subject'],
            "difficulty": data['difficulty'],
            "type": data.get('type') or 'Múltipla Escolha',
            "questionType": ESSAY if data.get('questionType') == ESSAY else MULTIPLE_CHOICE,
            "options": data.get('options') or [],
            "correctAnswer": data.get('correctAnswer') or 0,
            "tags": data.get('tags') or [],
            "explanation": data.get('explanation') or '',
            "userId": owner_id,
            "createdAt": now_iso(),
            "usageCount": 0,
            "isActive": True,
        }
        key = cls.key(owner_id, question_id)
        KVStore.set(key, question)

        # Se relee para confirmar que la escritura quedó persistida
        saved = KVStore.get(key)
        if not saved:
            logger.error("La pregunta %s no quedó guardada en el KV store", question_id)
            raise ServiceError('Failed to persist question data')

        logger.info("Question created and verified: %s", question_id)
        return saved

    @classmethod
    def increment_usage(cls, owner_id, question_ids):
        for question_id in question_ids:
            question = cls.get_by_id(owner_id, question_id)
            if not question:
                continue
            question['usageCount'] = (question.get('usageCount') or 0) + 1
            cls.save(owner_id, question)
