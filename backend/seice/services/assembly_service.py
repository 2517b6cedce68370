"""
Armado de simulados a partir del banco de preguntas.

Por cada materia se sortean questionsPerSubject preguntas; después se
puede mezclar el orden global y el de las opciones de cada pregunta. El
generador aleatorio es inyectable para que el armado sea reproducible.
"""
import logging
import random

from seice.services.errors import ValidationError
from seice.services.exam_service import ExamService
from seice.services.question_service import QuestionService
from seice.services.scoring_service import round_half_up

logger = logging.getLogger(__name__)

MIXED_DIFFICULTY = 'Misto'
MINUTES_PER_QUESTION = 1.5

DEFAULTS = {
    "questionsPerSubject": 10,
    "difficulty": MIXED_DIFFICULTY,
    "timeLimit": 120,
    "shuffleQuestions": True,
    "shuffleOptions": True,
    "showResults": True,
    "allowReview": True,
}


def _positive_int(value, field):
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be an integer") from None
    if number < 1:
        raise ValidationError(f"{field} must be at least 1")
    return number


def candidates_for(bank, subject, difficulty=MIXED_DIFFICULTY):
    candidates = [
        q for q in bank
        if q.get('subject') == subject and q.get('isActive', True) is not False
    ]
    if difficulty and difficulty != MIXED_DIFFICULTY:
        candidates = [q for q in candidates if q.get('difficulty') == difficulty]
    return candidates


def subject_availability(bank, questions_per_subject, difficulty=MIXED_DIFFICULTY):
    subjects = sorted({q.get('subject') for q in bank if q.get('subject')})
    availability = []
    for subject in subjects:
        available = len(candidates_for(bank, subject, difficulty))
        availability.append({
            "subject": subject,
            "available": available,
            "status": 'ready' if available >= questions_per_subject else 'insufficient',
        })
    return availability


def shuffle_options(question, rng):
    """Mezcla las opciones y reubica correctAnswer en su nueva posición."""
    options = question.get('options') or []
    if len(options) < 2:
        return dict(question)

    order = list(range(len(options)))
    rng.shuffle(order)
    shuffled = dict(question)
    shuffled['options'] = [options[i] for i in order]

    correct = question.get('correctAnswer')
    # JSON admite 1.0 como índice
    if isinstance(correct, float) and correct.is_integer():
        correct = int(correct)
    if isinstance(correct, int) and not isinstance(correct, bool) and 0 <= correct < len(options):
        shuffled['correctAnswer'] = order.index(correct)
    return shuffled


def assemble_questions(bank, subjects, questions_per_subject, difficulty=MIXED_DIFFICULTY,
                       shuffle_questions=True, shuffle_option_order=True, rng=None):
    rng = rng or random.Random()

    short = []
    selected = []
    for subject in subjects:
        candidates = candidates_for(bank, subject, difficulty)
        if len(candidates) < questions_per_subject:
            short.append(f"{subject} ({len(candidates)}/{questions_per_subject})")
            continue
        # El SCAN de Redis no garantiza orden; se ordena para que la semilla alcance
        candidates.sort(key=lambda q: str(q.get('id')))
        selected.extend(rng.sample(candidates, questions_per_subject))

    if short:
        raise ValidationError('Not enough questions for: ' + ', '.join(short))

    if shuffle_questions:
        rng.shuffle(selected)
    if shuffle_option_order:
        selected = [shuffle_options(q, rng) for q in selected]
    return selected


class AssemblyService:
    @staticmethod
    def availability(owner_id, questions_per_subject=None, difficulty=None):
        per_subject = _positive_int(questions_per_subject or DEFAULTS['questionsPerSubject'], 'questionsPerSubject')
        bank = QuestionService.get_valid(owner_id)
        return subject_availability(bank, per_subject, difficulty or MIXED_DIFFICULTY)

    @staticmethod
    def create_simulado(owner_id, data, rng=None):
        options = {**DEFAULTS, **{k: v for k, v in data.items() if v is not None}}

        subjects = options.get('subjects')
        if not options.get('title') or not options.get('grade'):
            raise ValidationError('Title and grade are required')
        if not isinstance(subjects, list) or not subjects:
            raise ValidationError('Select at least one subject')

        per_subject = _positive_int(options['questionsPerSubject'], 'questionsPerSubject')
        bank = QuestionService.get_valid(owner_id)
        questions = assemble_questions(
            bank,
            subjects,
            per_subject,
            difficulty=options['difficulty'],
            shuffle_questions=bool(options['shuffleQuestions']),
            shuffle_option_order=bool(options['shuffleOptions']),
            rng=rng,
        )

        total = len(questions)
        exam = ExamService.create_exam(owner_id, {
            "title": options['title'],
            "description": options.get('description') or '',
            "grade": options['grade'],
            "subjects": subjects,
            "questions": questions,
            "timeLimit": options['timeLimit'],
            "type": 'simulado',
            "difficulty": options['difficulty'],
            "totalQuestions": total,
            "questionsPerSubject": per_subject,
            "estimatedTime": round_half_up(total * MINUTES_PER_QUESTION),
            "settings": {
                "questionsPerSubject": per_subject,
                "shuffleQuestions": bool(options['shuffleQuestions']),
                "shuffleOptions": bool(options['shuffleOptions']),
                "showResults": bool(options['showResults']),
                "allowReview": bool(options['allowReview']),
            },
        })

        QuestionService.increment_usage(owner_id, [q['id'] for q in questions if q.get('id')])
        logger.info("Simulado %s creado: %d preguntas de %d materias", exam['id'], total, len(subjects))
        return exam
