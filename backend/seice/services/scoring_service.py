"""
Corrección de una entrega en una sola pasada.

Las preguntas de opción múltiple se corrigen comparando índices; las de
desarrollo (essay) no se corrigen solas y quedan marcadas para revisión
manual. El porcentaje sólo cuenta opción múltiple.
"""
import math

from seice.services.question_service import ESSAY, MULTIPLE_CHOICE

MISSING_ANSWER = -1
PENDING_REVIEW = 'pending-review'
GRADED = 'graded'
REVIEWED = 'reviewed'


def round_half_up(value):
    return int(math.floor(value + 0.5))


def is_essay(question):
    return isinstance(question, dict) and question.get('questionType') == ESSAY


def _at(values, index, default):
    if not isinstance(values, list) or index >= len(values):
        return default
    value = values[index]
    return default if value is None else value


def _same_index(submitted, correct):
    # True == 1 en Python; un booleano nunca es un índice válido
    if isinstance(submitted, bool) or isinstance(correct, bool):
        return False
    return submitted == correct


def percentage(score, total):
    if total <= 0:
        return 0
    return round_half_up(score / total * 100)


def score_submission(questions, answers, essay_answers=None):
    score = 0
    total_multiple_choice = 0
    total_essay = 0
    results = []

    for index, question in enumerate(questions):
        question = question if isinstance(question, dict) else {}
        if is_essay(question):
            total_essay += 1
            results.append({
                "question": question.get('question'),
                "questionType": ESSAY,
                "essayAnswer": _at(essay_answers, index, ''),
                "isCorrect": None,
                "requiresManualGrading": True,
            })
            continue

        total_multiple_choice += 1
        submitted = _at(answers, index, MISSING_ANSWER)
        correct = _same_index(submitted, question.get('correctAnswer'))
        if correct:
            score += 1
        results.append({
            "question": question.get('question'),
            "questionType": MULTIPLE_CHOICE,
            "userAnswer": submitted,
            "correctAnswer": question.get('correctAnswer'),
            "isCorrect": correct,
            "explanation": question.get('explanation') or '',
        })

    return {
        "score": score,
        "totalQuestions": total_multiple_choice,
        "totalEssayQuestions": total_essay,
        "percentage": percentage(score, total_multiple_choice),
        "results": results,
        "gradingStatus": PENDING_REVIEW if total_essay else GRADED,
    }
