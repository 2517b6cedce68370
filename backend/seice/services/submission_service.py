import logging

from seice.services.errors import NotFoundError, ValidationError
from seice.services.exam_service import ExamService
from seice.services.question_service import ESSAY
from seice.services.record_service import RecordService, new_id, now_iso
from seice.services.scoring_service import REVIEWED, score_submission

logger = logging.getLogger(__name__)

EXPORT_FIELDS = {
    "studentName": 'N/A',
    "examTitle": 'N/A',
    "score": 0,
    "totalQuestions": 0,
    "percentage": 0,
    "timeSpent": 0,
    "gradingStatus": 'pending',
}


class SubmissionService(RecordService):
    kind = 'submissions'
    label = 'Submission'
    required_fields = ('id',)
    created_field = 'submittedAt'

    @classmethod
    def submit(cls, owner_id, exam_id, data):
        """
        Corrige y guarda una entrega. Cada llamada crea un registro nuevo,
        reenviar no pisa la entrega anterior.
        """
        exam = ExamService.find_for_submission(owner_id, exam_id)
        if not exam:
            raise NotFoundError('Exam not found')

        questions = exam.get('questions')
        if not isinstance(questions, list):
            raise ValidationError('Exam has no questions')

        answers = data.get('answers')
        essay_answers = data.get('essayAnswers')
        outcome = score_submission(questions, answers, essay_answers)

        submission = {
            "id": new_id(),
            "examId": exam['id'],
            "examTitle": exam.get('title') or 'Simulado',
            "userId": owner_id,
            "answers": answers,
            "essayAnswers": essay_answers or [],
            **outcome,
            "submittedAt": now_iso(),
        }
        for optional in ('studentId', 'studentName', 'timeSpent'):
            if data.get(optional) is not None:
                submission[optional] = data[optional]

        cls.save(owner_id, submission)
        logger.info(
            "Submission saved: %s, score: %s/%s, percentage: %s%%",
            submission['id'], outcome['score'], outcome['totalQuestions'], outcome['percentage'],
        )
        return submission

    @classmethod
    def record(cls, owner_id, data):
        """Guarda una entrega ya armada por el cliente y actualiza el examen."""
        submission = cls.create(owner_id, data)
        ExamService.register_application(owner_id, data.get('examId'))
        return submission

    @classmethod
    def review(cls, owner_id, submission_id, data, reviewer_id):
        submission = cls.get_or_404(owner_id, submission_id)

        essay_grades = data.get('essayGrades') or {}
        if not isinstance(essay_grades, dict):
            raise ValidationError('essayGrades must be an object')
        if essay_grades:
            submission['results'] = _apply_essay_grades(submission.get('results') or [], essay_grades)
            submission['essayScore'] = sum(
                1 for r in submission['results'] if r.get('questionType') == ESSAY and r.get('isCorrect') is True
            )

        submission.update({
            "reviewNotes": data.get('reviewNotes'),
            "feedback": data.get('feedback'),
            "gradingStatus": REVIEWED,
            "reviewedAt": now_iso(),
            "reviewedBy": reviewer_id,
        })
        return cls.save(owner_id, submission)

    @classmethod
    def bulk_export(cls, owner_id, submission_ids, fmt='csv'):
        if not isinstance(submission_ids, list) or not submission_ids:
            raise ValidationError('Submission IDs are required')

        submissions = []
        for submission_id in submission_ids:
            submission = cls.get_by_id(owner_id, submission_id)
            if submission:
                submissions.append(submission)

        rows = []
        for sub in submissions:
            row = {field: sub.get(field) or default for field, default in EXPORT_FIELDS.items()}
            row['submittedAt'] = sub.get('submittedAt')
            rows.append(row)

        return {
            "format": fmt,
            "generatedAt": now_iso(),
            "totalSubmissions": len(submissions),
            "data": rows,
        }


def _apply_essay_grades(results, essay_grades):
    results = [dict(r) for r in results]
    for raw_index, is_correct in essay_grades.items():
        try:
            index = int(raw_index)
        except (TypeError, ValueError):
            raise ValidationError(f"Invalid question index: {raw_index}") from None
        if index < 0 or index >= len(results) or results[index].get('questionType') != ESSAY:
            raise ValidationError(f"Question {raw_index} is not an essay question")
        if not isinstance(is_correct, bool):
            raise ValidationError(f"Grade for question {raw_index} must be true or false")
        results[index]['isCorrect'] = is_correct
        results[index]['requiresManualGrading'] = False
    return results
