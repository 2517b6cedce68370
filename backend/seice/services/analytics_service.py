from seice.services.exam_service import STATUS_ACTIVE, ExamService
from seice.services.scoring_service import GRADED, REVIEWED, round_half_up
from seice.services.student_service import StudentService
from seice.services.submission_service import SubmissionService

PASSING_PERCENTAGE = 60
RECENT_ACTIVITY = 10

# (nombre, mínimo inclusive, máximo exclusivo)
PERFORMANCE_BANDS = (
    ('excellent', 80, None),
    ('veryGood', 70, 80),
    ('good', 60, 70),
    ('regular', 50, 60),
    ('insufficient', None, 50),
)


def _pct(submission):
    # Las entregas de POST /submissions guardan el body tal cual
    value = submission.get('percentage')
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value


def _mean(values):
    return sum(values) / len(values) if values else 0


class AnalyticsService:
    @staticmethod
    def dashboard_stats(owner_id):
        students = StudentService.get_all(owner_id)
        exams = ExamService.get_all(owner_id)
        submissions = SubmissionService.get_all(owner_id)

        return {
            "totalStudents": len(students),
            "totalExams": len(exams),
            "totalSubmissions": len(submissions),
            "activeExams": len([e for e in exams if e.get('status') == STATUS_ACTIVE]),
            "averageScore": _mean([_pct(s) for s in submissions]),
        }

    @staticmethod
    def grading_stats(owner_id):
        submissions = SubmissionService.get_all(owner_id)
        total = len(submissions)
        percentages = [_pct(s) for s in submissions]

        distribution = {}
        for name, low, high in PERFORMANCE_BANDS:
            distribution[name] = len([
                p for p in percentages
                if (low is None or p >= low) and (high is None or p < high)
            ])

        recent = sorted(submissions, key=lambda s: s.get('submittedAt') or '', reverse=True)[:RECENT_ACTIVITY]

        return {
            "totalSubmissions": total,
            "gradedSubmissions": len([s for s in submissions if s.get('gradingStatus') == GRADED]),
            "reviewedSubmissions": len([s for s in submissions if s.get('gradingStatus') == REVIEWED]),
            "averageScore": round_half_up(_mean(percentages)) if total else 0,
            "passRate": round_half_up(
                len([p for p in percentages if p >= PASSING_PERCENTAGE]) / total * 100
            ) if total else 0,
            "performanceDistribution": distribution,
            "recentActivity": [
                {
                    "id": s.get('id'),
                    "studentName": s.get('studentName') or 'N/A',
                    "examTitle": s.get('examTitle') or 'N/A',
                    "percentage": _pct(s),
                    "submittedAt": s.get('submittedAt'),
                }
                for s in recent
            ],
        }
