from seice.services.errors import ValidationError
from seice.services.record_service import RecordService
from seice.services.series_service import SeriesService


class StudentService(RecordService):
    kind = 'students'
    label = 'Student'
    required_fields = ('id', 'name')

    @classmethod
    def create_many(cls, owner_id, students):
        """
        Alta masiva: cada fila recibe su propio UUID. Las filas con serieId
        suman uno al contador de la serie.
        """
        if not isinstance(students, list):
            raise ValidationError('Students must be an array')

        saved = []
        for row in students:
            if not isinstance(row, dict):
                raise ValidationError('Each student must be an object')
            student = cls.create(owner_id, row, status='active')
            if student.get('serieId'):
                SeriesService.adjust_student_count(owner_id, student['serieId'], 1)
            saved.append(student)
        return saved

    @classmethod
    def update_student(cls, owner_id, student_id, data):
        previous = cls.get_or_404(owner_id, student_id)
        updated = cls.update(owner_id, student_id, data)

        old_serie, new_serie = previous.get('serieId'), updated.get('serieId')
        if old_serie != new_serie:
            if old_serie:
                SeriesService.adjust_student_count(owner_id, old_serie, -1)
            if new_serie:
                SeriesService.adjust_student_count(owner_id, new_serie, 1)
        return updated

    @classmethod
    def delete_student(cls, owner_id, student_id):
        student = cls.get_by_id(owner_id, student_id)
        cls.delete(owner_id, student_id)
        if student and student.get('serieId'):
            SeriesService.adjust_student_count(owner_id, student['serieId'], -1)

    @classmethod
    def get_by_serie(cls, owner_id, serie_id):
        return [s for s in cls.get_all(owner_id) if s.get('serieId') == serie_id]
