from seice.services.record_service import RecordService


class ApplicationService(RecordService):
    """Aplicaciones: un examen entregado a un grupo en una fecha."""
    kind = 'applications'
    label = 'Application'

    @classmethod
    def create_application(cls, owner_id, data):
        return cls.create(
            owner_id,
            data,
            appliedCount=0,
            completedCount=0,
            status=data.get('status') or 'active',
        )
