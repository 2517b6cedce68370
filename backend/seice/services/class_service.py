from seice.services.record_service import RecordService


class ClassService(RecordService):
    kind = 'classes'
    label = 'Class'

    @classmethod
    def create_class(cls, owner_id, data):
        return cls.create(owner_id, data, studentCount=0)
