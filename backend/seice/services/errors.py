class ServiceError(Exception):
    status_code = 500


class ValidationError(ServiceError):
    status_code = 400


class AuthError(ServiceError):
    status_code = 401


class NotFoundError(ServiceError):
    status_code = 404
