"""Domain errors raised by the services and serialized as ``{"error": ...}``."""


class TodoApiError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Unauthenticated(TodoApiError):
    status_code = 401


class NotFound(TodoApiError):
    # flat error mapping: missing ids are reported as 400
    status_code = 400


class Conflict(TodoApiError):
    status_code = 400


class InvalidInput(TodoApiError):
    status_code = 400


class ImportFailed(TodoApiError):
    status_code = 400
