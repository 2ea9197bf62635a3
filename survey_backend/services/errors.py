# survey_backend/services/errors.py


class ApiError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingParameter(ApiError):
    status_code = 400


class InvalidParameter(ApiError):
    status_code = 400


class InternalFailure(ApiError):
    status_code = 500
