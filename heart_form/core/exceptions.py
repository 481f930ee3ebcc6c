from typing import Dict


class FormValidationError(Exception):
    """Raised when one or more form fields fail to parse or are out of range"""

    def __init__(self, field_errors: Dict[str, str]):
        self.field_errors = dict(field_errors)
        super().__init__(f"Invalid fields: {', '.join(self.field_errors)}")


class PredictionServiceError(Exception):
    """Base class for failures talking to the prediction service"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class PredictionTransportError(PredictionServiceError):
    """Network failure or non-2xx response"""

    def __init__(self, message: str, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(PredictionServiceError):
    """2xx response whose body does not have the expected shape"""
