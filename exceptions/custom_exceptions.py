from fastapi import status

class BaseAppException(Exception):
    """Base class for all app-specific exceptions."""
    def __init__(self, message: str, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.message = message
        self.status_code = status_code
        super().__init__(message)

class BusinessValidationException(BaseAppException):
    """Request is missing required data; detected before any provider call."""
    def __init__(self, message: str):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)
