"""
Application exceptions for the sodam backend
"""


class SodamException(Exception):
    """Base exception for the sodam backend"""
    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(SodamException):
    """Settings could not be bound at startup"""
    pass


class BusinessError(SodamException):
    """A business rule rejected the request"""
    pass


class EntityNotFoundError(BusinessError):
    """Requested entity or code does not exist"""
    pass


class InvalidOperationError(BusinessError):
    """Operation is not allowed for the given input or state"""
    pass
