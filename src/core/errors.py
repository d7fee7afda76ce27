"""
Custom exceptions and error handling for Hello Lambda.

Defines application-specific exceptions with error codes so failures carry
a client-safe message alongside the internal one.

Usage:
    from core.errors import ConfigurationError

    raise ConfigurationError("LOG_LEVEL=VERBOSE is not a log level")
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.CONFIGURATION_ERROR: "The service is misconfigured. Please contact support.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class HelloLambdaError(Exception):
    """Base exception for all Hello Lambda errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class ConfigurationError(HelloLambdaError):
    """Environment configuration is invalid."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.CONFIGURATION_ERROR):
        super().__init__(message, code=code)
