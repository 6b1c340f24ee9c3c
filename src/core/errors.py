"""
Custom exceptions and error handling for DreamBody.

Defines application-specific exceptions with error codes for consistent
error handling across Lambda resolvers and client communication.

Usage:
    from core.errors import NotFoundError, ErrorCode

    raise NotFoundError(f"User profile not found for userId: {user_id}")
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Data access errors
    NOT_FOUND = "NOT_FOUND"
    ALREADY_EXISTS = "ALREADY_EXISTS"

    # Routing errors
    UNRECOGNIZED_OPERATION = "UNRECOGNIZED_OPERATION"

    # Plan generation errors
    EXTRACTION_FAILED = "EXTRACTION_FAILED"
    PUBLISH_FAILED = "PUBLISH_FAILED"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_PAYLOAD = "INVALID_PAYLOAD"

    # System errors
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.NOT_FOUND: "The requested record does not exist.",
    ErrorCode.ALREADY_EXISTS: "A profile already exists for this user.",
    ErrorCode.UNRECOGNIZED_OPERATION: "This operation is not supported.",
    ErrorCode.EXTRACTION_FAILED: "Unable to generate a plan right now. Please try again.",
    ErrorCode.PUBLISH_FAILED: "Your plan could not be delivered. Please try again.",
    ErrorCode.VALIDATION_ERROR: "Your request contains invalid information. Please check and try again.",
    ErrorCode.INVALID_PAYLOAD: "The plan event was incomplete and has been discarded.",
    ErrorCode.CONFIGURATION_ERROR: "The service is not configured correctly. Please contact support.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class DreamBodyError(Exception):
    """Base exception for all DreamBody errors."""

    default_code = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, code: ErrorCode | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class NotFoundError(DreamBodyError):
    """Requested record is absent."""

    default_code = ErrorCode.NOT_FOUND


class AlreadyExistsError(DreamBodyError):
    """Duplicate creation attempt."""

    default_code = ErrorCode.ALREADY_EXISTS


class UnrecognizedOperationError(DreamBodyError):
    """Resolver received a field name it does not route."""

    default_code = ErrorCode.UNRECOGNIZED_OPERATION


class ExtractionError(DreamBodyError):
    """Model output contained no parseable JSON object."""

    default_code = ErrorCode.EXTRACTION_FAILED


class InvalidPayloadError(DreamBodyError):
    """Plan event is missing required sub-objects."""

    default_code = ErrorCode.INVALID_PAYLOAD


class ValidationError(DreamBodyError):
    """Request arguments failed schema validation."""

    default_code = ErrorCode.VALIDATION_ERROR


class ConfigurationError(DreamBodyError):
    """A required setting is empty."""

    default_code = ErrorCode.CONFIGURATION_ERROR


class EventPublishError(DreamBodyError):
    """EventBridge rejected the published entry."""

    default_code = ErrorCode.PUBLISH_FAILED
