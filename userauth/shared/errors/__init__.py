from .base import AppError, DomainError, InfrastructureError, ValidationError
from .http import handle_app_error, register_error_handler
from .validation import format_field_errors
from .validation_types import ValidationErrorType

__all__ = [
    "AppError",
    "DomainError",
    "InfrastructureError",
    "ValidationError",
    "ValidationErrorType",
    "format_field_errors",
    "handle_app_error",
    "register_error_handler",
]
