from .base import (
    AdminAccessDeniedError,
    AdminAuthenticationError,
    AppError,
    DomainError,
    InvalidCartInputError,
    ProductNotFoundError,
    RateLimitedError,
    ValidationError,
)
from .http import register_error_handler

__all__ = [
    "AdminAccessDeniedError",
    "AdminAuthenticationError",
    "AppError",
    "DomainError",
    "InvalidCartInputError",
    "ProductNotFoundError",
    "RateLimitedError",
    "ValidationError",
    "register_error_handler",
]
