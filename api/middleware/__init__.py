# SPDX-License-Identifier: Apache-2.0

"""
Validation and error-handling layer shared by API handlers.
"""

from .error_handler import (
    CondoFlowException,
    RequestValidationError,
    NotFoundException,
    ConflictException,
    BusinessRuleException,
    ErrorHandler
)
from .validation import (
    ValidationMiddleware,
    format_validation_errors,
    validate_body,
    validate_query
)

__all__ = [
    "CondoFlowException",
    "RequestValidationError",
    "NotFoundException",
    "ConflictException",
    "BusinessRuleException",
    "ErrorHandler",
    "ValidationMiddleware",
    "format_validation_errors",
    "validate_body",
    "validate_query"
]
