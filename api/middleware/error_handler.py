# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Error taxonomy and RFC 7807 error formatting.

Handlers raise the exceptions below; ErrorHandler turns any exception into an
ErrorResponse plus HTTP status so every caller reports failures the same way.
"""

from typing import Any, Dict, List, Optional, Tuple
from opentelemetry import trace
import logging

from models.responses import ErrorResponse, FieldError, ValidationErrorResponse

tracer = trace.get_tracer(__name__)
logger = logging.getLogger(__name__)

PROBLEM_BASE_URL = "https://api.condoflow.pt/problems"

ERROR_TITLES = {
    "validation-error": "Validation Error",
    "resource-not-found": "Resource Not Found",
    "resource-conflict": "Resource Conflict",
    "business-rule-violation": "Business Rule Violation",
    "internal-server-error": "Internal Server Error",
}


class CondoFlowException(Exception):
    """Base class for application exceptions."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_type: str = "application-error",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_type = error_type
        self.details = details or {}


class RequestValidationError(CondoFlowException):
    """Payload failed schema validation."""

    def __init__(self, message: str, validation_errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message, 400, "validation-error")
        self.validation_errors = validation_errors or []

    def fields(self) -> List[str]:
        """Paths of the fields that failed."""
        return [error["field"] for error in self.validation_errors]


class NotFoundException(CondoFlowException):
    """Exception for resource not found errors."""

    def __init__(self, message: str):
        super().__init__(message, 404, "resource-not-found")


class ConflictException(CondoFlowException):
    """Exception for resource conflict errors."""

    def __init__(self, message: str):
        super().__init__(message, 409, "resource-conflict")


class BusinessRuleException(CondoFlowException):
    """A valid payload that breaks a domain rule (e.g. non-positive payment)."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, 422, "business-rule-violation", details)


class ErrorHandler:
    """Converts exceptions into RFC 7807 error responses."""

    def __init__(self, environment: str = "development"):
        self.environment = environment

    def build_error_response(
        self,
        error_type: str,
        status: int,
        detail: str,
        instance: str,
        validation_errors: Optional[List[Dict[str, Any]]] = None
    ) -> ErrorResponse:
        """Build an RFC 7807 error body."""
        body = {
            "type": f"{PROBLEM_BASE_URL}/{error_type}",
            "title": ERROR_TITLES.get(error_type, "Application Error"),
            "status": status,
            "detail": detail,
            "instance": instance,
        }

        if validation_errors is not None:
            body["errors"] = [FieldError(**error) for error in validation_errors]
            return ValidationErrorResponse(**body)

        return ErrorResponse(**body)

    def handle(self, error: Exception, instance: str) -> Tuple[ErrorResponse, int]:
        """
        Format any exception as an error response.

        Args:
            error: Exception raised while handling a request
            instance: Request path or operation name

        Returns:
            Tuple of (error response, status code)
        """
        if isinstance(error, CondoFlowException):
            return self.handle_application_error(error, instance)
        return self.handle_unexpected_error(error, instance)

    def handle_application_error(
        self,
        error: CondoFlowException,
        instance: str
    ) -> Tuple[ErrorResponse, int]:
        """Format a known application exception."""
        with tracer.start_as_current_span("error_handler.application_error") as span:
            span.set_attributes({
                "error.type": error.error_type,
                "error.status": error.status_code,
                "error.instance": instance
            })

            logger.warning(
                f"Application error: {error.error_type}",
                extra={
                    "error_type": error.error_type,
                    "status_code": error.status_code,
                    "detail": error.message,
                    "instance": instance
                }
            )

            validation_errors = None
            if isinstance(error, RequestValidationError):
                validation_errors = error.validation_errors

            response = self.build_error_response(
                error.error_type,
                error.status_code,
                error.message,
                instance,
                validation_errors
            )
            return response, error.status_code

    def handle_unexpected_error(self, error: Exception, instance: str) -> Tuple[ErrorResponse, int]:
        """Format an exception no handler anticipated as a 500."""
        with tracer.start_as_current_span("error_handler.unexpected_error") as span:
            span.set_attributes({
                "error.type": "unexpected-error",
                "error.class": error.__class__.__name__,
                "error.instance": instance
            })
            span.record_exception(error)

            logger.error(
                f"Unexpected error: {error.__class__.__name__}",
                extra={
                    "error_type": "unexpected-error",
                    "error_class": error.__class__.__name__,
                    "error_message": str(error),
                    "instance": instance
                },
                exc_info=error
            )

            # Don't expose internal error details in production
            detail = "An unexpected error occurred"
            if self.environment != "production":
                detail = f"{error.__class__.__name__}: {error}"

            response = self.build_error_response("internal-server-error", 500, detail, instance)
            return response, 500
