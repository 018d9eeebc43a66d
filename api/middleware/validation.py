# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Payload validation using Pydantic models.

Validates raw request bodies and query parameters against the request models
and converts Pydantic errors into a flat list of field errors. Nothing here
knows about a particular web framework: handlers receive plain mappings.
"""

from functools import wraps
from typing import Any, Callable, Dict, List, Mapping, Optional, Type, TypeVar
from pydantic import BaseModel, ValidationError
from opentelemetry import trace
import logging

from .error_handler import RequestValidationError

tracer = trace.get_tracer(__name__)
logger = logging.getLogger(__name__)

M = TypeVar('M', bound=BaseModel)

_SIMPLE_TYPES = (str, int, float, bool)


def format_validation_errors(validation_error: ValidationError) -> List[Dict[str, Any]]:
    """
    Format Pydantic validation errors for API response.

    Args:
        validation_error: Pydantic ValidationError

    Returns:
        List of formatted error dictionaries
    """
    errors = []

    for error in validation_error.errors(include_url=False):
        field_path = ".".join(str(loc) for loc in error["loc"])
        formatted = {
            "field": field_path,
            "message": error["msg"],
            "type": error["type"],
            "input": error.get("input")
        }
        # ctx may hold exception objects; keep only JSON-friendly values
        context = {
            key: value for key, value in (error.get("ctx") or {}).items()
            if isinstance(value, _SIMPLE_TYPES)
        }
        if context:
            formatted["context"] = context
        errors.append(formatted)

    return errors


class ValidationMiddleware:
    """Validates payloads against Pydantic models."""

    def validate(self, model_class: Type[M], payload: Any, source: str = "body") -> M:
        """
        Validate a payload and return the model instance.

        Args:
            model_class: Pydantic model class for validation
            payload: Decoded JSON body or query mapping
            source: "body" or "query", used for tracing and messages

        Returns:
            Validated model instance

        Raises:
            RequestValidationError: If the payload is not a mapping or fails validation
        """
        with tracer.start_as_current_span(f"validation.validate_{source}") as span:
            span.set_attribute("validation.model", model_class.__name__)

            if not isinstance(payload, Mapping):
                span.set_attribute("validation.result", "invalid_payload")
                raise RequestValidationError(
                    f"Request {source} must be a JSON object",
                    [{
                        "field": source,
                        "message": "Expected an object",
                        "type": "payload_type",
                        "input": None
                    }]
                )

            try:
                validated = model_class.model_validate(dict(payload))
            except ValidationError as e:
                span.set_attribute("validation.result", "validation_error")
                validation_errors = format_validation_errors(e)

                logger.warning(
                    "Request validation failed",
                    extra={
                        "model": model_class.__name__,
                        "source": source,
                        "errors": validation_errors
                    }
                )
                raise RequestValidationError(
                    f"Request validation failed for {model_class.__name__}",
                    validation_errors
                ) from e

            span.set_attribute("validation.result", "success")
            logger.debug(
                "Request validation successful",
                extra={"model": model_class.__name__, "source": source}
            )
            return validated

    def validate_body(self, model_class: Type[BaseModel], payload: Any) -> BaseModel:
        """Validate a decoded JSON request body."""
        return self.validate(model_class, payload, source="body")

    def validate_query(
        self,
        model_class: Type[BaseModel],
        params: Optional[Mapping[str, Any]]
    ) -> BaseModel:
        """Validate query parameters; empty values count as absent."""
        query_data = {
            key: value for key, value in (params or {}).items()
            if value not in ("", None)
        }
        return self.validate(model_class, query_data, source="query")

    def body(self, model_class: Type[BaseModel]) -> Callable:
        """
        Decorator to validate a handler's body argument against a model.

        The wrapped handler is called with the validated model in place of
        the raw payload.

        Args:
            model_class: Pydantic model class for validation

        Returns:
            Decorator function
        """
        def decorator(f: Callable) -> Callable:
            @wraps(f)
            def decorated_function(payload, *args, **kwargs):
                return f(self.validate_body(model_class, payload), *args, **kwargs)
            return decorated_function
        return decorator

    def query(self, model_class: Type[BaseModel]) -> Callable:
        """Decorator to validate a handler's query-parameter argument against a model."""
        def decorator(f: Callable) -> Callable:
            @wraps(f)
            def decorated_function(params, *args, **kwargs):
                return f(self.validate_query(model_class, params), *args, **kwargs)
            return decorated_function
        return decorator


_default_middleware = ValidationMiddleware()


def validate_body(model_class: Type[BaseModel]) -> Callable:
    """
    Convenience decorator for body validation.

    Args:
        model_class: Pydantic model class

    Returns:
        Decorator function
    """
    return _default_middleware.body(model_class)


def validate_query(model_class: Type[BaseModel]) -> Callable:
    """Convenience decorator for query parameter validation."""
    return _default_middleware.query(model_class)
