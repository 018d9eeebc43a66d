"""
Observability configuration

Environment settings, structured logging and OpenTelemetry tracing for the
CondoFlow shared core.
"""

import os
import json
import logging
from dataclasses import dataclass
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.resources import Resource

SERVICE_NAME = 'condoflow-core'

# Standard LogRecord attributes; anything else came in through `extra`
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord('', 0, '', 0, '', (), None))) | {'message', 'asctime'}


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from the environment."""
    environment: str
    service_version: str
    otel_enabled: bool
    log_level: str

    @classmethod
    def from_env(cls) -> 'Settings':
        return cls(
            environment=os.getenv('ENVIRONMENT', 'development'),
            service_version=os.getenv('SERVICE_VERSION', '1.0.0'),
            otel_enabled=os.getenv('OTEL_ENABLED', 'false').lower() == 'true',
            log_level=os.getenv('LOG_LEVEL', '').upper()
        )


class StructuredFormatter(logging.Formatter):
    """JSON log lines with `extra` fields and the active trace ID."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'timestamp': self.formatTime(record),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage()
        }

        span_context = trace.get_current_span().get_span_context()
        if span_context.is_valid:
            entry['trace_id'] = format(span_context.trace_id, '032x')
            entry['span_id'] = format(span_context.span_id, '016x')

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith('_'):
                entry[key] = value

        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def setup_observability(settings: Settings = None) -> Settings:
    """Initialize logging and, when enabled, OpenTelemetry tracing."""
    settings = settings or Settings.from_env()

    setup_structured_logging(settings.environment, settings.log_level)

    if not settings.otel_enabled:
        # Without a provider the API hands out no-op tracers
        return settings

    # Environment-specific sampling
    if settings.environment == 'production':
        sampler = TraceIdRatioBased(0.1)  # 10% sampling in production
    elif settings.environment == 'staging':
        sampler = TraceIdRatioBased(0.5)  # 50% sampling in staging
    else:
        sampler = TraceIdRatioBased(1.0)  # 100% sampling in development

    resource = Resource.create({
        "service.name": SERVICE_NAME,
        "service.version": settings.service_version,
        "deployment.environment": settings.environment
    })

    tracer_provider = TracerProvider(sampler=sampler, resource=resource)
    tracer_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    trace.set_tracer_provider(tracer_provider)

    return settings


def setup_structured_logging(environment: str, log_level: str = ''):
    """Configure structured JSON logging with trace correlation."""
    level = {
        'production': logging.WARNING,
        'staging': logging.INFO,
        'development': logging.INFO,
        'test': logging.WARNING
    }.get(environment, logging.INFO)

    if log_level:
        level = logging.getLevelName(log_level)
        if not isinstance(level, int):
            raise ValueError(f"Unknown LOG_LEVEL: {log_level}")

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())

    logging.basicConfig(level=level, handlers=[handler], force=True)

    if environment == 'development' and not log_level:
        # Development: verbose logging for our own packages
        logging.getLogger('domain').setLevel(logging.DEBUG)
        logging.getLogger('middleware').setLevel(logging.DEBUG)
