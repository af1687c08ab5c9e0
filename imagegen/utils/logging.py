"""
JSON logging for the API and the provider adapters.

Each record carries ``timestamp``, ``level``, ``service`` and ``event``;
``user_id``, ``image_id`` and ``duration_ms`` are added when known, along
with any event-specific fields.

Usage:
    configure_logging('imagegen-api', 'INFO')
    log_image_generated(logger, image_id=image.id, user_id=user.id, remaining_credits=2)
"""
import logging
import sys
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger

LOG_FORMAT = '%(timestamp)s %(levelname)s %(name)s %(message)s'

_configured_service: Optional[str] = None


class ServiceJsonFormatter(jsonlogger.JsonFormatter):
    """JsonFormatter that stamps every record with the service name."""
    
    def __init__(self, service_name: str, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.service_name = service_name
    
    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record["service"] = self.service_name
        log_record.setdefault("event", "log")


def configure_logging(service_name: str, log_level: str = "INFO") -> None:
    """
    Route the root logger to stdout as JSON.
    
    Only the first call has an effect, so the app lifespan and tests can
    both call it.
    """
    global _configured_service
    if _configured_service is not None:
        return
    
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ServiceJsonFormatter(
        service_name,
        LOG_FORMAT,
        timestamp=True,
        json_ensure_ascii=False
    ))
    
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    
    _configured_service = service_name


def event_fields(
    event: str,
    user_id: Optional[str] = None,
    image_id: Optional[str] = None,
    duration_ms: Optional[float] = None,
    **fields
) -> Dict[str, Any]:
    """Build the ``extra`` dict for one event, leaving out unknown ids."""
    extra: Dict[str, Any] = {"event": event, **fields}
    if user_id:
        extra["user_id"] = user_id
    if image_id:
        extra["image_id"] = image_id
    if duration_ms is not None:
        extra["duration_ms"] = round(duration_ms, 2)
    return extra


def log_user_registered(logger: logging.Logger, user_id: str, credits: int, **fields):
    logger.info(
        f"User registered: {user_id}",
        extra=event_fields("user_registered", user_id=user_id, credits=credits, **fields)
    )


def log_image_generated(
    logger: logging.Logger,
    image_id: str,
    user_id: str,
    remaining_credits: int,
    duration_ms: Optional[float] = None,
    **fields
):
    """Log a stored generation together with the balance left after paying for it."""
    logger.info(
        f"Image generated: {image_id}",
        extra=event_fields(
            "image_generated",
            user_id=user_id,
            image_id=image_id,
            duration_ms=duration_ms,
            remaining_credits=remaining_credits,
            **fields
        )
    )


def log_generation_rejected(logger: logging.Logger, user_id: str, reason: str, **fields):
    """``reason`` is one of invalid_prompt or insufficient_credits."""
    logger.warning(
        f"Generation rejected for {user_id}: {reason}",
        extra=event_fields("generation_rejected", user_id=user_id, reason=reason, **fields)
    )


def log_provider_request(
    logger: logging.Logger,
    provider: str,
    operation: str,
    duration_ms: Optional[float] = None,
    **fields
):
    logger.info(
        f"Provider request: {provider}.{operation}",
        extra=event_fields(
            "provider_request",
            duration_ms=duration_ms,
            provider=provider,
            operation=operation,
            **fields
        )
    )


def log_provider_failure(
    logger: logging.Logger,
    provider: str,
    operation: str,
    error: str,
    duration_ms: Optional[float] = None,
    include_traceback: bool = False,
    **fields
):
    """
    Log a failed provider call.
    
    With ``include_traceback`` the active exception, if any, is attached.
    """
    extra = event_fields(
        "provider_failure",
        duration_ms=duration_ms,
        provider=provider,
        operation=operation,
        error=str(error),
        **fields
    )
    with_traceback = include_traceback and sys.exc_info()[0] is not None
    logger.error(f"Provider failure: {provider}.{operation}: {error}", extra=extra, exc_info=with_traceback)
