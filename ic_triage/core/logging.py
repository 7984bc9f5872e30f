"""Structured logging configuration."""

import logging
import sys
from typing import Any

from ic_triage.core.config import settings


class StructuredFormatter(logging.Formatter):
    """Custom formatter for structured log output."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with structured data."""
        log_data = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "request_id"):
            log_data["request_id"] = record.request_id
        if hasattr(record, "assessment_id"):
            log_data["assessment_id"] = record.assessment_id
        if hasattr(record, "action"):
            log_data["action"] = record.action

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Simple key=value format for readability
        parts = [f"{k}={v}" for k, v in log_data.items()]
        return " ".join(parts)


def setup_logging() -> None:
    """Configure application logging."""
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    if settings.is_dev:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    else:
        formatter = StructuredFormatter()

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)


class AuditLogger:
    """Logger for triage decisions.

    Records what was decided and against which catalog content. Patient
    answers are never written here.
    """

    def __init__(self) -> None:
        self.logger = get_logger("audit")

    def log(
        self,
        action: str,
        entity_type: str,
        entity_id: str,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        """Log an audit event."""
        self.logger.info(
            f"AUDIT: action={action} entity={entity_type}:{entity_id} "
            f"metadata={metadata or {}}",
            extra={"action": action},
        )

    def triage_decision(
        self,
        assessment_id: str,
        diagnosis: str,
        flag: str,
        is_crisis: bool,
        catalog_hash: str,
    ) -> None:
        """Record the outcome of a triage evaluation."""
        self.log(
            action="TRIAGE_EVALUATED",
            entity_type="assessment",
            entity_id=assessment_id,
            metadata={
                "diagnosis": diagnosis,
                "flag": flag,
                "is_crisis": is_crisis,
                "catalog_hash": catalog_hash,
            },
        )


audit_logger = AuditLogger()
