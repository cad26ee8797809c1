"""
Logging infrastructure for talentmatch.

Uses Loguru for structured, easy-to-use logging with optional file rotation
and a separate audit trail for ranking decisions.
"""

import sys
from typing import Any

from loguru import logger

from talentmatch.utils.config import get_settings


def setup_logging() -> None:
    """
    Configure application-wide logging.

    Sets up console logging and, when a file path is configured, a rotating
    file sink plus an audit log next to it. Re-enables the talentmatch
    loggers, which stay disabled on import.
    """
    settings = get_settings()
    log_settings = settings.logging

    # Remove default handler
    logger.remove()
    logger.enable("talentmatch")

    # diagnose=False outside development to keep variable values out of tracebacks
    enable_diagnose = settings.debug and settings.environment == "development"

    if log_settings.console_output:
        logger.add(
            sys.stderr,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>",
            level=log_settings.level,
            colorize=True,
            backtrace=True,
            diagnose=enable_diagnose,
        )

    log_file = log_settings.file_path
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_file,
            format=log_settings.format,
            level=log_settings.level,
            rotation=log_settings.rotation,
            retention=log_settings.retention,
            compression="zip",
            backtrace=True,
            diagnose=enable_diagnose,
            enqueue=True,  # Thread-safe logging
        )

        audit_log_path = log_file.parent / "audit.log"
        logger.add(
            audit_log_path,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {extra[audit_type]} | {message}",
            level="INFO",
            filter=lambda record: "audit_type" in record["extra"],
            rotation="1 week",
            retention="1 year",
            compression="zip",
            enqueue=True,
        )

    logger.debug(f"Logging initialized - Level: {log_settings.level}")


def get_logger(name: str) -> Any:
    """
    Get a logger instance with the specified name.

    Args:
        name: The name for the logger (typically __name__)

    Returns:
        A configured logger instance
    """
    return logger.bind(name=name)


def _sanitize_for_logging(data: Any) -> Any:
    """
    Sanitize data before logging to prevent sensitive information exposure.

    Redacts contact details and credentials that may ride along on candidate
    records.
    """
    if isinstance(data, dict):
        sensitive_keys = {
            "password", "secret", "token", "api_key", "apikey", "auth",
            "credential", "email", "phone",
        }
        return {
            k: "***REDACTED***" if any(s in k.lower() for s in sensitive_keys) else _sanitize_for_logging(v)
            for k, v in data.items()
        }
    elif isinstance(data, list):
        return [_sanitize_for_logging(item) for item in data]
    return data


def audit_log(
    action: str,
    details: dict[str, Any],
    audit_type: str = "DECISION",
) -> None:
    """
    Log an audit entry for a matching decision.

    Args:
        action: The action being audited (e.g., "candidates_ranked")
        details: Dictionary of relevant details
        audit_type: Type of audit entry (DECISION, ACCESS)
    """
    sanitized_details = _sanitize_for_logging(details)
    logger.bind(audit_type=audit_type).info(f"{action} | {sanitized_details}")


class LoggerMixin:
    """
    Mixin class to add logging capability to any class.

    Usage:
        class MyClass(LoggerMixin):
            def my_method(self):
                self.logger.info("Doing something...")
    """

    @property
    def logger(self) -> Any:
        """Get a logger instance for this class."""
        if not hasattr(self, "_logger"):
            self._logger = get_logger(self.__class__.__name__)
        return self._logger
