"""Structured logging for the xsdbridge pipelines."""

import json
import logging
import sys
import threading
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


# logging has no "WARN" name in its level table
_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


_CONFIGURE_LOCK = threading.Lock()


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON."""
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname.lower(),
            "component": getattr(record, "component", "xsdbridge"),
            "message": record.getMessage(),
        }

        optional_fields = ["operationId", "elementName", "schemaKind", "rootName"]
        for field in optional_fields:
            if hasattr(record, field):
                log_entry[field] = getattr(record, field)

        if hasattr(record, "extra") and isinstance(record.extra, dict):
            log_entry.update(record.extra)

        return json.dumps(log_entry, default=str)


class _StdoutHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stdout`` is at emit time."""

    def __init__(self):
        super().__init__(sys.stdout)

    def emit(self, record: logging.LogRecord) -> None:
        self.stream = sys.stdout
        super().emit(record)


def _configure(logger: logging.Logger) -> None:
    """Attach the structured handler to a component logger once."""
    with _CONFIGURE_LOCK:
        if logger.handlers:
            return
        handler = _StdoutHandler()
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        # records are filtered per BridgeLogger, not on the shared logger
        logger.setLevel(logging.DEBUG)
        logger.propagate = False


class BridgeLogger:
    """Component logger with structured output.

    The level belongs to this instance; the underlying ``logging`` logger is
    shared by every BridgeLogger of the same component and only configured
    the first time.
    """

    def __init__(self, level: LogLevel = LogLevel.INFO, component: str = "xsdbridge"):
        self.component = component
        self.operation_id = str(uuid4())
        self.level = _LEVELS[LogLevel(level).value]

        self.logger = logging.getLogger(f"xsdbridge.{component}")
        _configure(self.logger)

    def is_enabled_for(self, levelno: int) -> bool:
        return levelno >= self.level

    def _log(self, level: str, message: str, **kwargs) -> None:
        """Build and dispatch a record carrying the keyword fields."""
        levelno = _LEVELS[level]
        if not self.is_enabled_for(levelno):
            return

        record = self.logger.makeRecord(
            name=self.logger.name,
            level=levelno,
            fn="",
            lno=0,
            msg=message,
            args=(),
            exc_info=None,
            extra={
                "component": self.component,
                "operationId": self.operation_id,
                "extra": kwargs,
            },
        )

        self.logger.handle(record)

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message."""
        self._log("debug", message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Log info message."""
        self._log("info", message, **kwargs)

    def warn(self, message: str, **kwargs) -> None:
        """Log warning message."""
        self._log("warning", message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        """Log error message."""
        self._log("error", message, **kwargs)

    def mapping_decision(self, decision: str, source_construct: str, xsd_output: str, **kwargs) -> None:
        """Log how a schema construct was mapped."""
        self.debug(
            f"Mapping decision: {decision}",
            sourceConstruct=source_construct,
            xsdOutput=xsd_output,
            **kwargs
        )

    def performance_metric(self, metric_name: str, value: Any, unit: str = "", **kwargs) -> None:
        """Log performance metrics."""
        self.debug(
            f"Performance: {metric_name}",
            metricName=metric_name,
            value=value,
            unit=unit,
            **kwargs
        )


def create_logger(level: LogLevel = LogLevel.INFO, component: str = "xsdbridge") -> BridgeLogger:
    """Create a configured logger instance."""
    return BridgeLogger(level=level, component=component)
