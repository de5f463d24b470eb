"""Logging setup and structured answer logging."""

import logging
from typing import Any

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once at startup.

    Unknown level names fall back to INFO.
    """
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(level=resolved, format=LOG_FORMAT)


class StructuredAnswerLogger:
    """Structured logger for answered questions."""

    def log_answer(
        self,
        document_id: str,
        source: str,
        latency_ms: float,
        error_reason: str | None = None,
    ) -> None:
        """Log one answered question with structured data."""
        log_data: dict[str, Any] = {
            "document_id": document_id,
            "source": source,
            "latency_ms": round(latency_ms, 2),
        }

        if error_reason:
            log_data["error_reason"] = error_reason

        log_msg = f"Answered question for {document_id} - {source}"

        if source == "remote":
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})
