"""Models package - re-exports for convenience."""

from backend.sidekick.models.chat import (
    AnswerResult,
    AnswerSource,
    ChatMessage,
    ChatRequest,
    ChatRole,
)
from backend.sidekick.models.common import CamelModel, utc_now
from backend.sidekick.models.docs import Document, DocumentSummary

__all__ = [
    "AnswerResult",
    "AnswerSource",
    "CamelModel",
    "ChatMessage",
    "ChatRequest",
    "ChatRole",
    "Document",
    "DocumentSummary",
    "utc_now",
]
