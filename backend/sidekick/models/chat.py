"""Chat message models."""

from datetime import datetime
from typing import Any, Literal
from uuid import uuid4

from pydantic import BaseModel, Field

from backend.sidekick.models.common import CamelModel, utc_now

ChatRole = Literal["user", "assistant"]
AnswerSource = Literal["remote", "fallback"]


def new_message_id() -> str:
    """Generate an opaque message id."""
    return f"msg_{uuid4().hex}"


class ChatMessage(CamelModel):
    """Single chat turn. Never mutated, never persisted server-side."""

    id: str = Field(default_factory=new_message_id)
    role: ChatRole
    content: str
    created_at: datetime = Field(default_factory=utc_now)
    citations: list[str] = Field(default_factory=list)


class ChatRequest(CamelModel):
    """Request body for POST /chat.

    Fields are optional at the schema level so missing values are reported
    as 400 by the route rather than FastAPI's default 422. Prior messages
    are accepted but not consulted when answering.
    """

    document_id: str | None = None
    messages: list[dict[str, Any]] = Field(default_factory=list)
    new_message: str | None = None


class AnswerResult(BaseModel):
    """Answer text plus which path produced it."""

    content: str
    source: AnswerSource
