"""Answer orchestration - remote model first, local snippets on failure."""

import logging
import time

from backend.sidekick.docs.fallback import build_fallback_answer
from backend.sidekick.errors import RemoteAPIError, RemoteUnavailable
from backend.sidekick.llm.client import AnswerClient
from backend.sidekick.models.chat import AnswerResult, ChatMessage
from backend.sidekick.models.docs import Document
from backend.sidekick.utils.logging import StructuredAnswerLogger
from backend.sidekick.utils.metrics import metrics

logger = logging.getLogger(__name__)
answer_logger = StructuredAnswerLogger()


def build_grounding_prompt(document: Document, question: str) -> str:
    """Build the user prompt constraining the model to the document text."""
    return (
        "You are a helpful assistant answering questions about a document.\n"
        "\n"
        "Rules:\n"
        "- Only use information that comes from the document text.\n"
        "- If the answer is not clearly in the document, say "
        '"I don\'t know based on this document."\n'
        "- Be concise. Use bullet points when listing items.\n"
        "\n"
        "Document:\n"
        f"{document.text}\n"
        "\n"
        "Question:\n"
        f"{question}\n"
    )


def _failure_reason(error: RemoteUnavailable) -> str:
    if isinstance(error, RemoteAPIError):
        return f"{type(error).__name__}:{error.status_code}"
    return type(error).__name__


async def answer_question(
    document: Document,
    question: str,
    client: AnswerClient,
) -> AnswerResult:
    """Answer a question about one document.

    Remote failures of any kind are recovered here by building the local
    fallback answer; they never propagate to the caller.

    Args:
        document: Stored document to answer from
        question: User's question
        client: Remote answer client

    Returns:
        AnswerResult with the answer text and which path produced it
    """
    prompt = build_grounding_prompt(document, question)
    started = time.perf_counter()

    try:
        content = await client.ask(prompt)
    except RemoteUnavailable as e:
        latency_ms = (time.perf_counter() - started) * 1000
        reason = _failure_reason(e)
        logger.warning(f"Falling back to local summarizer due to remote error: {reason}")
        metrics.record_remote_latency("error", latency_ms)
        metrics.inc_answer("fallback")
        answer_logger.log_answer(document.id, "fallback", latency_ms, error_reason=reason)
        return AnswerResult(content=build_fallback_answer(document, question), source="fallback")

    latency_ms = (time.perf_counter() - started) * 1000
    metrics.record_remote_latency("success", latency_ms)
    metrics.inc_answer("remote")
    answer_logger.log_answer(document.id, "remote", latency_ms)
    return AnswerResult(content=content, source="remote")


def build_assistant_message(content: str) -> ChatMessage:
    """Wrap answer text in an assistant chat message with no citations."""
    return ChatMessage(role="assistant", content=content, citations=[])
