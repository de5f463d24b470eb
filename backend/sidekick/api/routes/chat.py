"""Chat endpoint - POST /chat."""

import logging
from typing import Annotated

from fastapi import APIRouter, Body, Depends, HTTPException, status

from backend.sidekick.db.inmemory import InMemoryDocumentStore, get_document_store
from backend.sidekick.llm.client import AnswerClient, get_answer_client
from backend.sidekick.models.chat import ChatMessage, ChatRequest
from backend.sidekick.orchestration.answer import answer_question, build_assistant_message

router = APIRouter(tags=["chat"])
logger = logging.getLogger(__name__)


@router.post("/chat", response_model=ChatMessage)
async def chat(
    store: Annotated[InMemoryDocumentStore, Depends(get_document_store)],
    client: Annotated[AnswerClient, Depends(get_answer_client)],
    request: Annotated[ChatRequest | None, Body()] = None,
) -> ChatMessage:
    """Answer a question about an uploaded document.

    Each question is answered independently; prior messages in the request
    are not consulted. A missing or null body counts as missing fields.
    Remote model failures are answered from local snippets instead of
    surfacing as errors.

    Raises:
        HTTPException: 400 if documentId or newMessage is missing,
            404 if the document is unknown
    """
    if request is None:
        request = ChatRequest()

    question = (request.new_message or "").strip()
    if not request.document_id or not question:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="documentId and newMessage are required.",
        )

    document = store.get(request.document_id)
    if document is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Document not found.",
        )

    result = await answer_question(document, question, client)
    logger.info(f"Answered question for {document.id} via {result.source}")
    return build_assistant_message(result.content)
