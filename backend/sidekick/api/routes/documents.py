"""Document endpoints - POST /documents, GET /documents, GET /documents/{id}."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from backend.sidekick.config import Settings, get_settings
from backend.sidekick.db.inmemory import InMemoryDocumentStore, get_document_store
from backend.sidekick.docs.ingest import ingest_upload, normalize_media_type
from backend.sidekick.errors import SidekickError
from backend.sidekick.models.docs import DocumentSummary
from backend.sidekick.utils.metrics import metrics

router = APIRouter(prefix="/documents", tags=["documents"])
logger = logging.getLogger(__name__)


@router.post("", response_model=DocumentSummary)
async def upload_document(
    store: Annotated[InMemoryDocumentStore, Depends(get_document_store)],
    settings: Annotated[Settings, Depends(get_settings)],
    file: Annotated[UploadFile | None, File()] = None,
) -> DocumentSummary:
    """Upload a .txt or .pdf file and store its extracted text.

    Args:
        store: Document store
        settings: Application settings (upload size limit)
        file: Multipart file field named "file"

    Returns:
        Document metadata (never the text body)

    Raises:
        HTTPException: 400 missing file or unsupported type, 413 too large,
            422 unreadable PDF
    """
    if file is None:
        metrics.inc_rejection("ValidationError")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded.")

    data = await file.read()

    try:
        document = ingest_upload(
            store=store,
            filename=file.filename,
            content_type=file.content_type,
            data=data,
            max_bytes=settings.max_upload_bytes,
        )
    except SidekickError as e:
        logger.warning(f"Rejected upload {file.filename!r}: {e.message}")
        metrics.inc_rejection(type(e).__name__)
        raise HTTPException(status_code=e.status_code, detail=e.message) from e

    metrics.inc_upload(normalize_media_type(file.content_type))
    return document.summary()


@router.get("", response_model=list[DocumentSummary])
async def list_documents(
    store: Annotated[InMemoryDocumentStore, Depends(get_document_store)],
) -> list[DocumentSummary]:
    """List uploaded documents in upload order."""
    return [doc.summary() for doc in store.list_documents()]


@router.get("/{document_id}", response_model=DocumentSummary)
async def get_document(
    document_id: str,
    store: Annotated[InMemoryDocumentStore, Depends(get_document_store)],
) -> DocumentSummary:
    """Fetch one document's metadata.

    Raises:
        HTTPException: 404 if the document id is unknown
    """
    document = store.get(document_id)
    if document is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Document not found.")
    return document.summary()
