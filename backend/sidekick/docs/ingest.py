"""Document ingestion - validate uploads, extract text, store."""

import logging
from uuid import uuid4

from backend.sidekick.db.inmemory import InMemoryDocumentStore
from backend.sidekick.docs.pdf import extract_pdf_text
from backend.sidekick.errors import (
    UnsupportedMediaTypeError,
    UploadTooLargeError,
    ValidationError,
)
from backend.sidekick.models.common import utc_now
from backend.sidekick.models.docs import Document

logger = logging.getLogger(__name__)

TEXT_PLAIN = "text/plain"
APPLICATION_PDF = "application/pdf"
SUPPORTED_MEDIA_TYPES = (TEXT_PLAIN, APPLICATION_PDF)


def normalize_media_type(content_type: str | None) -> str:
    """Strip parameters and case from a Content-Type value.

    "Text/Plain; charset=utf-8" -> "text/plain"
    """
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def new_document_id() -> str:
    """Generate an opaque document id."""
    return f"doc_{uuid4().hex}"


def extract_text(media_type: str, data: bytes) -> str:
    """Turn upload bytes into plain text for a supported media type.

    Raises:
        UnsupportedMediaTypeError: For anything but text/plain or application/pdf
        ExtractionError: If a PDF cannot be parsed
    """
    if media_type == TEXT_PLAIN:
        return data.decode("utf-8", errors="replace")
    if media_type == APPLICATION_PDF:
        return extract_pdf_text(data)
    raise UnsupportedMediaTypeError("Only .txt and .pdf files are supported for now.")


def ingest_upload(
    *,
    store: InMemoryDocumentStore,
    filename: str | None,
    content_type: str | None,
    data: bytes,
    max_bytes: int,
) -> Document:
    """Validate an upload, extract its text and store it.

    Media type and size are checked before any extraction is attempted.
    A document is stored only after extraction succeeds.

    Args:
        store: Document store to write into
        filename: Original file name as sent by the client
        content_type: Declared Content-Type of the file part
        data: Raw file bytes
        max_bytes: Upper bound on accepted upload size

    Returns:
        The stored Document

    Raises:
        ValidationError: If no file name was given
        UnsupportedMediaTypeError: If the media type is not supported
        UploadTooLargeError: If the upload exceeds max_bytes
        ExtractionError: If a PDF cannot be parsed
    """
    if not filename:
        raise ValidationError("No file uploaded.")

    media_type = normalize_media_type(content_type)
    if media_type not in SUPPORTED_MEDIA_TYPES:
        raise UnsupportedMediaTypeError("Only .txt and .pdf files are supported for now.")

    if len(data) > max_bytes:
        raise UploadTooLargeError(f"File exceeds the {max_bytes} byte upload limit.")

    text = extract_text(media_type, data)

    if media_type == APPLICATION_PDF and not text.strip():
        logger.warning(
            f'No text extracted from PDF "{filename}". '
            "It may be a scanned image or have unusual encoding."
        )

    document = Document(
        id=new_document_id(),
        name=filename,
        size=len(data),
        uploaded_at=utc_now(),
        text=text,
    )
    store.add(document)

    logger.info(f"Stored document {document.id} ({media_type}, {document.size} bytes)")
    return document
