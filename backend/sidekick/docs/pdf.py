"""PDF text extraction."""

import io
import logging

from pypdf import PdfReader

from backend.sidekick.errors import ExtractionError

logger = logging.getLogger(__name__)


def extract_pdf_text(data: bytes) -> str:
    """Extract plain text from raw PDF bytes.

    Pages are joined with a newline. Pages without a text layer contribute
    an empty string, so a scanned PDF yields "" rather than an error.

    Raises:
        ExtractionError: If the bytes cannot be parsed as a PDF
    """
    try:
        reader = PdfReader(io.BytesIO(data))
        pages = [page.extract_text() or "" for page in reader.pages]
    except Exception as e:
        logger.error(f"PDF extraction failed: {type(e).__name__}: {e}")
        raise ExtractionError("Could not read text from that PDF. Try another file.") from e

    return "\n".join(pages)
