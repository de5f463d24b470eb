"""Document domain models."""

from datetime import datetime

from pydantic import ConfigDict, Field

from backend.sidekick.models.common import CamelModel


class DocumentSummary(CamelModel):
    """Public document metadata, returned by the upload and listing endpoints."""

    id: str
    name: str
    size: int = Field(..., ge=0)
    uploaded_at: datetime


class Document(DocumentSummary):
    """Uploaded document with its full extracted text.

    Immutable once stored.
    """

    model_config = ConfigDict(frozen=True)

    text: str

    def summary(self) -> DocumentSummary:
        """Project to metadata only, never exposing the text body."""
        return DocumentSummary(
            id=self.id,
            name=self.name,
            size=self.size,
            uploaded_at=self.uploaded_at,
        )
