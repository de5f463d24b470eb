"""In-memory document store.

Process-local and unpersisted: constructed at application startup, cleared
on shutdown or test teardown.
"""

from collections.abc import Iterator

from fastapi import Request

from backend.sidekick.models.docs import Document


class InMemoryDocumentStore:
    """Documents keyed by id, kept in upload order.

    Each document is written once and read many times; there is no update
    or delete of a single entry.
    """

    def __init__(self) -> None:
        self._docs: dict[str, Document] = {}

    def add(self, document: Document) -> None:
        """Store a document.

        Raises:
            ValueError: If a document with the same id is already stored
        """
        if document.id in self._docs:
            raise ValueError(f"Document {document.id} already stored")
        self._docs[document.id] = document

    def get(self, document_id: str) -> Document | None:
        """Fetch a document by id, or None if unknown."""
        return self._docs.get(document_id)

    def list_documents(self) -> list[Document]:
        """All documents in upload order."""
        return list(self._docs.values())

    def clear(self) -> None:
        """Drop every stored document."""
        self._docs.clear()

    def __len__(self) -> int:
        return len(self._docs)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._docs

    def __iter__(self) -> Iterator[Document]:
        return iter(self.list_documents())


def get_document_store(request: Request) -> InMemoryDocumentStore:
    """FastAPI dependency returning the store attached at startup."""
    store: InMemoryDocumentStore = request.app.state.document_store
    return store
