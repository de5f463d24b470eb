"""Shared pytest fixtures for all test suites."""

from collections.abc import Callable, Generator

import pytest
from fastapi.testclient import TestClient

from backend.sidekick.config import get_settings
from backend.sidekick.db.inmemory import InMemoryDocumentStore, get_document_store
from backend.sidekick.errors import NetworkError, RemoteUnavailable
from backend.sidekick.llm.client import get_answer_client
from backend.sidekick.main import app
from backend.sidekick.models.common import utc_now
from backend.sidekick.models.docs import Document


class FailingAnswerClient:
    """Answer client whose remote call always fails."""

    def __init__(self, error: RemoteUnavailable | None = None) -> None:
        self.error = error or NetworkError("connection refused")
        self.prompts: list[str] = []

    async def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        raise self.error

    async def aclose(self) -> None:
        return None


class StaticAnswerClient:
    """Answer client returning a fixed answer."""

    def __init__(self, answer: str) -> None:
        self.answer = answer
        self.prompts: list[str] = []

    async def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.answer

    async def aclose(self) -> None:
        return None


@pytest.fixture
def store() -> Generator[InMemoryDocumentStore, None, None]:
    """Fresh document store, cleared on teardown."""
    document_store = InMemoryDocumentStore()
    yield document_store
    document_store.clear()


@pytest.fixture
def failing_client() -> FailingAnswerClient:
    return FailingAnswerClient()


@pytest.fixture
def make_static_client() -> Callable[[str], StaticAnswerClient]:
    return StaticAnswerClient


@pytest.fixture
def make_document() -> Callable[..., Document]:
    """Factory for stored-looking documents."""

    def _make(text: str, name: str = "notes.txt", doc_id: str = "doc_test") -> Document:
        return Document(
            id=doc_id,
            name=name,
            size=len(text.encode("utf-8")),
            uploaded_at=utc_now(),
            text=text,
        )

    return _make


@pytest.fixture
def make_pdf() -> Callable[[str], bytes]:
    """Factory building a minimal single-page PDF showing one line of text."""

    def _make(text: str) -> bytes:
        escaped = text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
        stream = f"BT /F1 24 Tf 72 720 Td ({escaped}) Tj ET".encode("latin-1")
        objects = [
            b"<< /Type /Catalog /Pages 2 0 R >>",
            b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
            b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
            b"<< /Length " + str(len(stream)).encode() + b" >>\nstream\n" + stream + b"\nendstream",
            b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
        ]

        out = bytearray(b"%PDF-1.4\n")
        offsets = []
        for number, body in enumerate(objects, start=1):
            offsets.append(len(out))
            out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"

        xref_pos = len(out)
        out += f"xref\n0 {len(objects) + 1}\n".encode()
        out += b"0000000000 65535 f \n"
        for offset in offsets:
            out += f"{offset:010d} 00000 n \n".encode()
        out += f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n".encode()
        out += f"startxref\n{xref_pos}\n%%EOF\n".encode()
        return bytes(out)

    return _make


@pytest.fixture
def api_client(
    store: InMemoryDocumentStore,
    failing_client: FailingAnswerClient,
) -> Generator[TestClient, None, None]:
    """Test client wired to the test store and a failing remote client.

    Override get_answer_client again inside a test to use another client.
    """
    app.dependency_overrides[get_document_store] = lambda: store
    app.dependency_overrides[get_answer_client] = lambda: failing_client

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
    get_settings.cache_clear()
