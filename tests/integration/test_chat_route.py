"""Integration tests for POST /chat."""

from collections.abc import Callable

from fastapi.testclient import TestClient

from backend.sidekick.llm.client import get_answer_client
from backend.sidekick.main import app

INVOICE_TEXT = b"Invoice total $500 for March services.\n\nShip everything to the delivery address."


def upload_text(api_client: TestClient, text: bytes, name: str = "invoice.txt") -> str:
    response = api_client.post("/documents", files={"file": (name, text, "text/plain")})
    assert response.status_code == 200
    doc_id: str = response.json()["id"]
    return doc_id


def test_fallback_answer_end_to_end(api_client: TestClient) -> None:
    """Test upload + question with the remote call forced to fail."""
    doc_id = upload_text(api_client, INVOICE_TEXT)

    response = api_client.post(
        "/chat",
        json={"documentId": doc_id, "messages": [], "newMessage": "What is the invoice total?"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["role"] == "assistant"
    assert data["citations"] == []
    assert data["id"]
    assert data["createdAt"]

    bullets = [line for line in data["content"].split("\n") if line.startswith("• ")]
    assert len(bullets) == 1
    assert "invoice total $500" in bullets[0].lower()
    assert "delivery address" not in data["content"]


def test_remote_answer_used_when_available(
    api_client: TestClient,
    make_static_client: Callable[[str], object],
) -> None:
    remote = make_static_client("The invoice total is $500.")
    app.dependency_overrides[get_answer_client] = lambda: remote
    doc_id = upload_text(api_client, INVOICE_TEXT)

    response = api_client.post(
        "/chat",
        json={"documentId": doc_id, "newMessage": "What is the invoice total?"},
    )

    assert response.status_code == 200
    assert response.json()["content"] == "The invoice total is $500."
    prompt = remote.prompts[0]  # type: ignore[attr-defined]
    assert "Invoice total $500" in prompt
    assert "What is the invoice total?" in prompt


def test_prior_messages_are_accepted_but_ignored(api_client: TestClient) -> None:
    """Test that history does not change the answer."""
    doc_id = upload_text(api_client, INVOICE_TEXT)
    question = {"documentId": doc_id, "newMessage": "What is the invoice total?"}

    without_history = api_client.post("/chat", json=question).json()
    with_history = api_client.post(
        "/chat",
        json={
            **question,
            "messages": [
                {"id": "1", "role": "user", "content": "delivery address?"},
                {"id": "2", "role": "assistant", "content": "It ships to the delivery address."},
            ],
        },
    ).json()

    assert with_history["content"] == without_history["content"]


def test_missing_fields_return_400(api_client: TestClient) -> None:
    doc_id = upload_text(api_client, INVOICE_TEXT)

    for body in (
        {},
        {"documentId": doc_id},
        {"newMessage": "What is the total?"},
        {"documentId": doc_id, "newMessage": "   "},
    ):
        response = api_client.post("/chat", json=body)
        assert response.status_code == 400
        assert response.json()["detail"] == "documentId and newMessage are required."


def test_missing_or_null_body_returns_400(api_client: TestClient) -> None:
    """Test that a bodyless or JSON null request is treated as missing fields."""
    for response in (
        api_client.post("/chat"),
        api_client.post(
            "/chat",
            content=b"null",
            headers={"Content-Type": "application/json"},
        ),
    ):
        assert response.status_code == 400
        assert response.json()["detail"] == "documentId and newMessage are required."


def test_unknown_document_returns_404(api_client: TestClient) -> None:
    response = api_client.post(
        "/chat",
        json={"documentId": "doc_missing", "newMessage": "Anything?"},
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "Document not found."


def test_empty_document_gets_apology(api_client: TestClient) -> None:
    doc_id = upload_text(api_client, b"   \n\n  ", name="blank.txt")

    response = api_client.post("/chat", json={"documentId": doc_id, "newMessage": "Summary?"})

    assert response.status_code == 200
    assert response.json()["content"] == (
        'I received your question about "blank.txt", '
        "but I couldn't read any text from that upload yet."
    )
