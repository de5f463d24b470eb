"""Helper functions for UI - /documents and /chat clients plus view formatting."""

import uuid
from datetime import datetime, timezone
from typing import Any

import httpx

MIME_BY_SUFFIX = {
    ".txt": "text/plain",
    ".pdf": "application/pdf",
}


def guess_media_type(filename: str) -> str:
    """Media type for an upload, from its file name suffix.

    Unknown suffixes map to application/octet-stream so the backend rejects them.
    """
    lower = filename.lower()
    for suffix, media_type in MIME_BY_SUFFIX.items():
        if lower.endswith(suffix):
            return media_type
    return "application/octet-stream"


def format_file_size(size: int) -> str:
    """Human-readable size in kilobytes, e.g. "1.5 KB"."""
    return f"{size / 1024:.1f} KB"


def create_user_message(content: str) -> dict[str, Any]:
    """Build a user chat message in wire format."""
    return {
        "id": str(uuid.uuid4()),
        "role": "user",
        "content": content,
        "createdAt": datetime.now(timezone.utc).isoformat(),
        "citations": [],
    }


def upload_document(
    backend_url: str,
    filename: str,
    data: bytes,
    client: httpx.Client | None = None,
) -> dict[str, Any]:
    """Call POST /documents with a single file.

    Args:
        backend_url: Backend base URL (e.g. http://localhost:8000)
        filename: Original file name
        data: Raw file bytes
        client: Optional httpx client (for testing with mocks)

    Returns:
        Document summary dict {id, name, size, uploadedAt}

    Raises:
        httpx.HTTPStatusError: If the upload is rejected
    """
    http = client or httpx.Client(timeout=60.0)
    try:
        response = http.post(
            f"{backend_url}/documents",
            files={"file": (filename, data, guess_media_type(filename))},
        )
        response.raise_for_status()
        result: dict[str, Any] = response.json()
        return result
    finally:
        if client is None:
            http.close()


def send_chat_message(
    backend_url: str,
    document_id: str,
    messages: list[dict[str, Any]],
    new_message: str,
    client: httpx.Client | None = None,
) -> dict[str, Any]:
    """Call POST /chat with the conversation so far.

    Returns:
        Assistant message dict {id, role, content, createdAt, citations}

    Raises:
        httpx.HTTPStatusError: If the request fails
    """
    http = client or httpx.Client(timeout=60.0)
    try:
        response = http.post(
            f"{backend_url}/chat",
            json={
                "documentId": document_id,
                "messages": messages,
                "newMessage": new_message,
            },
        )
        response.raise_for_status()
        result: dict[str, Any] = response.json()
        return result
    finally:
        if client is None:
            http.close()


def error_detail(error: httpx.HTTPStatusError) -> str:
    """Extract the backend's error message from a failed response."""
    try:
        body = error.response.json()
    except ValueError:
        return error.response.text or f"HTTP {error.response.status_code}"
    if isinstance(body, dict) and body.get("detail"):
        return str(body["detail"])
    return f"HTTP {error.response.status_code}"


def to_markdown(content: str) -> str:
    """Turn every newline into a Markdown hard line break.

    Keeps one fallback snippet per line instead of a single soft-wrapped paragraph.
    """
    return content.replace("\n", "  \n")
