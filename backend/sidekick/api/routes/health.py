"""Health check endpoints.

- /health always reports ok while the process is running
- /healthz reports store size and whether the remote model is configured
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from backend.sidekick.config import Settings, get_settings
from backend.sidekick.db.inmemory import InMemoryDocumentStore, get_document_store

router = APIRouter()


def check_remote(settings: Settings) -> str:
    """Report whether remote answering is possible.

    Returns:
        "configured" or "fallback_only"
    """
    return "configured" if settings.remote_configured else "fallback_only"


@router.get("/health")
async def health() -> dict[str, str]:
    """Simple health check for Docker/k8s.

    Returns:
        200 OK always (application is running)
    """
    return {"status": "ok"}


@router.get("/healthz")
async def healthz(
    store: Annotated[InMemoryDocumentStore, Depends(get_document_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> dict[str, Any]:
    """Component status.

    A missing remote credential is not a failure: questions are still
    answered from local snippets.
    """
    return {
        "status": "ok",
        "components": {
            "documents": len(store),
            "remote": check_remote(settings),
        },
    }
