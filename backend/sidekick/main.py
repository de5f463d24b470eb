"""FastAPI application."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.sidekick.api.routes.chat import router as chat_router
from backend.sidekick.api.routes.documents import router as documents_router
from backend.sidekick.api.routes.health import router as health_router
from backend.sidekick.api.routes.metrics import router as metrics_router
from backend.sidekick.config import get_settings
from backend.sidekick.db.inmemory import InMemoryDocumentStore
from backend.sidekick.llm.client import build_answer_client
from backend.sidekick.utils.logging import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create the document store and remote client; release them on shutdown."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app.state.document_store = InMemoryDocumentStore()
    app.state.answer_client = build_answer_client(settings)
    logger.info("Knowledge Sidekick API ready")

    yield

    await app.state.answer_client.aclose()
    app.state.document_store.clear()


app = FastAPI(title="Knowledge Sidekick API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().ui_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routes
app.include_router(health_router, tags=["health"])
app.include_router(metrics_router, tags=["metrics"])
app.include_router(documents_router, tags=["documents"])
app.include_router(chat_router, tags=["chat"])


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"status": "ok", "message": "Knowledge Sidekick backend is running"}
