"""Remote chat-completion client.

Security: Reads the API token from settings only, never hardcoded.
Talks to any OpenAI-compatible endpoint (Hugging Face router by default).
Every failure is raised as a RemoteUnavailable subclass so the caller can
fall back to a local answer.
"""

import json
import logging
from typing import Any, Protocol

import httpx
import openai
from fastapi import Request
from openai import AsyncOpenAI

from backend.sidekick.config import Settings
from backend.sidekick.errors import NetworkError, RemoteAPIError, TransportError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a helpful assistant that only pulls answers from the provided document text. "
    'If the answer is not present, respond with "I do not know based on this document."'
)


class AnswerClient(Protocol):
    """Protocol for remote answer clients."""

    async def ask(self, prompt: str) -> str:
        """Send a grounded prompt and return the model's answer text.

        Raises:
            RemoteUnavailable: On any failure to obtain an answer
        """
        ...

    async def aclose(self) -> None:
        """Release network resources."""
        ...


def extract_answer_text(raw: str, status_code: int = 200) -> str:
    """Pull the first choice's message content out of a completion payload.

    JSON payloads of an unrecognized shape are returned rather than raising:
    as compact JSON, or the value itself when it is a JSON string.

    Raises:
        RemoteAPIError: If the body is not JSON at all
    """
    try:
        data: Any = json.loads(raw)
    except ValueError as e:
        logger.error(f"Remote response is not JSON: {raw[:500]!r}")
        raise RemoteAPIError(status_code, raw) from e

    content = None
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        pass

    if content:
        return str(content)

    logger.warning(f"Unexpected remote response format: {raw[:500]!r}")
    if isinstance(data, str):
        return data
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"))


class ChatCompletionClient:
    """OpenAI-compatible chat-completion client with a bounded timeout.

    No retries: a single failure is reported immediately.
    """

    def __init__(
        self,
        api_key: str | None,
        *,
        model: str,
        base_url: str,
        timeout: float = 30.0,
        max_tokens: int = 512,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize client.

        Args:
            api_key: Bearer token for the endpoint; None or "" leaves the client unconfigured
            model: Model id sent with every request
            base_url: Endpoint base URL (".../v1")
            timeout: Per-request timeout in seconds
            max_tokens: Completion token budget
            http_client: Optional httpx client (for testing with mocks)
        """
        self.model = model
        self.max_tokens = max_tokens
        self._client: AsyncOpenAI | None = None
        if api_key:
            self._client = AsyncOpenAI(
                api_key=api_key,
                base_url=base_url,
                timeout=timeout,
                max_retries=0,
                http_client=http_client,
            )

    @property
    def configured(self) -> bool:
        return self._client is not None

    async def ask(self, prompt: str) -> str:
        """Ask the remote model to answer a grounded prompt.

        Raises:
            TransportError: If no API token is configured
            RemoteAPIError: If the endpoint returns a non-success status or a non-JSON body
            NetworkError: On connectivity failure or timeout
        """
        if self._client is None:
            logger.error("Missing HF_API_TOKEN in environment")
            raise TransportError("Missing HF_API_TOKEN")

        try:
            response = await self._client.chat.completions.with_raw_response.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                max_tokens=self.max_tokens,
            )
        except openai.APIStatusError as e:
            body = e.response.text
            logger.error(f"Remote API error: {e.status_code} {body[:500]}")
            raise RemoteAPIError(e.status_code, body) from e
        except openai.APIConnectionError as e:
            # Also covers APITimeoutError
            logger.error(f"Failed to reach remote API: {type(e).__name__}: {e}")
            raise NetworkError(str(e)) from e

        http_response = response.http_response
        return extract_answer_text(http_response.text, http_response.status_code)

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.close()


def build_answer_client(settings: Settings) -> ChatCompletionClient:
    """Factory building the remote client from settings."""
    api_key = settings.hf_api_token.get_secret_value() if settings.hf_api_token else None

    if api_key:
        logger.info(f"Using remote model {settings.hf_model_id} at {settings.hf_base_url}")
    else:
        logger.warning("No HF_API_TOKEN configured, every answer will use the local fallback")

    return ChatCompletionClient(
        api_key=api_key,
        model=settings.hf_model_id,
        base_url=settings.hf_base_url,
        timeout=settings.remote_timeout_seconds,
        max_tokens=settings.remote_max_tokens,
    )


def get_answer_client(request: Request) -> AnswerClient:
    """FastAPI dependency returning the client attached at startup."""
    client: AnswerClient = request.app.state.answer_client
    return client
