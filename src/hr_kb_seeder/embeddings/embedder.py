"""
OpenAI embeddings client.

The knowledge base index embeds records itself, so seeding only needs this
client to exist with a valid key. ``generate_embeddings`` produces the vector
the index would compute for a piece of text, using the same model.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import httpx

logger = logging.getLogger("kb.embedder")

OPENAI_EMBEDDINGS_URL = "https://api.openai.com/v1/embeddings"


class EmbeddingError(RuntimeError):
    """Raised when the embeddings API call fails or returns an unusable body."""


class Embedder:
    def __init__(
        self,
        api_key: str,
        model: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self._transport = transport

    async def generate_embeddings(self, text: str) -> List[float]:
        """Return the embedding vector for a single text."""
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                resp = await client.post(
                    OPENAI_EMBEDDINGS_URL,
                    json={"model": self.model, "input": text},
                    headers={"Authorization": f"Bearer {self.api_key}"},
                )
                resp.raise_for_status()
            except httpx.HTTPError as exc:
                logger.error("Embedding request to %s failed: %s", self.model, exc)
                raise EmbeddingError(f"Embedding generation failed: {type(exc).__name__}") from exc

        try:
            return [float(x) for x in resp.json()["data"][0]["embedding"]]
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            raise EmbeddingError("Unexpected embeddings response body") from exc
