"""
Embedding client tests, run against an in-process HTTP transport.
"""

import json

import httpx
import pytest

from hr_kb_seeder.clients import create_embedder
from hr_kb_seeder.embeddings.embedder import Embedder, EmbeddingError
from hr_kb_seeder.models import KnowledgeBaseDocument
from hr_kb_seeder.policies import HR_POLICIES


def _embedder(handler, seen=None):
    def _handle(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return handler(request)

    return Embedder(
        api_key="sk-test",
        model="text-embedding-3-small",
        transport=httpx.MockTransport(_handle),
    )


@pytest.mark.asyncio
async def test_generate_embeddings_for_policy_content():
    seen = []
    embedder = _embedder(
        lambda r: httpx.Response(200, json={"data": [{"index": 0, "embedding": [0.25, -1, 3]}]}),
        seen,
    )
    content = KnowledgeBaseDocument.from_policy(HR_POLICIES[0]).content

    vector = await embedder.generate_embeddings(content)

    assert vector == [0.25, -1.0, 3.0]
    assert len(seen) == 1
    assert seen[0].headers["Authorization"] == "Bearer sk-test"
    assert json.loads(seen[0].content) == {
        "model": "text-embedding-3-small",
        "input": content,
    }


@pytest.mark.asyncio
async def test_http_error_raises_embedding_error():
    embedder = _embedder(lambda r: httpx.Response(401, json={"error": "invalid key"}))

    with pytest.raises(EmbeddingError, match="HTTPStatusError"):
        await embedder.generate_embeddings("hello")


@pytest.mark.asyncio
async def test_unexpected_body_raises_embedding_error():
    embedder = _embedder(lambda r: httpx.Response(200, json={"data": []}))

    with pytest.raises(EmbeddingError, match="Unexpected"):
        await embedder.generate_embeddings("hello")


def test_create_embedder_uses_settings(settings):
    embedder = create_embedder(settings)

    assert embedder.api_key == "sk-test-openai"
    assert embedder.model == "text-embedding-3-small"
