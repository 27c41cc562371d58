"""
Remote service clients.

Both clients are created once per process from the configured credentials
and passed explicitly to the seeding functions.
"""

from __future__ import annotations

from pinecone import Pinecone

from .config import Settings
from .embeddings.embedder import Embedder


def create_pinecone_client(settings: Settings) -> Pinecone:
    return Pinecone(api_key=settings.pinecone_api_key.get_secret_value())


def create_embedder(settings: Settings) -> Embedder:
    return Embedder(
        api_key=settings.openai_api_key.get_secret_value(),
        model=settings.embedding_model,
    )
