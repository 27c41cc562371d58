"""
Knowledge Base Data Models

This module defines the document shape sent to the integrated-embedding
vector index. Each instance corresponds to ONE record in the index; the
``content`` field is the one the index embeds server-side.
"""

from __future__ import annotations

from typing import Dict
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from .policies import PolicyRecord

DEFAULT_CATEGORY = "HR Policy"


class KnowledgeBaseDocument(BaseModel):
    """
    A single knowledge base record.

    Identifiers are random and carry no meaning; building a document twice
    from the same policy yields two distinct records.
    """

    id: str = Field(
        default_factory=lambda: str(uuid4()),
        min_length=1,
        description="Random unique record identifier.",
    )

    content: str = Field(
        ...,
        min_length=1,
        description="Text fed to the embedding model: '<title>: <body>'.",
    )

    title: str = Field(
        ...,
        min_length=1,
        description="Policy title, kept as metadata for filtering and display.",
    )

    category: str = Field(
        default=DEFAULT_CATEGORY,
        description="Constant tag identifying the document class.",
    )

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    @classmethod
    def from_policy(
        cls,
        policy: PolicyRecord,
        category: str = DEFAULT_CATEGORY,
    ) -> "KnowledgeBaseDocument":
        return cls(
            content=f"{policy.title}: {policy.content}",
            title=policy.title,
            category=category,
        )

    def to_record(self) -> Dict[str, str]:
        """Return the plain mapping accepted by ``upsert_records``."""
        return self.model_dump()
