"""
Index provisioning.

Makes sure the integrated-embedding index exists before any record is
written. An existing index is used as-is; its configuration is not compared
against the settings.
"""

from __future__ import annotations

import logging

from pinecone import Pinecone

from .config import Settings

logger = logging.getLogger("kb.index")


def ensure_index_exists(pc: Pinecone, settings: Settings) -> bool:
    """
    Create the knowledge base index unless one with the same name exists.

    Creation blocks until the service reports the index ready.

    Returns
    -------
    bool
        True if the index exists on return (found or created), False if
        listing or creation failed. Errors are logged, never raised.
    """
    try:
        existing = pc.list_indexes().names()

        if settings.index_name not in existing:
            logger.info("Creating index: %s", settings.index_name)

            pc.create_index_for_model(
                name=settings.index_name,
                cloud=settings.index_cloud,
                region=settings.index_region,
                embed={
                    "model": settings.embedding_model,
                    "field_map": settings.field_map,
                },
                timeout=None,  # wait until ready
            )

            logger.info("Index created successfully")
        else:
            logger.info("Index %s already exists", settings.index_name)

        return True
    except Exception:
        logger.exception("Error creating index %s", settings.index_name)
        return False
