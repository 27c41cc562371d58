"""
Knowledge Base Seeder

Entry point logic for the run-once seeding job:

1. Ensure the index exists (create and wait if absent)
2. Upsert one record per HR policy, sequentially, in table order
3. Map the outcome to a process exit code

Records are given fresh random identifiers on every run, so running the job
twice stores every policy twice.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from pinecone import Pinecone

from .clients import create_embedder, create_pinecone_client
from .config import Settings, get_settings
from .core.errors import EXIT_FAILURE, EXIT_SUCCESS, unhandled_exception_handler
from .index import ensure_index_exists
from .models import KnowledgeBaseDocument
from .policies import HR_POLICIES, PolicyRecord

logger = logging.getLogger("kb.seeder")


def populate_knowledge_base(
    pc: Pinecone,
    settings: Settings,
    policies: Sequence[PolicyRecord] = HR_POLICIES,
) -> bool:
    """
    Upsert every policy into the knowledge base index.

    Each record is sent in its own upsert call and the loop stops at the
    first failure. Records stored before the failure are kept.

    Returns
    -------
    bool
        True if every policy was stored, False otherwise.
    """
    logger.info("Starting to populate knowledge base...")

    if not ensure_index_exists(pc, settings):
        logger.error("Failed to create or verify index")
        return False

    try:
        index = pc.Index(settings.index_name)

        for policy in policies:
            document = KnowledgeBaseDocument.from_policy(
                policy, category=settings.document_category
            )
            index.upsert_records(settings.index_namespace, [document.to_record()])
            logger.info("Added policy: %s", policy.title)
    except Exception:
        logger.exception("Error populating knowledge base")
        return False

    logger.info("Knowledge base populated successfully!")
    return True


def run(settings: Optional[Settings] = None) -> int:
    """
    Run the seeding job and return the process exit code.
    """
    try:
        settings = settings or get_settings()
        logging.getLogger().setLevel(settings.log_level.upper())

        # Blank credentials fail here, before any remote call
        for name in ("openai_api_key", "pinecone_api_key"):
            if not getattr(settings, name).get_secret_value():
                raise ValueError(f"{name.upper()} is empty")

        pc = create_pinecone_client(settings)
        embedder = create_embedder(settings)
        logger.debug("Clients ready (embedding model %s)", embedder.model)

        # populate_knowledge_base has already logged the failure
        if not populate_knowledge_base(pc, settings):
            return EXIT_FAILURE
    except Exception as exc:
        return unhandled_exception_handler(exc)

    logger.info("Script completed")
    return EXIT_SUCCESS


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    configure_logging()
    sys.exit(run())
