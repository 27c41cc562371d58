"""
Global Error Handling

Catch-all handling for exceptions that escape the seeding run.

Design Goals
------------
- Log the full stack trace for every escaping error
- Map every such error to the same failure exit code
- Keep the handler free of process side effects so it is testable
"""

from __future__ import annotations

import logging

logger = logging.getLogger("kb.errors")

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def unhandled_exception_handler(exc: BaseException) -> int:
    """
    Final safety net for errors not handled inside the seeding steps.

    Parameters
    ----------
    exc : BaseException
        The escaping exception instance.

    Returns
    -------
    int
        The process exit code to use (always EXIT_FAILURE).
    """
    logger.error("Script failed: %s", exc, exc_info=exc)
    return EXIT_FAILURE
