"""Write-through helper shared by the session use cases."""

from collections.abc import Callable

import structlog

from calearner.exceptions import StorageError

logger = structlog.get_logger(__name__)


def persist(record: str, write: Callable[[], None]) -> bool:
    """
    Run a repository write, keeping in-memory state authoritative on failure.

    Writes are fire-and-forget: a failed write is logged and the session keeps
    the already-updated in-memory value until the next reload.

    Returns:
        True if the write went through
    """
    try:
        write()
    except StorageError as e:
        logger.warning("session_persist_failed", record=record, key=e.key, error=e.reason)
        return False
    return True
