"""
Storage Registry.

Picks the storage backend from configuration and keeps one
instance for the lifetime of the process.
"""

from typing import Optional
import logging

from app.core.settings import settings
from app.storage.base import Storage
from app.storage.memory import create_memory_storage

logger = logging.getLogger(__name__)

SUPPORTED_BACKENDS = ("memory", "firestore")

_storage: Optional[Storage] = None


def create_storage(backend: Optional[str] = None) -> Storage:
    backend = (backend or settings.STORAGE_BACKEND).lower()

    if backend == "firestore":
        # Imported lazily so the memory backend never needs Firebase configured
        from app.storage.firestore import create_firestore_storage
        return create_firestore_storage()

    if backend != "memory":
        logger.warning(f"Unknown STORAGE_BACKEND '{backend}', falling back to memory. Supported: {SUPPORTED_BACKENDS}")

    return create_memory_storage()


def get_storage() -> Storage:
    """
    Get or create the process-wide Storage bundle.

    Returns:
        Storage: The configured backend
    """
    global _storage
    if _storage is None:
        _storage = create_storage()
    return _storage


def reset_storage_for_test(storage: Optional[Storage] = None) -> None:
    """Replace (or drop) the cached Storage so each test starts clean."""
    global _storage
    _storage = storage
