"""Pluggable persistence backends for computed metrics records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from discharge_quality.persistence.file_backend import FilePersistenceBackend
from discharge_quality.persistence.memory_backend import MemoryPersistenceBackend
from discharge_quality.persistence.protocols import IPersistenceBackend

if TYPE_CHECKING:
    from discharge_quality.core.config import PersistenceConfig


def create_backend(config: PersistenceConfig) -> IPersistenceBackend:
    """Build the backend selected by ``DQ_PERSISTENCE_BACKEND``."""
    if config.backend == "file":
        return FilePersistenceBackend(config.store_path)
    return MemoryPersistenceBackend()


__all__ = [
    "IPersistenceBackend",
    "FilePersistenceBackend",
    "MemoryPersistenceBackend",
    "create_backend",
]
