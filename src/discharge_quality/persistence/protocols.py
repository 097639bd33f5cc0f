"""Storage contract behind :class:`~discharge_quality.metrics.QualityMetricsStore`."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IPersistenceBackend(Protocol):
    """Serialized metrics records keyed by composition id."""

    def save(self, key: str, data: str) -> None:
        """Write the JSON record for *key*, replacing any earlier one."""
        ...

    def load(self, key: str) -> str:
        """Raises KeyError when no record is stored for *key*."""
        ...

    def exists(self, key: str) -> bool:
        ...

    def delete(self, key: str) -> None:
        """Removing an absent record is not an error."""
        ...

    def list_keys(self, prefix: str = "") -> list[str]:
        """Stored composition ids starting with *prefix*, sorted."""
        ...
