"""Persist and fetch quality metrics records keyed by composition id."""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from discharge_quality.exceptions import PersistenceError
from discharge_quality.metrics.models import KeyQualityMetrics, QualityMetrics
from discharge_quality.persistence.protocols import IPersistenceBackend

log = logging.getLogger(__name__)


class StoredQualityMetrics(BaseModel):
    """Envelope written to the backend for one composition."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    composition_id: str
    tenant_id: str
    quality_metrics: QualityMetrics
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class QualityMetricsStore:
    """Stores :class:`QualityMetrics` through an :class:`IPersistenceBackend`.

    Writes raise :class:`PersistenceError`. Reads are best-effort: a missing
    or unreadable record is logged and reported as ``None``.

    Writes through one store instance are serialized so concurrent stores of
    a new composition agree on ``created_at``. Separate processes sharing a
    file backend are not coordinated; the last writer wins.
    """

    def __init__(self, backend: IPersistenceBackend) -> None:
        self._backend = backend
        self._write_lock = threading.Lock()

    def store_metrics(
        self,
        composition_id: str,
        tenant_id: str,
        metrics: QualityMetrics,
    ) -> StoredQualityMetrics:
        """Save *metrics* for a composition, keeping the original creation time."""
        with self._write_lock:
            now = datetime.now(timezone.utc)
            created_at = now
            existing = self._load_record(composition_id)
            if existing is not None:
                created_at = existing.created_at

            record = StoredQualityMetrics(
                composition_id=composition_id,
                tenant_id=tenant_id,
                quality_metrics=metrics,
                created_at=created_at,
                updated_at=now,
            )
            try:
                self._backend.save(composition_id, record.model_dump_json(by_alias=True))
            except Exception as exc:
                log.exception(
                    "Failed to store quality metrics for %s (tenant %s)",
                    composition_id,
                    tenant_id,
                )
                raise PersistenceError(
                    f"Could not store quality metrics for {composition_id}"
                ) from exc

        log.info(
            "Quality metrics stored for %s (tenant %s): grade %.1f, ease %.1f, smog %.1f",
            composition_id,
            tenant_id,
            metrics.readability.flesch_kincaid_grade_level,
            metrics.readability.flesch_reading_ease,
            metrics.readability.smog_index,
        )
        return record

    def get_metrics(self, composition_id: str) -> Optional[QualityMetrics]:
        record = self._load_record(composition_id)
        return record.quality_metrics if record else None

    def get_key_metrics(self, composition_id: str) -> Optional[KeyQualityMetrics]:
        metrics = self.get_metrics(composition_id)
        return KeyQualityMetrics.from_metrics(metrics) if metrics else None

    def get_batch_metrics(self, composition_ids: Iterable[str]) -> dict[str, QualityMetrics]:
        """Fetch many records at once, silently skipping ids that cannot be read."""
        ids = list(dict.fromkeys(composition_ids))
        found: dict[str, QualityMetrics] = {}
        for composition_id in ids:
            metrics = self.get_metrics(composition_id)
            if metrics is not None:
                found[composition_id] = metrics

        log.info("Batch quality metrics retrieved: %d/%d", len(found), len(ids))
        return found

    def has_metrics(self, composition_id: str) -> bool:
        return self._backend.exists(composition_id)

    def list_composition_ids(
        self,
        tenant_id: Optional[str] = None,
        prefix: str = "",
    ) -> list[str]:
        """Sorted composition ids with stored metrics.

        Filtering by *tenant_id* reads each record; unreadable records are left out.
        """
        keys = self._backend.list_keys(prefix)
        if tenant_id is None:
            return keys
        matching = []
        for key in keys:
            record = self._load_record(key)
            if record is not None and record.tenant_id == tenant_id:
                matching.append(key)
        return matching

    def delete_metrics(self, composition_id: str) -> None:
        self._backend.delete(composition_id)

    def _load_record(self, composition_id: str) -> Optional[StoredQualityMetrics]:
        try:
            raw = self._backend.load(composition_id)
        except KeyError:
            return None
        except Exception:
            log.exception("Failed to load quality metrics for %s", composition_id)
            return None

        try:
            return StoredQualityMetrics.model_validate_json(raw)
        except ValidationError:
            log.exception("Stored quality metrics for %s are unreadable", composition_id)
            return None
