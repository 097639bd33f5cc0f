"""Startup validation: fail-fast on critical misconfigurations."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from discharge_quality.exceptions import ConfigurationError

if TYPE_CHECKING:
    from discharge_quality.core.config import AppSettings

log = logging.getLogger(__name__)


def validate_settings(settings: AppSettings) -> None:
    """Validate application settings. Raises ConfigurationError on fatal misconfig."""
    _check_targets(settings)
    _check_tenants(settings)
    _check_persistence(settings)


def _check_targets(settings: AppSettings) -> None:
    """Reject thresholds that no text could ever satisfy."""
    targets = settings.targets
    if not 0.0 <= targets.min_reading_ease <= 100.0:
        raise ConfigurationError(
            f"DQ_TARGET_MIN_READING_EASE must be within 0-100, got {targets.min_reading_ease}"
        )
    for name in ("max_grade_level", "max_smog_index", "max_avg_sentence_length"):
        value = getattr(targets, name)
        if value <= 0:
            raise ConfigurationError(
                f"DQ_TARGET_{name.upper()} must be positive, got {value}"
            )


def _check_tenants(settings: AppSettings) -> None:
    """Every configured tenant needs at least one parser type."""
    for tenant_id, parser_types in settings.parser.tenants.items():
        if not parser_types:
            raise ConfigurationError(
                f"Tenant {tenant_id!r} has no parser types in DQ_PARSER_TENANTS"
            )
    orphaned = set(settings.parser.tenant_settings) - set(settings.parser.tenants)
    if orphaned:
        log.warning(
            "Parser settings given for unconfigured tenant(s): %s",
            ", ".join(sorted(orphaned)),
        )


def _check_persistence(settings: AppSettings) -> None:
    """Warn about file persistence in containerized environments."""
    is_container = bool(
        os.environ.get("ECS_CONTAINER_METADATA_URI")
        or os.environ.get("KUBERNETES_SERVICE_HOST")
    )
    if is_container and settings.persistence.backend == "file":
        log.warning(
            "DQ_PERSISTENCE_BACKEND=file in a container environment. "
            "Stored metrics will be lost on container restart."
        )
