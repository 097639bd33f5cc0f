"""Nested pydantic-settings configuration for discharge-quality.

Each group reads its own ``DQ_<GROUP>_*`` environment variables, e.g.::

    export DQ_TARGET_MAX_GRADE_LEVEL=8.0
    export DQ_PERSISTENCE_BACKEND=file
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class TargetConfig(BaseSettings):
    """Simplification targets a patient-facing text must meet.

    Defaults correspond to a 5th-9th grade reading level.
    """

    model_config = {"env_prefix": "DQ_TARGET_"}

    max_grade_level: float = 9.0
    min_reading_ease: float = 60.0
    max_smog_index: float = 9.0
    max_avg_sentence_length: float = 20.0


class ParserSettings(BaseSettings):
    """Tenant to parser-type wiring.

    ``tenants`` maps a tenant id to the parser types tried in order.
    Env vars use ``DQ_PARSER_`` prefix; dict values are given as JSON::

        export DQ_PARSER_TENANTS='{"demo": ["demo"], "hospital-a": ["demo"]}'
    """

    model_config = {"env_prefix": "DQ_PARSER_"}

    tenants: dict[str, list[str]] = Field(default_factory=lambda: {"demo": ["demo"]})
    tenant_settings: dict[str, dict[str, Any]] = Field(default_factory=dict)
    auto_discover: bool = True


class PersistenceConfig(BaseSettings):
    """Metrics store backend.

    Env vars use ``DQ_PERSISTENCE_`` prefix.
    """

    model_config = {"env_prefix": "DQ_PERSISTENCE_"}

    backend: Literal["memory", "file"] = "memory"
    store_path: Path = Path("./quality_metrics")


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Env vars use ``DQ_OBSERVABILITY_`` prefix. ``json_logs`` left unset picks
    JSON lines when stderr is not a TTY.
    """

    model_config = {"env_prefix": "DQ_OBSERVABILITY_"}

    log_level: str = "INFO"
    json_logs: Optional[bool] = None


class AppSettings(BaseSettings):
    """Top-level settings aggregating all sub-configs."""

    targets: TargetConfig = TargetConfig()
    parser: ParserSettings = ParserSettings()
    persistence: PersistenceConfig = PersistenceConfig()
    observability: ObservabilityConfig = ObservabilityConfig()
