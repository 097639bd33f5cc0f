"""Tenant parser registry and document dispatch.

Parser types are described by ``ParserManifest`` objects, registered by hand
or found by :meth:`ParserRegistry.auto_discover` in the ``__tenant__.py``
manifests under ``discharge_quality.parsers.tenants``. Tenants are then wired
to one or more parser types, tried in order.

Usage::

    from discharge_quality.parsers.registry import build_registry

    registry = build_registry()          # demo -> DemoParser
    outcome = registry.parse_discharge_document("demo", summary, instructions)
    if outcome.parser_used:
        print(outcome.summary.discharge_diagnosis)

The registry is built once and passed to whatever needs it; there is no
module-level instance. Reconfiguring a tenant swaps in a new read-only
snapshot, so concurrent dispatch calls never observe a half-updated mapping.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
import threading
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional

from discharge_quality.exceptions import TenantConfigurationError
from discharge_quality.parsers.models import (
    NotParsed,
    NotParsedReason,
    ParseOutcome,
    Parsed,
)

if TYPE_CHECKING:
    from discharge_quality.core.config import ParserSettings
    from discharge_quality.parsers.base import DischargeParser

log = logging.getLogger(__name__)

TENANTS_PACKAGE = "discharge_quality.parsers.tenants"


@dataclass(frozen=True)
class ParserManifest:
    """Describes one parser type; ``parser_class`` is imported lazily."""

    parser_type: str
    display_name: str
    parser_class: str
    description: str = ""

    def resolve(self) -> type:
        """Import and return the class referenced by ``parser_class``.

        Raises:
            TenantConfigurationError: If the dotted path cannot be imported.
        """
        try:
            return _import_dotted_path(self.parser_class)
        except (ImportError, AttributeError) as exc:
            raise TenantConfigurationError(
                f"Parser type {self.parser_type!r}: cannot import {self.parser_class!r}"
            ) from exc


@dataclass(frozen=True)
class TenantParserConfig:
    tenant_id: str
    parser_types: tuple[str, ...]
    settings: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class _TenantEntry:
    config: TenantParserConfig
    parsers: tuple[DischargeParser, ...]


class ParserRegistry:
    """Maps tenant ids to candidate parser instances and dispatches documents."""

    def __init__(self) -> None:
        self._manifests: dict[str, ParserManifest] = {}
        self._tenants: Mapping[str, _TenantEntry] = MappingProxyType({})
        self._lock = threading.Lock()

    # ── Parser types ────────────────────────────────────────────────

    def register_parser_type(self, manifest: ParserManifest) -> None:
        if manifest.parser_type in self._manifests:
            log.warning("Parser type %r already registered, overwriting", manifest.parser_type)
        self._manifests[manifest.parser_type] = manifest
        log.debug("Registered parser type: %s", manifest.parser_type)

    def get_parser_type(self, parser_type: str) -> ParserManifest:
        """Raises KeyError if the parser type is not registered."""
        if parser_type not in self._manifests:
            raise KeyError(
                f"Parser type {parser_type!r} not found. "
                f"Available: {sorted(self._manifests)}"
            )
        return self._manifests[parser_type]

    def list_parser_types(self) -> list[ParserManifest]:
        return sorted(self._manifests.values(), key=lambda m: m.parser_type)

    def auto_discover(self) -> None:
        """Register every ``__tenant__`` manifest under the tenants package."""
        tenants_pkg = importlib.import_module(TENANTS_PACKAGE)

        for _, modname, ispkg in pkgutil.iter_modules(
            tenants_pkg.__path__, prefix=f"{TENANTS_PACKAGE}."
        ):
            if not ispkg:
                continue

            try:
                mod = importlib.import_module(f"{modname}.__tenant__")
            except ModuleNotFoundError:
                log.debug("No __tenant__.py in %s, skipping", modname)
                continue

            manifest = getattr(mod, "parser", None)
            if not isinstance(manifest, ParserManifest):
                log.warning("%s.__tenant__.parser is not a ParserManifest, skipping", modname)
                continue

            self.register_parser_type(manifest)

        log.info(
            "Auto-discovered %d parser type(s): %s",
            len(self._manifests),
            ", ".join(sorted(self._manifests)),
        )

    # ── Tenants ─────────────────────────────────────────────────────

    def configure_tenant(
        self,
        tenant_id: str,
        parser_types: Iterable[str],
        settings: Optional[Mapping[str, Any]] = None,
    ) -> TenantParserConfig:
        """Wire *tenant_id* to the given parser types, replacing any previous wiring.

        Raises:
            TenantConfigurationError: If a parser type is unknown or fails to build.
        """
        config = TenantParserConfig(
            tenant_id=tenant_id,
            parser_types=tuple(parser_types),
            settings=MappingProxyType(dict(settings or {})),
        )
        parsers = tuple(self._build_parser(t, config) for t in config.parser_types)

        with self._lock:
            tenants = dict(self._tenants)
            tenants[tenant_id] = _TenantEntry(config=config, parsers=parsers)
            self._tenants = MappingProxyType(tenants)

        log.info("Configured tenant %s with parser(s): %s", tenant_id, ", ".join(config.parser_types))
        return config

    def remove_tenant(self, tenant_id: str) -> None:
        with self._lock:
            tenants = dict(self._tenants)
            tenants.pop(tenant_id, None)
            self._tenants = MappingProxyType(tenants)

    def get_tenant_parsers(self, tenant_id: str) -> tuple[DischargeParser, ...]:
        entry = self._tenants.get(tenant_id)
        return entry.parsers if entry else ()

    def get_tenant_config(self, tenant_id: str) -> Optional[TenantParserConfig]:
        entry = self._tenants.get(tenant_id)
        return entry.config if entry else None

    def list_tenants(self) -> list[str]:
        return sorted(self._tenants)

    def describe_tenant(self, tenant_id: str) -> dict[str, Any]:
        """Summary of a tenant's parser wiring for admin display."""
        config = self.get_tenant_config(tenant_id)
        if config is None:
            return {
                "tenantId": tenant_id,
                "parserTypes": [],
                "hasCustomParser": False,
                "settings": {},
            }
        return {
            "tenantId": config.tenant_id,
            "parserTypes": list(config.parser_types),
            "hasCustomParser": bool(config.parser_types),
            "settings": dict(config.settings),
        }

    # ── Dispatch ────────────────────────────────────────────────────

    def parse_discharge_document(
        self,
        tenant_id: str,
        raw_summary: str,
        raw_instructions: str,
    ) -> ParseOutcome:
        """Parse with the first of the tenant's parsers that recognizes *raw_summary*.

        Never raises: an unconfigured tenant, an unrecognized document, or a
        parser crash all come back as :class:`NotParsed` so the caller can fall
        back to the raw text.
        """
        parsers = self.get_tenant_parsers(tenant_id)
        if not parsers:
            log.warning("No parsers registered for tenant: %s", tenant_id)
            return NotParsed(
                reason=NotParsedReason.NO_PARSERS,
                detail=f"No parsers registered for tenant {tenant_id!r}",
            )

        for parser in parsers:
            try:
                recognized = parser.can_parse(raw_summary)
            except Exception:
                log.exception(
                    "Parser %s detection failed for tenant %s, skipping",
                    parser.parser_type,
                    tenant_id,
                )
                continue
            if not recognized:
                continue
            try:
                summary = parser.parse_discharge_summary(raw_summary)
                instructions = parser.parse_discharge_instructions(raw_instructions)
            except Exception as exc:
                log.exception(
                    "Parser %s failed for tenant %s", parser.parser_type, tenant_id
                )
                return NotParsed(
                    reason=NotParsedReason.PARSER_FAILED,
                    detail=f"{parser.parser_type}: {exc}",
                )

            warnings = [
                f"Section not found or empty: {name}"
                for name in (*summary.empty_sections(), *instructions.empty_sections())
            ]
            log.info(
                "Parsed document for tenant %s with %s parser: %d diagnoses, "
                "%d new medications, %d warning(s)",
                tenant_id,
                parser.parser_type,
                len(summary.discharge_diagnosis),
                len(instructions.discharge_medications.new),
                len(warnings),
            )
            return Parsed(
                parser_type=parser.parser_type,
                summary=summary,
                instructions=instructions,
                warnings=warnings,
            )

        log.warning("No parser could handle document for tenant: %s", tenant_id)
        return NotParsed(
            reason=NotParsedReason.NO_MATCH,
            detail=f"None of {[p.parser_type for p in parsers]} recognized the document",
        )

    # ── Internal helpers ────────────────────────────────────────────

    def _build_parser(self, parser_type: str, config: TenantParserConfig) -> DischargeParser:
        try:
            manifest = self.get_parser_type(parser_type)
        except KeyError as exc:
            raise TenantConfigurationError(
                f"Tenant {config.tenant_id!r} references unknown parser type {parser_type!r}"
            ) from exc
        parser_cls = manifest.resolve()
        return parser_cls(settings=config.settings)


def build_registry(settings: Optional[ParserSettings] = None) -> ParserRegistry:
    """Construct a registry from ``ParserSettings`` (defaults: ``demo -> demo``)."""
    if settings is None:
        from discharge_quality.core.config import ParserSettings

        settings = ParserSettings()

    registry = ParserRegistry()
    if settings.auto_discover:
        registry.auto_discover()

    for tenant_id, parser_types in settings.tenants.items():
        registry.configure_tenant(
            tenant_id,
            parser_types,
            settings=settings.tenant_settings.get(tenant_id),
        )
    return registry


def _import_dotted_path(dotted: str) -> Any:
    """Import ``module.path:ClassName`` or ``module.path.attr``."""
    if ":" in dotted:
        module_path, obj_name = dotted.rsplit(":", 1)
    else:
        module_path, obj_name = dotted.rsplit(".", 1)
    mod = importlib.import_module(module_path)
    return getattr(mod, obj_name)
