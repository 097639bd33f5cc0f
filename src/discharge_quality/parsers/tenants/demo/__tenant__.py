"""Demo tenant manifest, discovered by ParserRegistry.auto_discover()."""

from __future__ import annotations

from discharge_quality.parsers.registry import ParserManifest

parser = ParserManifest(
    parser_type="demo",
    display_name="Demo hospital discharge format",
    description="Standard five-section summary with medication dispositions",
    parser_class="discharge_quality.parsers.tenants.demo.parser:DemoParser",
)
