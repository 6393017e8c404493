"""Render a Pulumi import document to disk and to the console."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.table import Table

from pulumi_account_scraper.models import PulumiImport, ResourceTypeSpec

logger = logging.getLogger(__name__)


def render_import_file(pulumi_import: PulumiImport) -> str:
    """Serialize to the JSON accepted by ``pulumi import --file``."""
    return pulumi_import.model_dump_json(indent=2) + "\n"


def write_import_file(pulumi_import: PulumiImport, output_path: Path) -> Path:
    """Write the import file to *output_path* and return it."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_import_file(pulumi_import), encoding="utf-8")
    logger.info("Wrote %s", output_path)
    return output_path


def summary_table(pulumi_import: PulumiImport) -> Table:
    table = Table(title="Resources to import")
    table.add_column("Type", style="bold")
    table.add_column("Count", justify="right")
    for type_identifier, count in pulumi_import.summary().items():
        table.add_row(type_identifier, str(count))
    table.add_row("[dim]total[/dim]", str(len(pulumi_import.resources)))
    return table


def resource_types_table(specs: list[ResourceTypeSpec]) -> Table:
    table = Table(title="Supported resource types", show_lines=True)
    table.add_column("Type", style="bold")
    table.add_column("Operation")
    table.add_column("List field")
    table.add_column("Id field")
    table.add_column("Pulumi type")
    for spec in specs:
        table.add_row(
            spec.name, spec.operation, spec.list_field, spec.id_field, spec.type_identifier
        )
    return table
