"""Tests for pulumi_account_scraper.renderer."""

import json
from pathlib import Path

from rich.console import Console

from pulumi_account_scraper.models import ImportDescriptor, PulumiImport
from pulumi_account_scraper.naming import RESOURCE_TYPES
from pulumi_account_scraper.renderer import (
    render_import_file,
    resource_types_table,
    summary_table,
    write_import_file,
)


def _sample_import() -> PulumiImport:
    return PulumiImport(resources=[
        ImportDescriptor(type="aws:ec2/vpc:Vpc", name="web-vpc", id="vpc-123"),
        ImportDescriptor(
            type="aws:ec2/routeTableAssociation:RouteTableAssociation",
            name="import-rtbassoc-1",
            id="subnet-5/rtb-1",
        ),
    ])


def _render(table) -> str:
    console = Console(width=200, record=True)
    console.print(table)
    return console.export_text()


class TestRenderImportFile:
    def test_pulumi_import_shape(self) -> None:
        parsed = json.loads(render_import_file(_sample_import()))
        assert parsed == {"resources": [
            {"type": "aws:ec2/vpc:Vpc", "name": "web-vpc", "id": "vpc-123"},
            {
                "type": "aws:ec2/routeTableAssociation:RouteTableAssociation",
                "name": "import-rtbassoc-1",
                "id": "subnet-5/rtb-1",
            },
        ]}

    def test_empty_document(self) -> None:
        assert json.loads(render_import_file(PulumiImport())) == {"resources": []}


class TestWriteImportFile:
    def test_writes_file(self, tmp_path: Path) -> None:
        out = tmp_path / "nested" / "pulumi-import.json"
        written = write_import_file(_sample_import(), out)

        assert written == out
        assert out.exists()
        assert len(json.loads(out.read_text())["resources"]) == 2


class TestTables:
    def test_summary_table(self) -> None:
        text = _render(summary_table(_sample_import()))
        assert "aws:ec2/vpc:Vpc" in text
        assert "total" in text

    def test_resource_types_table(self) -> None:
        text = _render(resource_types_table(list(RESOURCE_TYPES.values())))
        assert "describe_security_groups" in text
        assert "GroupId" in text
