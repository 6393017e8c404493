"""Pydantic models for raw AWS records and Pulumi import descriptors."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ScrapeError(Exception):
    """A describe response did not have the shape its resource type expects."""


# ──────────────────────────── Raw records ─────────────────────────────────────


def get_field(record: dict[str, Any], key: str) -> Any | None:
    """Return ``record[key]`` or ``None`` when the field is absent."""
    return record.get(key)


def require_field(record: dict[str, Any], key: str, context: str) -> Any:
    """Return ``record[key]``, raising :class:`ScrapeError` when it is absent."""
    value = get_field(record, key)
    if value is None:
        raise ScrapeError(f"{context}: record has no '{key}' field")
    return value


# ──────────────────────────── Import descriptors ──────────────────────────────


class ImportDescriptor(BaseModel):
    """A single entry of a ``pulumi import --file`` document."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(description="Pulumi type token, e.g. 'aws:ec2/vpc:Vpc'")
    name: str = Field(description="Logical name given to the imported resource")
    id: str = Field(description="Provider id, possibly composite ('subnet-1/rtb-1')")


class PulumiImport(BaseModel):
    """The full import document handed to ``pulumi import``."""

    resources: list[ImportDescriptor] = Field(default_factory=list)

    def extend(self, descriptors: list[ImportDescriptor]) -> None:
        self.resources.extend(descriptors)

    def summary(self) -> dict[str, int]:
        """Count descriptors by type token."""
        counts: dict[str, int] = {}
        for r in self.resources:
            counts[r.type] = counts.get(r.type, 0) + 1
        return counts

    def duplicate_names(self) -> list[str]:
        """Names used by more than one descriptor, in first-seen order."""
        seen: set[str] = set()
        dupes: list[str] = []
        for r in self.resources:
            if r.name in seen and r.name not in dupes:
                dupes.append(r.name)
            seen.add(r.name)
        return dupes


# ──────────────────────────── Resource types ──────────────────────────────────


class ResourceTypeSpec(BaseModel):
    """How to list one EC2 resource type and turn it into descriptors."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="snake_case resource type, e.g. 'route_table'")
    operation: str = Field(description="boto3 describe operation, e.g. 'describe_route_tables'")
    list_field: str = Field(description="Response field holding the records, e.g. 'RouteTables'")
    id_field: str = Field(description="Record field holding the id, e.g. 'RouteTableId'")
    type_identifier: str = Field(description="Pulumi type token for every descriptor")
