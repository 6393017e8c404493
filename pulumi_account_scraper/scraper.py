"""Scrape EC2 resources from a live AWS account into Pulumi import descriptors.

Every describe call is read to completion through its boto3 paginator and
turned into ``{type, name, id}`` descriptors.  Errors are not caught here: an
API, credential or response-shape failure aborts the whole scrape.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

import boto3

from pulumi_account_scraper.models import (
    ImportDescriptor,
    PulumiImport,
    get_field,
    require_field,
)
from pulumi_account_scraper.naming import (
    DEFAULT_RESOURCE_TYPES,
    INSTANCE_TYPE,
    ROUTE_TABLE_ASSOCIATION_TYPE,
    descriptor_name,
    resolve_resource_type,
)

logger = logging.getLogger(__name__)

RawRecord = dict[str, Any]


def _get_boto3_session(region: str = "", profile: str = "") -> Any:
    kwargs: dict[str, str] = {}
    if region:
        kwargs["region_name"] = region
    if profile:
        kwargs["profile_name"] = profile
    return boto3.Session(**kwargs)


def _paginate(client: Any, operation: str, list_field: str) -> list[RawRecord]:
    """Collect *list_field* from every page of *operation*."""
    records: list[RawRecord] = []
    paginator = client.get_paginator(operation)
    for page in paginator.paginate():
        records.extend(require_field(page, list_field, operation))
    return records


# ══════════════════════════════════════════════════════════════════════════════
#  GENERIC GENERATOR
# ══════════════════════════════════════════════════════════════════════════════


def generate_import_resources(
    fetch_records: Callable[[], Sequence[RawRecord]],
    extract_id: Callable[[RawRecord], str],
    type_identifier: str,
) -> list[ImportDescriptor]:
    """Turn raw describe records into import descriptors, one per record.

    Args:
        fetch_records: Returns the complete, already-materialized record list.
        extract_id: Maps one record to its provider id.
        type_identifier: Pulumi type token used for every descriptor.

    Returns:
        Descriptors in the order the records were returned.
    """
    descriptors: list[ImportDescriptor] = []
    for record in fetch_records():
        resource_id = extract_id(record)
        descriptors.append(ImportDescriptor(
            type=type_identifier,
            name=descriptor_name(record, resource_id),
            id=resource_id,
        ))
    logger.debug("Generated %d %s descriptors", len(descriptors), type_identifier)
    return descriptors


# ══════════════════════════════════════════════════════════════════════════════
#  SPECIALIZATIONS
# ══════════════════════════════════════════════════════════════════════════════


def import_ec2_resources(resource_type: str, client: Any) -> list[ImportDescriptor]:
    """Import every resource of one EC2 type, e.g. ``"route_table"``."""
    spec = resolve_resource_type(resource_type)

    def fetch_records() -> list[RawRecord]:
        return _paginate(client, spec.operation, spec.list_field)

    def extract_id(record: RawRecord) -> str:
        return require_field(record, spec.id_field, resource_type)

    return generate_import_resources(fetch_records, extract_id, spec.type_identifier)


def import_route_table_associations(client: Any) -> list[ImportDescriptor]:
    """Import subnet ↔ route-table associations.

    Pulumi identifies an association as ``<subnetId>/<routeTableId>``.  Main
    route-table associations carry no ``SubnetId`` and are skipped.
    """
    descriptors: list[ImportDescriptor] = []
    for route_table in _paginate(client, "describe_route_tables", "RouteTables"):
        route_table_id = require_field(route_table, "RouteTableId", "route_table")
        for association in get_field(route_table, "Associations") or []:
            subnet_id = get_field(association, "SubnetId")
            if subnet_id is None:
                continue
            association_id = require_field(
                association, "RouteTableAssociationId", "route_table_association"
            )
            descriptors.append(ImportDescriptor(
                type=ROUTE_TABLE_ASSOCIATION_TYPE,
                name=f"import-{association_id}",
                id=f"{subnet_id}/{route_table_id}",
            ))
    return descriptors


def _get_ec2_instances(client: Any) -> list[RawRecord]:
    """Flatten the instances of every reservation."""
    instances: list[RawRecord] = []
    for reservation in _paginate(client, "describe_instances", "Reservations"):
        instances.extend(get_field(reservation, "Instances") or [])
    return instances


def import_ec2_instances(client: Any) -> list[ImportDescriptor]:
    """Import EC2 instances across all reservations."""
    return generate_import_resources(
        lambda: _get_ec2_instances(client),
        lambda instance: require_field(instance, "InstanceId", "instance"),
        INSTANCE_TYPE,
    )


# ══════════════════════════════════════════════════════════════════════════════
#  MAIN ENTRY POINT
# ══════════════════════════════════════════════════════════════════════════════


def scrape_account(
    region: str = "",
    profile: str = "",
    resource_types: list[str] | None = None,
    include_associations: bool = True,
    include_instances: bool = True,
) -> PulumiImport:
    """Scrape EC2 resources of one account/region into a Pulumi import document.

    Args:
        region: AWS region to scan. Uses the boto3 default if empty.
        profile: AWS CLI profile name. Uses default credentials if empty.
        resource_types: snake_case resource types to import, in order.
                        Defaults to :data:`DEFAULT_RESOURCE_TYPES`.
        include_associations: Also import route-table associations.
        include_instances: Also import EC2 instances.

    Returns:
        The accumulated import document.
    """
    session = _get_boto3_session(region=region, profile=profile)
    effective_region = region or session.region_name or "us-east-1"
    ec2 = session.client("ec2", region_name=effective_region)

    pulumi_import = PulumiImport()
    for resource_type in resource_types or DEFAULT_RESOURCE_TYPES:
        logger.info("Scraping %s in %s …", resource_type, effective_region)
        found = import_ec2_resources(resource_type, ec2)
        pulumi_import.extend(found)
        logger.info("  %s: found %d resources", resource_type, len(found))

    if include_associations:
        found = import_route_table_associations(ec2)
        pulumi_import.extend(found)
        logger.info("  route_table_association: found %d resources", len(found))

    if include_instances:
        found = import_ec2_instances(ec2)
        pulumi_import.extend(found)
        logger.info("  instance: found %d resources", len(found))

    logger.info(
        "Scrape complete: %d resources in %s",
        len(pulumi_import.resources),
        effective_region,
    )
    return pulumi_import
