"""Resource-type naming: case conversion, Pulumi type tokens, descriptor names.

AWS describe operations mostly follow one convention
(``describe_<type>s`` → ``<Type>s`` → ``<Type>Id``), and Pulumi type tokens
follow another (``aws:ec2/<type>:<Type>``).  :data:`RESOURCE_TYPES` spells the
mapping out for every supported type so irregular ones can be listed as they
really are; :func:`derive_resource_type` applies the convention for anything
else.
"""

from __future__ import annotations

import re
from typing import Any

from pulumi_account_scraper.models import ResourceTypeSpec, ScrapeError, get_field

DEFAULT_NAMESPACE = "aws:ec2"

_SNAKE_RE = re.compile(r"^[a-z][a-z0-9]*(_[a-z0-9]+)*$")


def to_pascal_case(name: str) -> str:
    """``route_table`` → ``RouteTable``."""
    return "".join(part.capitalize() for part in name.split("_") if part)


def to_camel_case(name: str) -> str:
    """``route_table`` → ``routeTable``."""
    pascal = to_pascal_case(name)
    return pascal[:1].lower() + pascal[1:]


def pulumi_type_identifier(resource_type: str, namespace: str = DEFAULT_NAMESPACE) -> str:
    """Build the Pulumi type token, e.g. ``aws:ec2/routeTable:RouteTable``."""
    return f"{namespace}/{to_camel_case(resource_type)}:{to_pascal_case(resource_type)}"


def derive_resource_type(name: str, namespace: str = DEFAULT_NAMESPACE) -> ResourceTypeSpec:
    """Build a :class:`ResourceTypeSpec` purely from the naming convention."""
    if not _SNAKE_RE.match(name):
        raise ScrapeError(f"Resource type must be snake_case, got '{name}'")
    pascal = to_pascal_case(name)
    return ResourceTypeSpec(
        name=name,
        operation=f"describe_{name}s",
        list_field=f"{pascal}s",
        id_field=f"{pascal}Id",
        type_identifier=pulumi_type_identifier(name, namespace),
    )


RESOURCE_TYPES: dict[str, ResourceTypeSpec] = {
    spec.name: spec
    for spec in [
        derive_resource_type("vpc"),
        derive_resource_type("subnet"),
        derive_resource_type("route_table"),
        derive_resource_type("nat_gateway"),
        derive_resource_type("internet_gateway"),
        derive_resource_type("network_acl"),
        derive_resource_type("vpc_endpoint"),
        # Security groups are keyed by GroupId, not SecurityGroupId
        ResourceTypeSpec(
            name="security_group",
            operation="describe_security_groups",
            list_field="SecurityGroups",
            id_field="GroupId",
            type_identifier="aws:ec2/securityGroup:SecurityGroup",
        ),
    ]
}

DEFAULT_RESOURCE_TYPES: list[str] = [
    "vpc",
    "subnet",
    "route_table",
    "nat_gateway",
    "internet_gateway",
]

ROUTE_TABLE_ASSOCIATION_TYPE = "aws:ec2/routeTableAssociation:RouteTableAssociation"
INSTANCE_TYPE = pulumi_type_identifier("instance")


def resolve_resource_type(name: str) -> ResourceTypeSpec:
    """Return the table entry for *name*, or the convention-derived spec."""
    spec = RESOURCE_TYPES.get(name)
    if spec is not None:
        return spec
    return derive_resource_type(name)


def descriptor_name(record: dict[str, Any], resource_id: str) -> str:
    """Pick the import name for a raw record.

    A ``Name`` attribute is used verbatim (it is unique, e.g. an S3 bucket).
    Otherwise the first ``Name`` tag is used with the id appended, since tag
    values need not be unique.  Falls back to ``import-<id>``.
    """
    name = get_field(record, "Name")
    if name is not None:
        return name

    tags = get_field(record, "Tags")
    if tags is not None:
        for tag in tags:
            if tag.get("Key") == "Name":
                return f"{tag.get('Value', '')}-{resource_id}"

    return f"import-{resource_id}"
