"""Shared test fixtures."""

from __future__ import annotations

from typing import Any, Callable
from unittest.mock import MagicMock

import pytest


def _paginated_client(pages_by_operation: dict[str, list[dict[str, Any]]]) -> MagicMock:
    """Create a mock EC2 client whose paginators yield the given pages."""
    client = MagicMock()

    def _get_paginator(operation: str) -> MagicMock:
        paginator = MagicMock()
        paginator.paginate.return_value = pages_by_operation.get(operation, [])
        return paginator

    client.get_paginator.side_effect = _get_paginator
    return client


@pytest.fixture()
def ec2_client() -> Callable[[dict[str, list[dict[str, Any]]]], MagicMock]:
    """Factory for mock EC2 clients keyed by describe operation."""
    return _paginated_client


@pytest.fixture()
def account_pages() -> dict[str, list[dict[str, Any]]]:
    """A small VPC with one public subnet, a route table and an instance."""
    return {
        "describe_vpcs": [{"Vpcs": [
            {"VpcId": "vpc-123", "Tags": [{"Key": "Name", "Value": "main"}]},
        ]}],
        "describe_subnets": [{"Subnets": [
            {"SubnetId": "subnet-5", "Tags": [{"Key": "Name", "Value": "public"}]},
            {"SubnetId": "subnet-6"},
        ]}],
        "describe_route_tables": [{"RouteTables": [
            {
                "RouteTableId": "rtb-1",
                "Associations": [
                    {"RouteTableAssociationId": "rtbassoc-main", "Main": True},
                    {"RouteTableAssociationId": "rtbassoc-1", "SubnetId": "subnet-5"},
                ],
            },
        ]}],
        "describe_nat_gateways": [{"NatGateways": []}],
        "describe_internet_gateways": [{"InternetGateways": [
            {"InternetGatewayId": "igw-1", "Tags": []},
        ]}],
        "describe_instances": [{"Reservations": [
            {"Instances": [{"InstanceId": "i-1", "Tags": [{"Key": "Name", "Value": "web"}]}]},
        ]}],
    }
