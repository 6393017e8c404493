"""Application configuration and settings."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

from pulumi_account_scraper.naming import DEFAULT_RESOURCE_TYPES

DEFAULT_OUTPUT = "pulumi-import.json"
STDOUT = "-"


def _env_region() -> str:
    return os.environ.get("AWS_REGION") or os.environ.get("AWS_DEFAULT_REGION", "")


class Settings(BaseModel):
    """Runtime settings resolved from env vars and CLI flags."""

    # ── AWS ──────────────────────────────────────────────────────────
    aws_region: str = Field(
        default_factory=_env_region,
        description="AWS region to scan (e.g. eu-west-1). Uses boto3 default if empty.",
    )
    aws_profile: str = Field(
        default_factory=lambda: os.environ.get("AWS_PROFILE", ""),
        description="AWS CLI profile name. Uses default credentials if empty.",
    )

    # ── Scrape ───────────────────────────────────────────────────────
    resource_types: list[str] = Field(
        default_factory=lambda: list(DEFAULT_RESOURCE_TYPES),
        description="snake_case EC2 resource types to import, in order.",
    )
    include_associations: bool = True
    include_instances: bool = True

    # Output
    output: str = DEFAULT_OUTPUT
    verbose: bool = False

    @property
    def writes_to_stdout(self) -> bool:
        return self.output == STDOUT

    @property
    def resolved_output(self) -> Path:
        return Path(self.output).resolve()
