"""CLI entry-point for pulumi-account-scraper."""

from __future__ import annotations

import logging
import sys

import click
from botocore.exceptions import BotoCoreError, ClientError
from rich.console import Console
from rich.markup import escape

from pulumi_account_scraper import __version__
from pulumi_account_scraper.config import DEFAULT_OUTPUT, Settings
from pulumi_account_scraper.models import ScrapeError
from pulumi_account_scraper.naming import RESOURCE_TYPES
from pulumi_account_scraper.renderer import (
    render_import_file,
    resource_types_table,
    summary_table,
    write_import_file,
)
from pulumi_account_scraper.scraper import scrape_account

console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )
    # Quieten noisy libraries
    logging.getLogger("boto3").setLevel(logging.WARNING)
    logging.getLogger("botocore").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


@click.group()
@click.version_option(version=__version__, prog_name="pulumi-scrape")
def main() -> None:
    """Generate a Pulumi bulk-import file from an existing AWS account."""


@main.command()
@click.option("--region", default="", help="AWS region (or set AWS_REGION env var).")
@click.option("--profile", default="", help="AWS CLI profile (or set AWS_PROFILE env var).")
@click.option(
    "--type",
    "resource_types",
    multiple=True,
    type=click.Choice(sorted(RESOURCE_TYPES)),
    help="Resource type to import. Repeatable. Defaults to the core VPC types.",
)
@click.option(
    "--no-associations", is_flag=True, help="Skip route-table associations."
)
@click.option("--no-instances", is_flag=True, help="Skip EC2 instances.")
@click.option(
    "--output", "-o", default=DEFAULT_OUTPUT, help="Import file path, or '-' for stdout."
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def scrape(
    region: str,
    profile: str,
    resource_types: tuple[str, ...],
    no_associations: bool,
    no_instances: bool,
    output: str,
    verbose: bool,
) -> None:
    """Scrape EC2 resources and write a `pulumi import --file` document.

    Examples:

      pulumi-scrape scrape --region eu-west-1

      pulumi-scrape scrape --type vpc --type subnet --no-instances -o -
    """
    settings = Settings(
        include_associations=not no_associations,
        include_instances=not no_instances,
        output=output,
        verbose=verbose,
    )
    _configure_logging(settings.verbose)
    if region:
        settings.aws_region = region
    if profile:
        settings.aws_profile = profile
    if resource_types:
        settings.resource_types = list(resource_types)

    try:
        pulumi_import = scrape_account(
            region=settings.aws_region,
            profile=settings.aws_profile,
            resource_types=settings.resource_types,
            include_associations=settings.include_associations,
            include_instances=settings.include_instances,
        )
    except (ScrapeError, ClientError, BotoCoreError) as exc:
        console.print(f"[red bold]Error:[/red bold] {escape(str(exc))}")
        sys.exit(1)

    if settings.writes_to_stdout:
        click.echo(render_import_file(pulumi_import), nl=False)
    else:
        path = write_import_file(pulumi_import, settings.resolved_output)
        console.print(
            f"[green bold]Done![/green bold] Import file written to {escape(str(path))}"
        )

    for name in pulumi_import.duplicate_names():
        console.print(
            f"[yellow]Warning: import name '{escape(name)}' is used more than once.[/yellow]"
        )

    console.print(summary_table(pulumi_import))


@main.command("types")
def list_types() -> None:
    """List the supported resource types and how each is scraped."""
    Console().print(resource_types_table(list(RESOURCE_TYPES.values())))


if __name__ == "__main__":
    main()
