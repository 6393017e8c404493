"""Scrape an AWS account into a Pulumi bulk-import file."""

__version__ = "0.1.0"
