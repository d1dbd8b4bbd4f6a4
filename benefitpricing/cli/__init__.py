"""Command line interface for benefitpricing."""

from benefitpricing.cli.main import main

__all__ = ["main"]
