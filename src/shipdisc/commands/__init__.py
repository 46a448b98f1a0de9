"""Subcommand modules for shipdisc."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from shipdisc.commands.campaigns import campaigns
    from shipdisc.commands.check import check

    cli.add_command(campaigns)
    cli.add_command(check)
