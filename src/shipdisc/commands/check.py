"""Command: campaign configuration checking."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from shipdisc.commands._base import ShipdiscCommand

if TYPE_CHECKING:
    from shipdisc.commands._context import AppContext


@click.command(
    cls=ShipdiscCommand,
    examples="""\
  shipdisc check
  shipdisc check --errors-only
  shipdisc --json check""",
)
@click.option(
    "--min-severity",
    type=click.Choice(["warning", "error"]),
    default="warning",
    help="Hide issues below this severity.",
)
@click.option("--errors-only", is_flag=True, help="Shortcut for --min-severity error.")
@click.pass_obj
def check(app: AppContext, min_severity: str, errors_only: bool) -> None:
    """Report campaigns that can never match or may misbehave."""
    from shipdisc.services.campaigns import CampaignService

    threshold = "error" if errors_only else min_severity
    app.emit(CampaignService(app.settings).check(min_severity=threshold))
