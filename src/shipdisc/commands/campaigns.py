"""Command: list configured campaigns."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from shipdisc.commands._base import ShipdiscCommand

if TYPE_CHECKING:
    from shipdisc.commands._context import AppContext


@click.command(
    cls=ShipdiscCommand,
    examples="""\
  shipdisc campaigns
  shipdisc --json campaigns
  shipdisc -c ./shipdisc.toml campaigns""",
)
@click.pass_obj
def campaigns(app: AppContext) -> None:
    """List campaigns in the order they are applied."""
    from shipdisc.services.campaigns import CampaignService

    app.emit(CampaignService(app.settings).list_campaigns())
