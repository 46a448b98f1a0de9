"""Rich/JSON output for ServiceResult.

Humans get a status line plus a table or issue list; machines (--json)
get the serialized ServiceResult unchanged.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table

from shipdisc.output.console import create_console, get_output, style_for_severity

if TYPE_CHECKING:
    from rich.console import Console

    from shipdisc.services.result import ServiceResult


def _render_campaigns(console: Console, data: dict[str, Any]) -> None:
    table = Table(title=f"Campaigns (eligible source: {escape(data['eligible_source'])})")
    table.add_column("#", justify="right")
    table.add_column("Country")
    table.add_column("Zip match")
    table.add_column("Rate match")
    table.add_column("Discount", style="sd.amount", justify="right")
    table.add_column("Message")
    for item in data["items"]:
        zips = ", ".join(item["zip_codes"])
        names = "*" if item["rate_names"] is None else ", ".join(item["rate_names"])
        suffix = "%" if item["discount_type"] == "percent" else ""
        table.add_row(
            str(item["index"]),
            escape(item["country_code"]),
            escape(f"{item['zip_code_match_type']}: {zips}"),
            escape(f"{item['rate_match_type']}: {names}"),
            f"{item['discount_amount']}{suffix}",
            escape(item["discount_message"]),
        )
    console.print(table)


def _render_issues(console: Console, data: dict[str, Any]) -> None:
    console.print(
        f"  [sd.key]errors:[/] {data['error_count']}  [sd.key]warnings:[/] {data['warning_count']}"
    )
    for issue in data["issues"]:
        style = style_for_severity(issue["severity"])
        console.print(
            f"  [{style}]{issue['severity'].upper()}[/] campaign {issue['campaign']} "
            f"{issue['code']}: {issue['message']}"
        )


def _render_data(console: Console, data: dict[str, Any]) -> None:
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            value = _json.dumps(value, separators=(",", ":"))
        console.print(f"  [sd.key]{key}:[/] {value}")


_RENDERERS = {
    "list_campaigns": _render_campaigns,
    "check": _render_issues,
}


def format_result(result: ServiceResult, *, json_output: bool = False) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
    """
    if json_output:
        return result.model_dump_json(indent=2)

    console = create_console()
    if result.ok:
        console.print(f"[sd.ok]OK:[/] [sd.op]{result.op}[/]")
    else:
        message = result.error.message if result.error else "Unknown error"
        console.print(f"[sd.error]ERROR:[/] [sd.op]{result.op}[/] - {message}")
    if result.data:
        _RENDERERS.get(result.op, _render_data)(console, result.data)
    return get_output(console).rstrip("\n")
