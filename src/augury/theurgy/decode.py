"""
Theurgy Decode - Interpret VM output.

Reads a proxy response (or bare VM output) saved as JSON and shows every
returned value under each interpretation.
"""

from __future__ import annotations

import json
import sys

import click

from ..errors import ContractError
from ..pneuma.response import QueryResult
from ..pneuma.transport import extract_vm_output, proxy_error


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option("--assert-success", is_flag=True, help="Exit non-zero on a failed call")
def decode(source, as_json: bool, assert_success: bool) -> None:
    """
    Decode VM output from SOURCE (default: stdin).
    """
    try:
        payload = json.load(source)
    except json.JSONDecodeError as exc:
        click.secho(f"ERROR: Invalid JSON: {exc}", fg="red", err=True)
        sys.exit(1)

    error = proxy_error(payload)
    if error:
        click.secho(f"ERROR: Proxy error: {error}", fg="red", err=True)
        sys.exit(1)

    result = QueryResult.from_http_response(extract_vm_output(payload))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        _print_summary(result)

    if assert_success:
        try:
            result.assert_success()
        except ContractError as exc:
            click.secho(f"FAILED: {exc}", fg="red", err=True)
            sys.exit(exc.exit_code)


def _print_summary(result: QueryResult) -> None:
    status = click.style("ok", fg="green") if result.is_success() else click.style("failed", fg="red")
    click.echo(f"  Status:         {status}")
    click.echo(f"  Return Code:    {result.return_code or '(none)'}")
    if result.return_message:
        click.echo(f"  Return Message: {result.return_message}")
    click.echo(f"  Gas Used:       {result.gas_used}")
    click.echo(f"  Items:          {len(result.items)}")

    for index, item in enumerate(result.items):
        click.echo("")
        click.echo(f"  #{index}")
        click.echo(f"    hex:    {item.as_hex or '(empty)'}")
        click.echo(f"    number: {item.big_int_text()}")
        click.echo(f"    string: {item.as_string!r}")
        click.echo(f"    bool:   {item.as_bool}")
