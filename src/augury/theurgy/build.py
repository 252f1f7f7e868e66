"""
Theurgy Build - Assemble a VM query request.

Prints the request body a proxy expects for a read-only contract call,
ready to be posted by any HTTP client.
"""

from __future__ import annotations

import json
import sys
from typing import Any, Optional

import click

from ..config import load_settings
from ..errors import AuguryError, InvalidArgumentError
from ..pneuma.query import Query
from ..pneuma.transport import canonical_request, request_fingerprint
from ..sigil.address import Address
from ..spec.argument import Argument
from ..spec.balance import Balance
from ..spec.function import ContractFunction


def parse_arguments(args_json: str, hrp: str) -> list[Argument]:
    """
    Turn a JSON array into call arguments.

    Integers and booleans are encoded as unsigned numbers, strings with a
    0x prefix as raw hex, strings with the address prefix as public keys,
    anything else as UTF-8 text.
    """
    try:
        raw = json.loads(args_json)
    except json.JSONDecodeError as exc:
        raise InvalidArgumentError(f"Invalid args: {exc}") from exc
    if not isinstance(raw, list):
        raise InvalidArgumentError("Args must be a JSON array")

    return [_parse_argument(item, hrp) for item in raw]


def _parse_argument(item: Any, hrp: str) -> Argument:
    if isinstance(item, bool):
        return Argument.from_bool(item)
    if isinstance(item, int):
        return Argument.from_number(item)
    if isinstance(item, str):
        if item.startswith(("0x", "0X")):
            return Argument.from_hex(item)
        if item.startswith(f"{hrp}1"):
            return Argument.from_pubkey(Address.from_bech32(item))
        return Argument.from_utf8(item)
    raise InvalidArgumentError(f"Unsupported argument: {item!r}")


@click.command()
@click.option("--contract", required=True, help="Contract address (bech32 or hex)")
@click.option("--function", "func_name", required=True, help="Function name to query")
@click.option("--args", "args_json", default="[]", help="Function args as JSON array")
@click.option("--value", default="0", help="Value in the smallest denomination")
@click.option("--caller", envvar="AUGURY_CALLER", default=None, help="Caller address")
@click.option("--canonical", is_flag=True, help="Print RFC 8785 canonical JSON")
@click.option("--fingerprint", is_flag=True, help="Print the request SHA-256 only")
def build(
    contract: str,
    func_name: str,
    args_json: str,
    value: str,
    caller: Optional[str],
    canonical: bool,
    fingerprint: bool,
) -> None:
    """
    Build a VM query request.

    The request is printed as JSON on stdout.
    """
    settings = load_settings()

    try:
        query = Query(
            address=Address.from_string(contract, hrp=settings.hrp),
            func=ContractFunction(func_name),
            args=parse_arguments(args_json, settings.hrp),
            caller=Address.of(caller or settings.caller, hrp=settings.hrp),
            value=Balance.from_string(value),
        )
    except AuguryError as exc:
        click.secho(f"ERROR: {exc}", fg="red", err=True)
        sys.exit(exc.exit_code)

    if fingerprint:
        click.echo(request_fingerprint(query))
    elif canonical:
        click.echo(canonical_request(query).decode("utf-8"))
    else:
        click.echo(json.dumps(query.to_http_request(), indent=2))
