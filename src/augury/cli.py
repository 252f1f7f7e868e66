"""
Augury CLI

Command-line interface for read-only smart-contract queries.

Commands:
  build   - Build a VM query request
  decode  - Decode VM output
"""

from __future__ import annotations

import sys

import click

from .config import load_settings

# ============ Constants ============

VERSION = "0.3.0"


# ============ Main CLI Group ============


@click.group(invoke_without_command=True)
@click.version_option(version=VERSION, prog_name="augury")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Augury - read-only smart-contract queries."""
    # Seed the environment from ~/.augury/.env before subcommand options resolve.
    load_settings()
    if ctx.invoked_subcommand is None:
        click.echo(click.style("  ◆ ", fg="cyan") + click.style("A U G U R Y", bold=True) + click.style(f"  v{VERSION}", dim=True))
        click.echo()
        click.echo(ctx.get_help())


# ============ Top-level Commands ============

from .theurgy.build import build
from .theurgy.decode import decode

cli.add_command(build)
cli.add_command(decode)


# ============ Entry Points ============


def main() -> None:
    """Augury CLI entry point."""
    if sys.platform == "win32":
        try:
            sys.stdout.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
            sys.stderr.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
        except (AttributeError, OSError):
            pass
    cli()


if __name__ == "__main__":
    main()
