"""``geordi diff`` — show where two strings differ.

Prints the character-level difference of FIRST and SECOND to **stdout** and a
status line to **stderr**. Exits 0 when the values are identical and 1 when
they differ, so the command can be used in scripts.

Examples
    $ geordi diff "this as I test" "thou is a test!"
    $ geordi diff --json '{"a": 1}' '{"a":1}'
"""

from __future__ import annotations

import json
import logging

import click

from geordi.debug.diff_checker import find_differences
from geordi.debug.reporter import make_horizontal_logs
from geordi.domain.test_slice import compact_json

from .helpers import success, warn

logger = logging.getLogger(__name__)


def _compact(value: str, param_name: str) -> str:
    try:
        return compact_json(value)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"Not valid JSON: {e}", param_hint=param_name) from e


@click.command()
@click.argument("first")
@click.argument("second")
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Parse both values as JSON and compare their compact forms.",
)
@click.option(
    "--horizontal/--no-horizontal",
    default=False,
    show_default=True,
    help="Show the values side by side instead of the difference masks.",
)
@click.pass_context
def diff(
    ctx: click.Context, first: str, second: str, as_json: bool, horizontal: bool
) -> None:
    """Compare FIRST and SECOND character by character."""
    if as_json:
        first = _compact(first, "FIRST")
        second = _compact(second, "SECOND")

    logger.debug("Comparing %d and %d characters", len(first), len(second))
    if horizontal:
        click.echo(make_horizontal_logs(first, second))
    else:
        click.echo(str(find_differences(first, second)))

    if first == second:
        success("Values are identical.")
        return
    warn("Values differ.")
    ctx.exit(1)
