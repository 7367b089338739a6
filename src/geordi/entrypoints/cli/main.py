"""GEORDI CLI entry point.

Defines the top-level ``geordi`` command (via Click-Extra) and registers
subcommands exposed by the project.

Currently available commands
- ``geordi diff`` — character-level difference of two strings.

Notes
- The CLI version is sourced from `geordi.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Additional commands should be registered here via ``geordi.add_command(...)``.

Examples
    $ geordi --version
    $ geordi -v diff "foo" "bar"
"""

import logging
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from geordi import __version__
from geordi.logging import config_console_handler, log_startup

from .diff import diff as diff_command
from .helpers.log_level_parser import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """GEORDI command-line interface.

    GEORDI is a behavior-driven test harness: tests declare a setup, an
    expected value and an action, and the harness compares the results.
    The CLI exposes the harness's debugging helpers.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). "
        "Repeatable (e.g. -L geordi.debug=INFO -L click_extra=ERROR) or via "
        "GEORDI_LOGGER_LEVELS (comma/space list)."
    ),
    default=(),
    show_envvar=True,
)
@clickx.pass_context
def geordi(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
) -> None:
    """GEORDI command-line interface."""

    # 0) compute effective verbosity
    base_level = logging.WARNING
    level = base_level - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) configure console handler
    use_color = ctx.color is not False  # None or True => allow color
    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    ]

    # 2) configure root logger
    logging.basicConfig(
        level=logging.DEBUG,  # capture all levels; handlers filter
        handlers=handlers,
        force=True,  # override any existing logging config
    )

    # 3) set library logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    # 4) log startup info
    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


geordi.add_command(diff_command)
