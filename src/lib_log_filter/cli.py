"""Click command group exposing the filter pipeline on the command line.

Purpose
-------
Give shell users the same composition the library offers: pick a base emitter
(plain stdout or a Rich console), derive a predicate from flags and
``LOG_FILTER_*`` variables, and push messages through the filtered emitter.

Contents
--------
* :func:`cli` – root group with traceback and dotenv toggles.
* :func:`cli_info` / :func:`cli_filter` – subcommands.
* :func:`main` – entry point wrapping :func:`lib_cli_exit_tools.run_cli`.

System Role
-----------
Presentation layer. All policy stays in
:mod:`lib_log_filter.application.use_cases.filtering`.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Iterable, Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__
from . import config as config_module
from .adapters import RichConsoleEmitter, StreamEmitter
from .application.ports.emitter import EmitterPort
from .application.use_cases.filtering import with_filter
from .domain.errors import InvalidArgumentError

CLICK_CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

logger = logging.getLogger(__name__)


def summary_info() -> str:
    """Return the metadata banner printed by ``info`` and the bare command."""

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


def _iter_messages(messages: Sequence[str], stream: Iterable[str]) -> Iterable[str]:
    if messages:
        yield from messages
        return
    for line in stream:
        yield line.rstrip("\r\n")


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help="Load environment variables from a nearby .env before running commands.",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Root command storing global flags."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    if config_module.should_use_dotenv(explicit=explicit, env_value=os.getenv(config_module.DOTENV_ENV_VAR)):
        config_module.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""

    click.echo(summary_info(), nl=False)


@cli.command("filter", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("messages", nargs=-1)
@click.option("--include", "include", multiple=True, help="Keep only messages starting with this prefix (repeatable).")
@click.option("--exclude", "exclude", multiple=True, help="Drop messages starting with this prefix (repeatable).")
@click.option("--pattern", default=None, help="Keep only messages matching this regular expression.")
@click.option("--rich/--plain", "use_rich", default=False, help="Print through a Rich console instead of plain stdout.")
@click.option("--style", default=None, help="Rich style applied to emitted lines; requires --rich.")
def cli_filter(
    messages: tuple[str, ...],
    include: tuple[str, ...],
    exclude: tuple[str, ...],
    pattern: str | None,
    use_rich: bool,
    style: str | None,
) -> None:
    """Emit MESSAGES (or stdin lines) that pass the configured filters."""

    if style is not None and not use_rich:
        raise click.BadParameter("only applies together with --rich", param_hint="--style")

    settings = config_module.load_filter_settings().merged(
        include_prefixes=include,
        exclude_prefixes=exclude,
        pattern=pattern,
    )
    try:
        predicate = settings.build_predicate()
    except InvalidArgumentError as exc:
        hint = "--pattern" if pattern is not None else config_module.PATTERN_ENV_VAR
        raise click.BadParameter(str(exc), param_hint=hint) from exc

    base: EmitterPort
    if use_rich:
        base = RichConsoleEmitter(style=style)
    else:
        base = StreamEmitter()
    emitter = with_filter(base, predicate)
    logger.debug("filter command configured", extra={"filter_settings": repr(settings)})

    for message in _iter_messages(messages, sys.stdin):
        emitter.emit(message)


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI through :mod:`lib_cli_exit_tools` and return the exit code.

    Parameters
    ----------
    argv:
        Optional argument list; ``None`` consumes ``sys.argv[1:]``.
    restore_traceback:
        Reset the global traceback preferences after the run so embedding
        hosts and tests keep their own settings.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    args = list(argv) if argv is not None else sys.argv[1:]
    try:
        return lib_cli_exit_tools.run_cli(cli, argv=args, prog_name=__init__conf__.shell_command)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main", "summary_info"]
