import logging
import os

import click

from bsm_core.protocol import BSM_CODE_MAX, BSM_CODE_MIN
from .const import LOG_FORMAT, LOG_LEVEL_ENV
from .logic import canonical_json, describe_bsm, describe_local, describe_strerror, dump_table

BSM_CODE = click.IntRange(BSM_CODE_MIN, BSM_CODE_MAX)

def _configure_logging(level: str) -> None:
    value = level.strip().upper()
    resolved = int(value) if value.isdigit() else getattr(logging, value, None)
    if not isinstance(resolved, int):
        raise click.BadParameter(f"unknown log level {level!r}", param_hint="--log-level")
    # stderr only; stdout carries the JSON result
    logging.basicConfig(level=resolved, format=LOG_FORMAT)

def _emit(describe, *args) -> None:
    try:
        result = describe(*args)
    except Exception as e:
        # Fail closed with a single-line reason, no stack trace. Goes to
        # stderr, not stdout, so stdout only ever carries the JSON result.
        click.echo(f"FATAL: {e}", err=True)
        raise SystemExit(1)
    click.echo(canonical_json(result))

@click.group()
@click.option(
    "--log-level",
    default=lambda: os.getenv(LOG_LEVEL_ENV, "WARNING"),
    show_default=f"${LOG_LEVEL_ENV} or WARNING",
    help="Logging verbosity (name or number).",
)
def main(log_level: str):
    """Inspect the BSM <-> local errno mapping of this platform."""
    _configure_logging(log_level)

@main.command("to-local")
@click.argument("code", type=BSM_CODE)
def to_local_cmd(code: int):
    """Convert a BSM error byte to the local errno."""
    _emit(describe_bsm, code)

@main.command("to-bsm")
@click.argument("error", type=int)
def to_bsm_cmd(error: int):
    """Convert a local errno to its BSM error byte. Use -- before negatives."""
    _emit(describe_local, error)

@main.command("strerror")
@click.argument("code", type=BSM_CODE)
def strerror_cmd(code: int):
    """Describe a BSM error byte."""
    _emit(describe_strerror, code)

@main.command("table")
def table_cmd():
    """Dump the mapping table built for this platform."""
    _emit(dump_table)

if __name__ == "__main__":
    main()
