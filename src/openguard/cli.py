"""Command line interface for openguard."""

from pathlib import Path
from uuid import uuid4

import click

from .config import load_config
from .exceptions import OpenGuardException
from .guards import GuardedOpen, set_default_guard, guarded_open
from .logging import LoggingContextManager, create_guard_logger


@click.group()
@click.version_option(package_name="openguard")
@click.option("--config", "config_path", type=click.Path(path_type=Path),
              help="YAML configuration file.")
@click.option("--log-level", default=None,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              help="Override the configured log level.")
@click.pass_context
def main(ctx, config_path: Path, log_level: str):
    """openguard - open files through a guard that refuses pipe targets."""
    try:
        config = load_config(config_path)
    except Exception as e:
        click.echo(f"ERROR: Failed to load config: {e}")
        ctx.exit(2)

    if log_level:
        config = config.model_copy(update={"log_level": log_level.upper()})

    logger = create_guard_logger(
        run_id=uuid4(),
        log_level=config.log_level,
        enable_console=config.enable_console,
        log_file=config.log_file,
    )
    guard = GuardedOpen(logger=logger, config=config)
    set_default_guard(guard)
    ctx.call_on_close(lambda: set_default_guard(None))
    ctx.obj = guard


@main.command()
@click.argument("target")
@click.pass_context
def check(ctx, target: str):
    """Check whether TARGET would be accepted by the guard."""
    try:
        ctx.obj.validate(target)
    except OpenGuardException as e:
        click.echo(f"BLOCKED: {e.message}")
        ctx.exit(2)
    click.echo(f"PASS: {target}")


@main.command()
@click.argument("path")
@click.option("--mode", default="r", show_default=True, type=click.Choice(["r", "rb"]),
              help="Read mode.")
@click.pass_context
def cat(ctx, path: str, mode: str):
    """Print the contents of PATH, read through the guard."""
    guard = ctx.obj
    try:
        with LoggingContextManager(guard.logger, "cat", path=path, mode=mode):
            content = guarded_open(path, mode, callback=lambda f: f.read())
    except OpenGuardException as e:
        click.echo(f"ERROR: {e.message}")
        ctx.exit(2)
    except OSError as e:
        guard.logger.open_failed(path, e)
        click.echo(f"ERROR: {e}")
        ctx.exit(2)

    click.echo(content, nl=False)


if __name__ == "__main__":
    main()
