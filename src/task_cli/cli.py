"""Command-line interface for the task CLI."""

import functools
import logging
import sys
from pathlib import Path

import click
from rich.console import Console

from .config import get_config, load_config
from .errors import ConfigError, TaskError
from .operations import TaskOperations
from .storage import TaskStore

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

PASSTHROUGH = {"ignore_unknown_options": True}
NO_ARGS = {"ignore_unknown_options": True, "allow_extra_args": True}


def get_console() -> Console:
    """Get a console bound to the current standard output."""
    return Console(highlight=False, emoji=False, soft_wrap=True)


def configure_logging(level: str) -> None:
    """Send log records to stderr at ``level``."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("task_cli").setLevel(level)


def print_error(console: Console, message: str) -> None:
    """Print an error, styled red only when stdout is a terminal."""
    if console.is_terminal:
        console.print(message, style="red", markup=False, emoji=False, highlight=False, soft_wrap=True)
    else:
        console.file.write(message + "\n")


def handle_errors(func):
    """Report task and file errors on stdout instead of failing the process."""

    @functools.wraps(func)
    def wrapper(ctx, *args, **kwargs):
        ops: TaskOperations = ctx.obj["ops"]
        try:
            return func(ctx, *args, **kwargs)
        except TaskError as e:
            logger.debug(f"{ctx.info_name} failed: {e.message}")
            print_error(ops.console, e.message)
        except OSError as e:
            logger.debug(f"{ctx.info_name} failed on file access", exc_info=True)
            print_error(ops.console, f"Error: {e}")

    return wrapper


class RawArgsCommand(click.Command):
    """Command whose callback gets its words exactly as typed.

    Nothing is parsed, so option-like words and a bare ``--`` stay part of
    the task text.
    """

    def parse_args(self, ctx, args):
        ctx.params["args"] = tuple(args)
        ctx.args = []
        return []


class TaskGroup(click.Group):
    """Command group that shows usage for anything it doesn't recognise."""

    def resolve_command(self, ctx, args):
        if self.get_command(ctx, args[0]) is None:
            return "help", self.get_command(ctx, "help"), args[1:]
        return super().resolve_command(ctx, args)


@click.group(
    cls=TaskGroup,
    invoke_without_command=True,
    add_help_option=False,
    context_settings=PASSTHROUGH,
)
@click.option("--config", type=click.Path(dir_okay=False), help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def main(ctx, config, verbose):
    """Simple priority-ordered to-do list."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    console = get_console()

    try:
        settings = load_config(Path(config)) if config else get_config()
    except ConfigError as e:
        print_error(console, f"Configuration error: {e}")
        ctx.exit(0)

    configure_logging("DEBUG" if verbose else settings.log_level)
    logger.debug(f"Using data directory {settings.data_dir}")

    ctx.obj["ops"] = TaskOperations(TaskStore(settings), console)

    if ctx.invoked_subcommand is None:
        ctx.invoke(show_help)


@main.command(cls=RawArgsCommand, add_help_option=False)
@click.pass_context
@handle_errors
def add(ctx, args):
    """Add a new item: PRIORITY TEXT..."""
    ctx.obj["ops"].add(args)


@main.command("ls", context_settings=NO_ARGS, add_help_option=False)
@click.pass_context
@handle_errors
def list_tasks(ctx):
    """Show pending items sorted by priority."""
    ctx.obj["ops"].list()


@main.command("del", cls=RawArgsCommand, add_help_option=False)
@click.pass_context
@handle_errors
def delete(ctx, args):
    """Delete the pending item at INDEX."""
    ctx.obj["ops"].delete(args)


@main.command(cls=RawArgsCommand, add_help_option=False)
@click.pass_context
@handle_errors
def done(ctx, args):
    """Mark the pending item at INDEX as complete."""
    ctx.obj["ops"].done(args)


@main.command("help", context_settings=NO_ARGS, add_help_option=False)
@click.pass_context
def show_help(ctx):
    """Show usage."""
    ctx.obj["ops"].usage()


@main.command(context_settings=NO_ARGS, add_help_option=False)
@click.pass_context
@handle_errors
def report(ctx):
    """Show pending and completed statistics."""
    ctx.obj["ops"].report()


if __name__ == "__main__":
    main()
