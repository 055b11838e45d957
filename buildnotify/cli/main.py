"""
Build Notifier CLI

Render and publish build notifications from a build history file.

Usage:
    buildnotify [OPTIONS] COMMAND [ARGS]...

Commands:
    status    Show the status label and message of a build
    preview   Render the notifications for an event without sending them
    notify    Render and publish the notifications for an event
"""

import logging
import sys

import click
from dotenv import load_dotenv

from ..config import NotifierConfig
from ..monitoring.sentry import init_sentry

# Load .env file
load_dotenv()


def setup_logging(verbose: bool):
    """Configure logging to output to stdout."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(message)s',  # Simple format for CLI
        handlers=[logging.StreamHandler(sys.stdout)]
    )


@click.group()
@click.option('--history', default='history.json', envvar='BUILDNOTIFY_HISTORY',
              help='Build history JSON file')
@click.option('-v', '--verbose', is_flag=True, help='Verbose output (show DEBUG logs)')
@click.option('-q', '--quiet', is_flag=True, help='Quiet mode (only show warnings/errors)')
@click.pass_context
def cli(ctx, history, verbose, quiet):
    """Build Notifier - chat notifications for build lifecycle events."""
    if quiet:
        logging.basicConfig(level=logging.WARNING, format='%(message)s')
    else:
        setup_logging(verbose)

    try:
        config = NotifierConfig.from_env()
    except ValueError as e:
        click.echo(click.style(f"Invalid configuration: {e}", fg="red"))
        raise SystemExit(1)

    init_sentry(config)

    ctx.ensure_object(dict)
    ctx.obj['history'] = history
    ctx.obj['config'] = config
    ctx.obj['verbose'] = verbose


# Import and register commands
from .builds import notify, preview, status

cli.add_command(status)
cli.add_command(preview)
cli.add_command(notify)


if __name__ == '__main__':
    cli()
