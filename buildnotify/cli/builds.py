"""CLI commands for rendering and publishing build notifications."""

from typing import List, Optional, Tuple

import click

from ..config import NotifierConfig
from ..history import InMemoryBuildHistory, load_history
from ..models.build import BuildRecord
from ..notifier import BuildNotifier, MessageComposer, status_label
from ..transport import ChatTransport, RecordingTransport, WebhookTransport

EVENTS = click.Choice(['started', 'completed'])


def _load_build(ctx, project: str, number: Optional[int]) -> Tuple[InMemoryBuildHistory, BuildRecord]:
    """Load the history file and find the requested build (latest by default)."""
    path = ctx.obj['history']
    try:
        history = load_history(path)
    except FileNotFoundError:
        click.echo(click.style(f"Error: history file not found: {path}", fg="red"))
        raise SystemExit(1)
    except ValueError as e:
        click.echo(click.style(f"Error: could not read {path}: {e}", fg="red"))
        raise SystemExit(1)

    if history.get_project(project) is None:
        click.echo(click.style(f"Error: unknown project '{project}'", fg="red"))
        raise SystemExit(1)

    build = history.last_build(project) if number is None else history.get_build(project, number)
    if build is None:
        label = "any build" if number is None else f"build #{number}"
        click.echo(click.style(f"Error: {project} has no {label}", fg="red"))
        raise SystemExit(1)

    return history, build


def _run_event(
    config: NotifierConfig,
    history: InMemoryBuildHistory,
    transport: ChatTransport,
    event: str,
    build: BuildRecord,
) -> List[bool]:
    notifier = BuildNotifier(config, history, transport)
    if event == 'started':
        return [notifier.started(build)]
    return notifier.completed(build)


@click.command()
@click.argument('project')
@click.argument('number', type=int, required=False)
@click.option('--finished', is_flag=True, help='Treat a running build as finished')
@click.option('--tests', is_flag=True, help='Include the test summary')
@click.pass_context
def status(ctx, project, number, finished, tests):
    """Show the status label and message of a build."""
    config = ctx.obj['config']
    history, build = _load_build(ctx, project, number)

    composer = MessageComposer(config, history)
    click.echo(f"Label:   {status_label(build, finished, history)}")
    click.echo(f"Message: {composer.render_status(build, finished, include_test_summary=tests)}")


@click.command()
@click.argument('event', type=EVENTS)
@click.argument('project')
@click.argument('number', type=int, required=False)
@click.pass_context
def preview(ctx, event, project, number):
    """Render the notifications for an event without sending them."""
    config = ctx.obj['config']
    history, build = _load_build(ctx, project, number)

    transport = RecordingTransport()
    _run_event(config, history, transport, event, build)

    if not transport.messages:
        click.echo("No notification (no trigger matched)")
        return

    for i, message in enumerate(transport.messages, 1):
        click.echo(click.style(f"--- message {i} ---", fg="cyan"))
        click.echo(message)


@click.command()
@click.argument('event', type=EVENTS)
@click.argument('project')
@click.argument('number', type=int, required=False)
@click.pass_context
def notify(ctx, event, project, number):
    """Render and publish the notifications for an event."""
    config = ctx.obj['config']
    if not config.webhook_enabled:
        click.echo(click.style("Error: BUILDNOTIFY_WEBHOOK_URL is not set", fg="red"))
        raise SystemExit(1)

    history, build = _load_build(ctx, project, number)
    results = _run_event(config, history, WebhookTransport(config), event, build)

    if not results:
        click.echo("No notification (no trigger matched)")
        return

    sent = sum(1 for r in results if r)
    if sent < len(results):
        click.echo(click.style(f"Sent {sent}/{len(results)} messages", fg="red"))
        raise SystemExit(1)
    click.echo(click.style(f"Sent {sent} message(s)", fg="green"))
