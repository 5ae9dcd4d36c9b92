#!/usr/bin/env python3
"""CCC - Claude Code Configuration Manager (ccc command)."""
import logging
import sys

import click
from rich.console import Console
from rich.markup import escape

from ccc import __version__, engine
from ccc.config import STORE_PATH_ENV, AppConfig
from ccc.errors import CccError

console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)


def _fail(e: Exception) -> None:
    err_console.print(f"[red]Error: {escape(str(e))}[/red]")
    sys.exit(1)


def _warn(msg: str) -> None:
    err_console.print(f"[yellow]Warning: {escape(msg)}[/yellow]")


def _run(ctx, op, *args, **kwargs):
    """Call an engine operation with this invocation's config and target."""
    try:
        result = op(ctx.obj['config'], *args, target=ctx.obj['target'], **kwargs)
    except CccError as e:
        _fail(e)
    if result.imported is not None:
        console.print(f"Auto-imported configuration '{escape(result.imported.name)}' "
                      "from existing settings")
    return result


@click.group()
@click.version_option(__version__, prog_name="ccc")
@click.option('--verbose', '-v', 'global_verbose', is_flag=True, help='Show debug logs')
@click.option('--config', 'config_path', type=click.Path(dir_okay=False), default=None,
              help=f'Configuration store file (default: ${STORE_PATH_ENV}, '
                   'or ccc-config.json next to the executable)')
@click.pass_context
def cli(ctx, global_verbose, config_path) -> None:
    """CCC - Claude Code Configuration Manager."""
    ctx.ensure_object(dict)
    level = logging.DEBUG if global_verbose else logging.ERROR
    logging.basicConfig(level=level, format='%(levelname)s: %(message)s')
    logging.getLogger('ccc').setLevel(level)
    cfg = AppConfig.resolve(config_path)
    ctx.obj['config'] = cfg
    if 'target' not in ctx.obj:
        ctx.obj['target'] = engine.target_for(cfg)


@cli.command('list')
@click.option('--json', 'as_json', is_flag=True, help='Output as JSON (keys masked)')
@click.pass_context
def list_cmd(ctx, as_json) -> None:
    """List all configurations."""
    from ccc.display import profiles_as_json, render_table
    result = _run(ctx, engine.list_profiles)

    if as_json:
        import json
        click.echo(json.dumps(profiles_as_json(result.collection), indent=2))
        return

    if not len(result.collection):
        click.echo("No configurations found.")
        return
    for line in render_table(result.collection):
        click.echo(line)


cli.add_command(list_cmd, name='ls')


@cli.command()
@click.option('--name', '-n', required=True, help='Configuration name')
@click.option('--url', '-u', 'base_url', required=True, help='Base URL for API')
@click.option('--key', '-k', 'api_key', required=True, help='API key')
@click.pass_context
def add(ctx, name, base_url, api_key) -> None:
    """Add a new configuration.

    The first configuration added becomes the active one.

    Example: ccc add -n anthropic -u https://api.anthropic.com -k sk-...
    """
    if not name or not base_url or not api_key:
        _fail(click.UsageError("name, base-url, and api-key are required"))
    result = _run(ctx, engine.add, name, base_url, api_key)
    if result.profile.active:
        console.print(f"[green]Configuration '{escape(name)}' added and activated successfully.[/green]")
    else:
        console.print(f"[green]Configuration '{escape(name)}' added successfully.[/green]")


@cli.command()
@click.option('--name', '-n', required=True, help='Configuration name')
@click.option('--url', '-u', 'base_url', default='', help='New base URL for API')
@click.option('--key', '-k', 'api_key', default='', help='New API key')
@click.pass_context
def update(ctx, name, base_url, api_key) -> None:
    """Update an existing configuration. Omitted fields are kept."""
    if not name:
        _fail(click.UsageError("name is required"))
    _run(ctx, engine.update, name, base_url or None, api_key or None)
    console.print(f"[green]Configuration '{escape(name)}' updated successfully.[/green]")


@cli.command()
@click.option('--name', '-n', required=True, help='Configuration name')
@click.pass_context
def delete(ctx, name) -> None:
    """Delete a configuration. The active one cannot be deleted."""
    if not name:
        _fail(click.UsageError("name is required"))
    _run(ctx, engine.delete, name)
    console.print(f"[green]Configuration '{escape(name)}' deleted successfully.[/green]")


@cli.command()
@click.option('--name', '-n', required=True, help='Configuration name')
@click.pass_context
def activate(ctx, name) -> None:
    """Activate a configuration and apply it for Claude Code.

    On Windows this sets ANTHROPIC_BASE_URL and ANTHROPIC_AUTH_TOKEN (also
    permanently via setx); on Linux and macOS it updates
    ~/.claude/settings.json.
    """
    if not name:
        _fail(click.UsageError("name is required"))
    result = _run(ctx, engine.activate, name)
    console.print(f"[green]Configuration '{escape(name)}' activated successfully.[/green]")

    act = result.activation
    if act.details:
        if act.target == 'environment':
            console.print(f"Environment variables set for active configuration '{escape(name)}':")
            for k, v in act.details:
                console.print(f"{k}={escape(v)}")
        else:
            console.print(f"Claude settings updated for active configuration '{escape(name)}':")
            for k, v in act.details:
                console.print(f"{k}: {escape(v)}")
    for note in act.notes:
        console.print(f"[dim]{escape(note)}[/dim]")
    for w in act.warnings:
        _warn(w)


def main() -> None:
    cli()


if __name__ == '__main__':
    main()
