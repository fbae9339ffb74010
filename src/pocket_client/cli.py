"""CLI interface for pocket-client.

Commands:
    setup   - Save the app's consumer key and redirect URI
    login   - Run the authorization handshake and print an access token
    add     - Save a URL to a Pocket list
    status  - Show current configuration
"""

import sys
from pathlib import Path

import click

from .client import PocketClient
from .config import (
    CONFIG_FILE,
    DEFAULT_REDIRECT_URI,
    AppConfig,
    config_exists,
    load_config,
    save_config,
)
from .errors import PocketError
from .logging_config import setup_logging
from .models import AddInput


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--config", type=click.Path(), default=None, help="Config file path")
@click.pass_context
def main(ctx, verbose, config):
    """Pocket API client — authorize and save items to Pocket."""
    setup_logging(debug=verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = Path(config) if config else CONFIG_FILE


def _load_or_exit(config_path: Path) -> AppConfig:
    if not config_exists(config_path):
        click.echo(
            "Error: No config found. Run 'pocket-client setup' first.",
            err=True,
        )
        sys.exit(1)
    try:
        return load_config(config_path)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _make_client(config: AppConfig) -> PocketClient:
    return PocketClient(config.consumer_key, timeout=config.timeout)


@main.command()
@click.pass_context
def setup(ctx):
    """Save the application's consumer key."""
    config_path = ctx.obj["config_path"]

    click.echo("Pocket Client — Setup")
    click.echo("=" * 40)
    click.echo()
    click.echo("You need a consumer key for your Pocket application.")
    click.echo("Create one at https://getpocket.com/developer/apps/new")
    click.echo()

    consumer_key = click.prompt("consumer_key", hide_input=True)
    redirect_uri = click.prompt("redirect_uri", default=DEFAULT_REDIRECT_URI)

    config = AppConfig(consumer_key=consumer_key, redirect_uri=redirect_uri)
    save_config(config, config_path)
    click.echo(f"\nConfig saved to {config_path}")
    click.echo("Run 'pocket-client login' to get an access token.")


@main.command()
@click.option("--redirect-uri", default=None, help="Override the configured redirect URI")
@click.pass_context
def login(ctx, redirect_uri):
    """Authorize a Pocket user and print the access token."""
    config = _load_or_exit(ctx.obj["config_path"])
    redirect_uri = redirect_uri or config.redirect_uri

    try:
        with _make_client(config) as client:
            request_token = client.get_request_token(redirect_uri)
            url = client.get_authorization_url(request_token, redirect_uri)

            click.echo("Open this URL in your browser and approve the app:")
            click.echo(f"  {url}")
            click.echo()
            click.confirm("Approved?", default=True, abort=True)

            result = client.authorize(request_token)
    except PocketError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"\nAuthorized as {result.username or '(unknown user)'}")
    click.echo(f"access_token: {result.access_token}")
    click.echo("Keep this token; pass it to 'add' with --access-token or POCKET_ACCESS_TOKEN.")


@main.command()
@click.argument("url")
@click.option("--title", default="", help="Item title")
@click.option("-t", "--tag", "tags", multiple=True, help="Tag to apply (repeatable)")
@click.option(
    "--access-token",
    envvar="POCKET_ACCESS_TOKEN",
    required=True,
    help="User access token from 'login'",
)
@click.pass_context
def add(ctx, url, title, tags, access_token):
    """Save URL to the user's Pocket list."""
    config = _load_or_exit(ctx.obj["config_path"])
    item = AddInput(url=url, title=title, tags=list(tags), access_token=access_token)

    try:
        with _make_client(config) as client:
            client.add(item)
    except PocketError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Added {url}")


@main.command()
@click.pass_context
def status(ctx):
    """Show current configuration."""
    config_path = ctx.obj["config_path"]
    has_config = config_exists(config_path)

    click.echo("Pocket Client — Status")
    click.echo("=" * 40)
    click.echo(f"Config: {'Found' if has_config else 'Not configured'} ({config_path})")

    if not has_config:
        click.echo("\nRun 'pocket-client setup' to get started.")
        return

    config = _load_or_exit(config_path)
    click.echo("Consumer key: set")
    click.echo(f"Redirect URI: {config.redirect_uri}")
    click.echo(f"Timeout: {config.timeout:g}s")
