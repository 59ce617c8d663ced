import click
from agencydesk.application.preview.tokens import cleanup_expired_tokens
from agencydesk.store import StoreContext


def register_cli(app):
    @app.cli.command("cleanup-preview-tokens")
    def cleanup_preview_tokens_command():
        """Delete expired preview tokens."""
        deleted = cleanup_expired_tokens(StoreContext.service())
        click.echo(f"Deleted {deleted} expired preview tokens")
