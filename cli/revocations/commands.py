import typer

from cli.core.session import load_token
from cli.core.api import api_list_revocations


app = typer.Typer(help="Revocation registry commands")


@app.command("list")
def list_revocations():
    """
    Lists every revoked token, oldest first.
    """
    token = load_token()
    if not token:
        typer.echo("No active session. Please run `dnsgate auth login` first.")
        raise typer.Exit(code=1)

    revoked = api_list_revocations(token)
    if revoked is None:
        typer.echo("Failed to list revocations. Check your session.")
        raise typer.Exit(code=1)

    if not revoked:
        typer.echo("No revoked tokens.")
        return

    typer.echo(f"\n{'Token':<34} {'Revoked at':<20}")
    typer.echo("-" * 55)
    for r in revoked:
        typer.echo(f"{r.get('token', '-'):<34} {r.get('revoked_at', '-'):<20}")
