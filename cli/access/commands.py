import typer

from cli.core.api import api_validate, api_report_usage
from cli.core.utils import parse_size, parse_duration


app = typer.Typer(help="Resolver-side commands (validate, report)")


@app.command("validate")
def validate(client_token: str = typer.Argument(..., help="Client token to check")):
    """
    Checks whether a client token may resolve right now.
    Exits 0 when authorized, 3 when denied.
    """
    result = api_validate(client_token)
    if result is None:
        typer.echo("Validation failed (API error).")
        raise typer.Exit(code=1)

    if result.get("authorized"):
        typer.echo("Authorized")
        return

    typer.echo(f"Unauthorized: {result.get('reason')}")
    raise typer.Exit(code=3)


@app.command("report")
def report(
    client_token: str = typer.Argument(..., help="Client token to charge"),
    data: str = typer.Option("0", "--data", "-d", help="Bytes served, e.g. 512 or 4K"),
    time: str = typer.Option("0", "--time", "-t", help="Seconds served, e.g. 30 or 2m"),
):
    """
    Reports usage consumed by a client token.
    """
    if not api_report_usage(client_token, parse_size(data), parse_duration(time)):
        typer.echo("Usage report failed (API error).")
        raise typer.Exit(code=1)
    typer.echo("Usage recorded.")
