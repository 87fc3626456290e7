import typer

from cli.core.session import load_token
from cli.core.api import api_create_account, api_list_accounts, api_get_account, api_delete_account
from cli.core.utils import USERNAME_REGEX, parse_size, parse_duration, format_limit


app = typer.Typer(help="Account management commands (create, list, show, delete)")


def _require_session() -> str:
    token = load_token()
    if not token:
        typer.echo("No active session. Please run `dnsgate auth login` first.")
        raise typer.Exit(code=1)
    return token


@app.command("create")
def create_account(
    username: str = typer.Argument(..., help="Label for the client"),
    data_limit: str = typer.Option("0", "--data", "-d", help="Data quota, e.g. 500M or 2G (0 = unlimited)"),
    time_limit: str = typer.Option("0", "--time", "-t", help="Time quota from now, e.g. 12h or 30d (0 = unlimited)"),
):
    """
    Issues a new client token.
    """
    token = _require_session()

    if not USERNAME_REGEX.match(username):
        typer.echo("Invalid username.")
        raise typer.Exit(code=1)

    account_data = {
        "username": username,
        "data_limit": parse_size(data_limit),
        "time_limit": parse_duration(time_limit),
    }

    account = api_create_account(token, account_data)
    if account is None:
        typer.echo("Failed to create account. Check your session.")
        raise typer.Exit(code=1)

    typer.echo(f"Account '{username}' created.")
    typer.echo(f"Token: {account['token']}")


@app.command("list")
def list_accounts():
    """
    Lists all accounts in creation order.
    """
    token = _require_session()

    accounts = api_list_accounts(token)
    if accounts is None:
        typer.echo("Failed to list accounts. Check your session.")
        raise typer.Exit(code=1)

    if not accounts:
        typer.echo("No accounts found.")
        return

    typer.echo(f"\n{'Username':<20} {'Token':<34} {'Data limit':<14} {'Time limit':<12}")
    typer.echo("-" * 82)
    for a in accounts:
        typer.echo(
            f"{a.get('username', '-'):<20} {a.get('token', '-'):<34} "
            f"{format_limit(a.get('data_limit'), 'B'):<14} {format_limit(a.get('time_limit'), 's'):<12}"
        )


@app.command("show")
def show_account(username: str = typer.Argument(..., help="Username of the account")):
    """
    Shows usage and remaining quota for one account.
    """
    token = _require_session()

    account = api_get_account(token, username)
    if account is None:
        typer.echo(f"Account '{username}' not found.")
        raise typer.Exit(code=1)

    data_remaining = account.get("data_remaining")
    time_remaining = account.get("time_remaining")
    typer.echo(f"Username:   {account['username']}")
    typer.echo(f"Token:      {account['token']}")
    typer.echo(f"Created:    {account['created_at']}")
    typer.echo(f"Data:       {account['data_consumed']}B used of {format_limit(account['data_limit'], 'B')}"
               + (f" ({data_remaining}B left)" if data_remaining is not None else ""))
    typer.echo(f"Time:       {account['time_consumed']}s used of {format_limit(account['time_limit'], 's')}"
               + (f" ({time_remaining}s left)" if time_remaining is not None else ""))


@app.command("delete")
def delete_account(
    username: str = typer.Argument(..., help="Username of the account to revoke"),
    force: bool = typer.Option(False, "--force", "-f", help="Delete without confirmation"),
):
    """
    Revokes an account's token and removes the account.
    """
    token = _require_session()

    if not force:
        confirm = typer.confirm(f"Revoke and delete account '{username}'? Its token can never be used again.")
        if not confirm:
            typer.echo("Operation cancelled.")
            raise typer.Exit(code=0)

    status_code = api_delete_account(token, username)
    if status_code == 204:
        typer.echo(f"Account '{username}' revoked and deleted.")
    elif status_code == 404:
        typer.echo(f"Account '{username}' not found.")
        raise typer.Exit(code=1)
    else:
        typer.echo("Failed to delete account. Check your session.")
        raise typer.Exit(code=1)
