import getpass
import re
import typer

from cli.core.session import save_token, load_token, clear_token, is_logged_in
from cli.core.api import api_login, api_logout


app = typer.Typer(help="Authentication commands (login, logout)")

USERNAME_REGEX = re.compile(r"^[a-zA-Z0-9_.-]{3,64}$")


@app.command("login")
def login(
    username: str = typer.Option(None, "--username", "-u", help="Operator username"),
):
    """
    Login as operator. Only allowed if no session is active.
    """
    if is_logged_in():
        typer.echo("Session already active. Logout first to remove current session token.")
        raise typer.Exit(code=1)

    if username is None:
        username = typer.prompt("Username")

    if not USERNAME_REGEX.match(username):
        typer.echo(
            "Invalid username.\n"
            "Use only letters, numbers, '.', '_' or '-', with 3 to 64 characters."
        )
        raise typer.Exit(code=1)

    password = getpass.getpass("Password: ")

    token = api_login(username, password)

    if token is None:
        typer.echo("Login failed (invalid credentials or API error).")
        raise typer.Exit(code=1)

    save_token(token)
    typer.echo(f"Login successful as '{username}'.")


@app.command("logout")
def logout():
    """
    End session and delete local token.
    """
    token = load_token()
    if token:
        if api_logout(token):
            typer.echo("Logged out from backend.")
        else:
            typer.echo("Warning: Failed to logout from backend. The token may have already expired.")

    clear_token()
    typer.echo("Session ended.")
