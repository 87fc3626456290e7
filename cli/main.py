# cli/main.py


import typer
from cli.auth.commands import app as auth_app
from cli.accounts.commands import app as accounts_app
from cli.access.commands import app as access_app
from cli.revocations.commands import app as revocations_app

app = typer.Typer(help="DNSGate operator CLI")
app.add_typer(auth_app, name="auth")
app.add_typer(accounts_app, name="accounts")
app.add_typer(access_app, name="access")
app.add_typer(revocations_app, name="revocations")

if __name__ == "__main__":
    app()
