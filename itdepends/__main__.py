import typer

from itdepends.commands import analyze

app = typer.Typer(
    help='itdepends: flatten a dependency tree and check for newer versions.',
    pretty_exceptions_show_locals=False,
    add_completion=False,
)

app.command()(analyze.main)


if __name__ == '__main__':
    app()
