import typer

from reactive_unwrap import __version__
from reactive_unwrap.cli import migrate
from reactive_unwrap.cli.config import CLIConfig
from reactive_unwrap.logging_config import logger, setup_logging

app = typer.Typer(help="Unwrap reactive inputs captured by TypeScript destructuring patterns.")


@app.callback()
def global_options(
    human: bool = typer.Option(
        False,
        "--human",
        "-H",
        help="Enable human mode: colored diffs and tables (also via REACTIVE_UNWRAP_HUMAN_MODE env var)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
):
    """
    reactive-unwrap: rewrite destructured reactive inputs.

    Machine mode is DEFAULT (plain output). Use --human/-H for pretty output.
    """
    if human:
        CLIConfig.set_machine_mode(False)
        setup_logging(level="DEBUG" if verbose else "INFO", force=True)
    else:
        setup_logging(level="DEBUG", suppress_console=not verbose, force=True)


app.command(name="migrate")(migrate.migrate_cmd)
app.command(name="inspect")(migrate.inspect_cmd)


@app.command()
def version():
    """
    Prints the current version of reactive-unwrap.
    """
    logger.debug("version requested")
    typer.echo(f"reactive-unwrap v{__version__}")


def main():
    app()


if __name__ == "__main__":
    main()
