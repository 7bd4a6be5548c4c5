"""
CLI Migration Commands

migrate, inspect
"""

from pathlib import Path
from typing import List, Optional

import typer
from rich.table import Table

from reactive_unwrap.exceptions import ReactiveUnwrapError
from reactive_unwrap.logging_config import logger
from reactive_unwrap.migration import MigrationFacade
from .config import CLIConfig
from .output import get_console, print_diff, print_error, print_json

console = get_console()


def _resolve_root(root: Optional[Path], files: List[Path]) -> Path:
    if root is not None:
        return root
    if len(files) == 1:
        return files[0].resolve().parent
    return Path.cwd()


def migrate_cmd(
    files: List[Path] = typer.Argument(..., help="TypeScript files to migrate", exists=True, dir_okay=False),
    inputs: List[str] = typer.Option(..., "--input", "-n", help="Name of a reactive input (repeatable)"),
    root: Optional[Path] = typer.Option(None, "--root", "-r", help="Project root for relative paths", file_okay=False),
    json_output: bool = typer.Option(False, "--json", help="Output replacements as JSON"),
):
    """
    Rewrite destructured reactive inputs into unwrapped local variables.

    Prints a unified diff per file. Files are never modified.
    """
    facade = MigrationFacade(project_root=_resolve_root(root, files))
    results = []

    for file in files:
        try:
            result, _ = facade.migrate_file(file, inputs)
        except ReactiveUnwrapError as e:
            logger.error(f"Failed to migrate {file}: {e}")
            print_error(str(e), code="MIGRATION_FAILED", input_value=str(file))
            raise typer.Exit(code=1)

        results.append(result)

    if json_output:
        print_json([result.model_dump() for result in results])
    else:
        for result in results:
            if result.diff:
                print_diff(result.diff)
            for skipped in result.skipped:
                console.print(
                    f"[yellow]Skipped {skipped.name} in {skipped.file_path}:{skipped.line} ({skipped.reason})[/yellow]"
                )
            if not result.syntax_valid:
                console.print(f"[red]{result.file_path} does not parse after rewriting[/red]")

    if any(not result.syntax_valid for result in results):
        raise typer.Exit(code=1)


def inspect_cmd(
    files: List[Path] = typer.Argument(..., help="TypeScript files to inspect", exists=True, dir_okay=False),
    inputs: List[str] = typer.Option(..., "--input", "-n", help="Name of a reactive input (repeatable)"),
    root: Optional[Path] = typer.Option(None, "--root", "-r", help="Project root for relative paths", file_okay=False),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Show where each destructured reference is and how it would be unwrapped.
    """
    facade = MigrationFacade(project_root=_resolve_root(root, files))
    infos = []
    for file in files:
        try:
            infos.extend(facade.inspect_file(file, inputs))
        except ReactiveUnwrapError as e:
            print_error(str(e), code="INSPECT_FAILED", input_value=str(file))
            raise typer.Exit(code=1)

    if json_output:
        print_json([info.model_dump() for info in infos])
        return

    table = Table(title="Destructured references")
    table.add_column("Location", style="cyan")
    table.add_column("Name")
    table.add_column("Pattern")
    table.add_column("Context", style="green")
    for info in infos:
        table.add_row(f"{info.file_path}:{info.line}:{info.column + 1}", info.name, info.pattern, info.context)
        if CLIConfig.is_machine_mode():
            typer.echo(f"{info.file_path}:{info.line}:{info.column + 1} {info.name} {info.pattern} {info.context}")
    console.print(table)
