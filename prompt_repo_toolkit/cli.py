"""Command line interface: ``prompt-toolkit validate ...`` and ``prompt-toolkit check ...``."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Any

import typer
from rich.console import Console

from prompt_repo_toolkit.config import ToolkitConfig, load_config
from prompt_repo_toolkit.models import Severity, ToolkitError, ValidationReport
from prompt_repo_toolkit.reporting import errors_to_json, render_errors, write_json
from prompt_repo_toolkit.severity import filter_by_severity
from prompt_repo_toolkit.validators import (
    check_partials,
    list_partials,
    validate_prompt_file,
    validate_registry,
    validate_repo,
)

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


app = typer.Typer(name="prompt-toolkit", help="Validate prompt repositories.", no_args_is_help=True)
validate_app = typer.Typer(help="Validate prompt repository components.", no_args_is_help=True)
check_app = typer.Typer(help="Check prompt repository components.", no_args_is_help=True)
app.add_typer(validate_app, name="validate")
app.add_typer(check_app, name="check")

FORMAT_OPTION = typer.Option(OutputFormat.TEXT, "--format", "-f", help="Output format.")
OUTPUT_OPTION = typer.Option(None, "--output", "-o", help="Write JSON output to this file.")
SEVERITY_OPTION = typer.Option(None, "--severity", "-s", help="Minimum severity to report.")
CONFIG_OPTION = typer.Option(None, "--config", "-c", help="Toolkit configuration YAML.")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging.")) -> None:
    """Validate prompt repositories: registry, prompt files, and partials."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@validate_app.command("repo")
def validate_repo_command(
    path: Path = typer.Argument(Path("."), help="Repository root."),
    output_format: OutputFormat = FORMAT_OPTION,
    output: Path | None = OUTPUT_OPTION,
    severity: Severity | None = SEVERITY_OPTION,
    exit_code: bool = typer.Option(False, "--exit-code", help="Exit non-zero whenever validation fails."),
    config_file: Path | None = CONFIG_OPTION,
) -> None:
    """Validate an entire prompt repository."""
    console = Console(highlight=False)
    config = load_config(config_file)
    report = validate_repo(path.resolve(), min_severity=severity, config=config)

    if output_format is OutputFormat.JSON:
        _emit_json(report.to_dict(), output)
    elif report.passed:
        console.print("[green]All validations passed![/green]")
    else:
        render_errors(report.errors, console)

    if not report.passed and (exit_code or report.has_fatal):
        raise typer.Exit(code=1)


@validate_app.command("registry")
def validate_registry_command(
    path: Path | None = typer.Argument(None, help="Registry file, relative to the repository root."),
    repo_root: Path = typer.Option(Path("."), "--repo-root", "-r", help="Repository root."),
    output_format: OutputFormat = FORMAT_OPTION,
    output: Path | None = OUTPUT_OPTION,
    severity: Severity | None = SEVERITY_OPTION,
    config_file: Path | None = CONFIG_OPTION,
) -> None:
    """Validate the registry manifest."""
    config = load_config(config_file)
    root = repo_root.resolve()
    result = validate_registry(root / (path or Path(config.registry_filename)), root, report_disabled=True)
    data = result.data.model_dump() if result.success and result.data is not None else None
    _finish(result.success, result.errors, data, config, severity, output_format, output, "Registry is valid!")


@validate_app.command("file")
def validate_file_command(
    path: Path = typer.Argument(..., help="Prompt YAML file."),
    output_format: OutputFormat = FORMAT_OPTION,
    output: Path | None = OUTPUT_OPTION,
    severity: Severity | None = SEVERITY_OPTION,
    config_file: Path | None = CONFIG_OPTION,
) -> None:
    """Validate a single prompt file."""
    config = load_config(config_file)
    result = validate_prompt_file(path.resolve())
    data = result.data.model_dump() if result.data is not None else None
    _finish(result.success, result.errors, data, config, severity, output_format, output, "Prompt file is valid!")


@validate_app.command("partials")
def validate_partials_command(
    path: Path = typer.Argument(Path("."), help="Repository root."),
    partials_path: str = typer.Option("partials", "--partials-path", "-p", help="Partials directory."),
    output_format: OutputFormat = FORMAT_OPTION,
    output: Path | None = OUTPUT_OPTION,
    config_file: Path | None = CONFIG_OPTION,
) -> None:
    """List the partial files in a partials directory."""
    console = Console(highlight=False)
    config = load_config(config_file)
    listing = list_partials(path.resolve(), partials_path, extension=config.partial_extension)

    if output_format is OutputFormat.JSON:
        payload: dict[str, Any] = {"success": listing.success, "partials": listing.partials}
        if listing.errors:
            payload["errors"] = errors_to_json(listing.errors)
        _emit_json(payload, output)
    elif listing.success:
        console.print(f"[green]Found {len(listing.partials)} partial file(s):[/green]")
        for name in listing.partials:
            console.print(f"  - {name}", markup=False)
    else:
        render_errors(listing.errors, console)

    if not listing.success:
        raise typer.Exit(code=1)


@check_app.command("partials")
def check_partials_command(
    path: Path = typer.Argument(Path("."), help="Repository root."),
    output_format: OutputFormat = FORMAT_OPTION,
    output: Path | None = OUTPUT_OPTION,
    severity: Severity | None = SEVERITY_OPTION,
    config_file: Path | None = CONFIG_OPTION,
) -> None:
    """Check partials for missing files, circular dependencies, and unused files."""
    console = Console(highlight=False)
    config = load_config(config_file)
    report: ValidationReport = check_partials(path.resolve(), min_severity=severity, config=config)

    if output_format is OutputFormat.JSON:
        _emit_json(report.to_dict(), output)
    elif report.passed:
        console.print("[green]All partials are valid![/green]")
    else:
        render_errors(report.errors, console)

    if not report.passed:
        raise typer.Exit(code=1)


def _finish(
    success: bool,
    errors: list[ToolkitError],
    data: dict[str, Any] | None,
    config: ToolkitConfig,
    severity: Severity | None,
    output_format: OutputFormat,
    output: Path | None,
    success_message: str,
) -> None:
    """Report a single-document validation and exit with its status."""
    filtered = filter_by_severity(errors, severity or config.severity)
    if output_format is OutputFormat.JSON:
        payload: dict[str, Any] = {"success": success, "errors": errors_to_json(filtered)}
        if data is not None:
            payload["data"] = data
        _emit_json(payload, output)
    elif success:
        Console(highlight=False).print(f"[green]{success_message}[/green]")
    else:
        render_errors(filtered, Console(highlight=False))

    if not success:
        raise typer.Exit(code=1)


def _emit_json(payload: dict[str, Any], output: Path | None) -> None:
    text = write_json(payload, output)
    if output is None:
        typer.echo(text)
    else:
        typer.echo(f"Report written to {output}")


if __name__ == "__main__":
    app()
