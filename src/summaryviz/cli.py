"""summaryviz CLI."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from summaryviz import __version__
from summaryviz._constants import DEFAULT_CONFIG
from summaryviz.config import (
    ConfigError,
    VisualiserConfig,
    generate_example_config_yaml,
    load_config,
)
from summaryviz.errors import VisualiserError

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="summaryviz",
    help="Generate HTML reports from Wind Tunnel scenario run summary JSON",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()


# =============================================================================
# Helper Functions
# =============================================================================


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]OK[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]ERROR[/red] {escape(message)}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]INFO[/blue] {message}")


def configure_logging(verbose: bool) -> None:
    """Send log records through Rich; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False, rich_tracebacks=True)],
        force=True,
    )


def resolve_config(config_file: Path | None) -> VisualiserConfig:
    """Load the config file, falling back to ./summaryviz.yaml, then defaults.

    Exits with status 1 when the file can't be loaded.
    """
    path = config_file
    if path is None:
        default = Path(DEFAULT_CONFIG)
        if not default.exists():
            return VisualiserConfig()
        path = default

    try:
        config = load_config(path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1)  # noqa: B904
    logger.debug(f"Loaded configuration from {path}")
    return config


ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help=f"Configuration file (default: ./{DEFAULT_CONFIG} if present)",
    ),
]


# =============================================================================
# CLI Commands
# =============================================================================


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"summaryviz version {__version__}")


@app.command()
def init(
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output file path for configuration",
        ),
    ] = Path(DEFAULT_CONFIG),
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite existing file",
        ),
    ] = False,
) -> None:
    """Generate a starter configuration file.

    Every option is written commented out with its default value.
    """
    if output.exists() and not force:
        print_error(f"File already exists: {output}")
        print_info("Use --force to overwrite")
        raise typer.Exit(1)

    output.write_text(generate_example_config_yaml())
    print_success(f"Created configuration file: {output}")


@app.command()
def render(
    input_file: Annotated[
        Path,
        typer.Argument(help="The path to the input summary JSON"),
    ],
    output_file: Annotated[
        Path,
        typer.Argument(help="The path to the HTML file you want to create"),
    ],
    template: Annotated[
        str | None,
        typer.Option(
            "--template",
            "-t",
            help="Page template to insert the generated HTML into (overrides config)",
        ),
    ] = None,
    config_file: ConfigOption = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug logging",
        ),
    ] = False,
) -> None:
    """Generate an HTML report from a scenario run summary.

    The input may hold one scenario record or a list of them; each is
    rendered with its scenario template, in order, into one page.
    """
    from summaryviz.reports import ReportGenerator

    configure_logging(verbose)
    config = resolve_config(config_file)
    if template:
        try:
            config = VisualiserConfig.model_validate(
                {**config.model_dump(), "page_template": template}
            )
        except ValueError as e:
            print_error(f"Invalid page template {template}: {e}")
            raise typer.Exit(1)  # noqa: B904

    try:
        generator = ReportGenerator(config)
        report_path = generator.generate_report(input_file, output_file)
    except VisualiserError as e:
        print_error(str(e))
        raise typer.Exit(1)  # noqa: B904

    console.print(
        Panel(
            f"[green]Report generated successfully![/green]\n\n"
            f"Output: {report_path}\n\n"
            f"Open in browser to view.",
            title="Report Generated",
            expand=False,
        )
    )


@app.command()
def scenarios(config_file: ConfigOption = None) -> None:
    """List scenarios that have a report template."""
    from summaryviz.reports import TemplateRenderer
    from summaryviz.transforms import is_registered

    config = resolve_config(config_file)
    renderer = TemplateRenderer(template_dir=config.templates_dir)
    names = renderer.list_scenario_templates()
    if not names:
        print_info(f"No scenario templates found in {renderer.template_dir}")
        return

    table = Table(title=f"Scenario templates in {renderer.template_dir}")
    table.add_column("Scenario", style="cyan")
    table.add_column("Transform")
    for name in names:
        transform = "custom" if is_registered(name) else "[dim]default[/dim]"
        table.add_row(name, transform)

    console.print(table)


# =============================================================================
# Entry Point
# =============================================================================


def main() -> None:
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
