# ABOUTME: Main CLI application entry point using asyncclick for native async support
# ABOUTME: Provides commands for scanning Wikipedia articles for height data and inspecting logging

import json as jsonlib

import asyncclick as click
from rich.console import Console
from rich.panel import Panel

from height_inspector.config import get_config
from height_inspector.core.models import ChartData
from height_inspector.core.service import HeightInspectionService
from height_inspector.extraction.base import InspectionError
from height_inspector.utils.logging import (
    LoggingMode,
    configure_logging,
    create_smart_progress,
    get_logging_status,
    with_url_context,
)
from height_inspector.utils.rich_tables import (
    create_chart_summary_table,
    create_column_values_table,
    create_logging_status_table,
    print_rich_table,
)

console = Console()


def _display_chart(chart: ChartData) -> None:
    """Display extracted columns in a clean format."""
    console.print(Panel.fit(f"📰 [bold cyan]{chart.title}[/bold cyan]", border_style="magenta"))

    for number, column in enumerate(chart.columns, start=1):
        print_rich_table(console, create_column_values_table(column, number))

    print_rich_table(console, create_chart_summary_table(chart))


@click.command()
@click.argument("url")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Save chart data as JSON to this file")
@click.pass_context
async def scan(ctx, url: str, output: str | None):
    """
    📏 Scan a Wikipedia article for height measurements.

    Finds every data table in the article and turns the first cell of each row
    into a height in meters. Use --output to save the chart data.
    """
    if not await _scan_async(url, output, ctx.obj["json_output"]):
        raise click.exceptions.Exit(1)


async def _scan_async(url: str, output: str | None, json_output: bool) -> bool:
    """Scan an article and display its chart data. Returns False when the scan failed."""
    with with_url_context(url, command="scan") as logger:
        logger.info("Starting article scan")
        service = HeightInspectionService()

        try:
            if json_output:
                chart = await service.generate_chart(url, output)
            else:
                _, _, tracker = create_smart_progress(console, f"🔍 Scanning {url}")
                with tracker:
                    chart = await service.generate_chart(url, output)

        except InspectionError as e:
            logger.warning("Scan failed", error=str(e), error_type=type(e).__name__)
            if json_output:
                click.echo(jsonlib.dumps({"error": str(e), "error_type": type(e).__name__}))
            else:
                console.print(f"[red]❌ {e}[/red]")
            return False

        finally:
            await service.close()

        logger.info("Scan complete", columns=len(chart.columns), total_values=chart.total_values)

        if json_output:
            click.echo(chart.model_dump_json(indent=2))
            return True

        _display_chart(chart)
        if output:
            console.print(f"[green]💾 Chart data saved to {output}[/green]")
        return True


def _initialize_logging(json_output: bool, log_level: str | None = None, log_file: str | None = None) -> None:
    """Initialize logging configuration."""
    mode = LoggingMode.PRODUCTION if json_output else LoggingMode.INTERACTIVE
    try:
        config = get_config()

        # Use config defaults when CLI parameters are not provided
        final_log_level = log_level or config.log_level
        final_log_file = log_file or (str(config.log_file) if config.log_file else None)

        configure_logging(mode=mode, log_level=final_log_level, log_file=final_log_file)
    except OSError:
        # Fall back to minimal logging configuration
        configure_logging(mode=LoggingMode.PRODUCTION, log_level=log_level or "INFO")


@click.command(name="logging-status")
def logging_status():
    """
    📊 Show current logging configuration and status.
    """
    status = get_logging_status()
    logging_table = create_logging_status_table(status)
    print_rich_table(console, logging_table)


@click.group(invoke_without_command=True)
@click.option("--json", is_flag=True, help="Output JSON instead of rich tables")
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR)")
@click.option("--log-file", help="Custom log file path")
@click.pass_context
def app(ctx, json: bool, log_level: str | None, log_file: str | None):
    """
    📐 Height Inspector - Height series from Wikipedia tables

    Extract heights written in metres or feet and inches from the data tables
    of a Wikipedia article, normalized to meters and ready for charting.
    """
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json

    # Initialize logging once here instead of in each command
    _initialize_logging(json, log_level, log_file)

    # Show help if no command provided
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


app.add_command(scan)
app.add_command(logging_status)


if __name__ == "__main__":
    app()
