# ABOUTME: Main CLI application entry point using asyncclick for native async support
# ABOUTME: Extracts one wiki item page and prints a report or a single-line JSON payload

import asyncclick as click
from rich.console import Console
from rich.markup import escape

from fandom_folio.config import get_config
from fandom_folio.core.service import PageExtractionService
from fandom_folio.models import ExtractionRecord
from fandom_folio.utils.logging import LoggingMode, configure_logging, get_logger
from fandom_folio.utils.rich_tables import create_record_table, print_rich_table

# Data goes to stdout, everything else to stderr
console = Console()
err_console = Console(stderr=True)

EMPTY_PAYLOAD = "{}"


def _initialize_logging(json_output: bool, log_level: str | None = None, log_file: str | None = None) -> None:
    """Initialize logging configuration."""
    try:
        config = get_config()
        mode = LoggingMode.PRODUCTION if json_output else config.log_mode

        # Use config defaults when CLI parameters are not provided
        final_log_level = log_level or config.log_level
        final_log_file = log_file or (str(config.log_file) if config.log_file else None)

        configure_logging(mode=mode, log_level=final_log_level, log_file=final_log_file)
    except (FileNotFoundError, PermissionError, OSError):
        # Fall back to stderr-only logging
        configure_logging(mode=LoggingMode.PRODUCTION, log_level=log_level or "INFO", log_file=log_file)


def _display_record(record: ExtractionRecord) -> None:
    print_rich_table(console, create_record_table(record))


@click.command()
@click.argument("url")
@click.option("--json", "json_output", is_flag=True, help="Print the record as a single-line JSON payload")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level (DEBUG, INFO, WARNING, ERROR)",
)
@click.option("--log-file", help="Custom log file path")
@click.pass_context
async def app(ctx, url: str, json_output: bool, log_level: str | None, log_file: str | None):
    """
    📚 Fandom Folio - extract facts from a wiki item page

    Reads the page at URL and pulls its title, fact panel entries, cover
    image and plot, character and location sections into one record.
    """
    _initialize_logging(json_output, log_level.upper() if log_level else None, log_file)
    logger = get_logger(__name__)

    url = url.strip()
    if not json_output:
        err_console.print(f"🔎 Scraping: [bold]{escape(url)}[/bold]")

    service = PageExtractionService()
    try:
        record = await service.extract_url(url)
    finally:
        await service.close()

    if record is None:
        logger.warning("No record produced", url=url)
        if not json_output:
            err_console.print("[red]❌ Could not scrape data from the URL.[/red]")
        click.echo(EMPTY_PAYLOAD)
        ctx.exit(1)

    if json_output:
        click.echo(record.model_dump_json())
    else:
        _display_record(record)


if __name__ == "__main__":
    app()
