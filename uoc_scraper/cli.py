"""
Command-line interface for the unit of competency scraper.

Uses Typer to take one unit code and optional configuration overrides.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from .config import load_config
from .errors import ScraperError
from .logging_utils import setup_logging
from .runner import run_scrape

app = typer.Typer(add_completion=False)
console = Console()


@app.command()
def run(
    unit_code: str | None = typer.Argument(None, help="Unit code, e.g. UEERE0035."),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        exists=True,
        envvar="UOC_SCRAPER_CONFIG",
        help="YAML config file.",
    ),
    output_dir: Path | None = typer.Option(
        None, "--output-dir", "-o", help="Existing directory for the JSON record."
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Scrape one unit of competency and store it as JSON.

    Args:
        unit_code: Code of the unit to scrape
        config: Optional path to YAML config file
        output_dir: Output directory override (defaults to ./json)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    cfg = load_config(str(config) if config else None)
    if log_level:
        cfg.logging.level = log_level
    logger = setup_logging(cfg.logging)

    try:
        path = run_scrape(unit_code, cfg, output_dir=output_dir, logger=logger)
    except ScraperError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False, soft_wrap=True)
        raise typer.Exit(code=1) from exc

    console.print(
        f"Successfully scraped and stored into '{escape(path.name)}'",
        highlight=False,
        soft_wrap=True,
    )


if __name__ == "__main__":
    app()
