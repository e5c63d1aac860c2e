"""
Pipeline orchestration for the unit of competency scraper.

This module coordinates one sequential run:
1. Fetch the details page
2. Extract code, title and release
3. Extract elements and performance criteria
4. Serialize and write the record

A failure at any stage propagates unchanged; nothing is written unless
every stage before the write succeeded.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import AppConfig
from .document import UnitPage
from .errors import UsageError
from .extractor import extract_code_title_release, extract_elements
from .fetcher import build_url, fetch_unit_page
from .logging_utils import log_event
from .types import UnitOfCompetency
from .writer import write_unit


def scrape(code: str, cfg: AppConfig, logger: logging.Logger | None = None) -> UnitOfCompetency:
    """Fetch and extract a single unit of competency.

    Args:
        code: Unit code appended to the details page URL
        cfg: Application configuration
        logger: Optional logger for stage events

    Returns:
        The extracted record
    """
    url = build_url(code, cfg.fetch.base_url)
    log_event(logger, "Fetching details page", stage="fetch", unit_code=code, url=url)
    html = fetch_unit_page(code, cfg.fetch)

    page = UnitPage(html, cfg.extract.content_selector)
    unit_code, title, release = extract_code_title_release(page, cfg.extract)
    log_event(
        logger,
        "Extracted unit details",
        stage="extract_details",
        unit_code=unit_code,
        title=title,
        release=release,
    )

    elements = extract_elements(page, cfg.extract)
    log_event(
        logger,
        "Extracted elements",
        stage="extract_elements",
        elements=len(elements),
        performance_criteria=sum(len(e.performance_criteria) for e in elements),
    )

    return UnitOfCompetency(code=unit_code, title=title, release=release, elements=elements)


def run_scrape(
    code: str | None,
    cfg: AppConfig,
    output_dir: Path | None = None,
    logger: logging.Logger | None = None,
) -> Path:
    """Run the complete scrape and write the JSON record.

    Args:
        code: Unit code from the command line
        cfg: Application configuration
        output_dir: Directory override; defaults to cfg.output.directory
        logger: Optional logger for stage events

    Returns:
        Path to the written JSON file

    Raises:
        UsageError: If no unit code was given
    """
    if code is None or not code.strip():
        raise UsageError("Unit Code not provided")
    code = code.strip()

    unit = scrape(code, cfg, logger)

    target_dir = output_dir if output_dir is not None else Path(cfg.output.directory)
    path = write_unit(unit, code, target_dir, indent=cfg.output.indent)
    log_event(logger, "Wrote unit record", stage="write", path=str(path))
    return path
