"""
Unit of Competency scraper.

Fetches a training.gov.au unit details page, extracts the unit code,
title, release, elements and performance criteria, and stores the record
as JSON.

Main entry point is the CLI via the `uoc-scraper` command.

Example:
    $ uoc-scraper UEERE0035
"""

__all__ = [
    "__version__",
    "UnitOfCompetency",
    "Element",
    "PerformanceCriteria",
    "scrape",
    "run_scrape",
]
__version__ = "0.1.0"

from .runner import run_scrape, scrape
from .types import Element, PerformanceCriteria, UnitOfCompetency
