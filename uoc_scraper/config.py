"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- FetchConfig: HTTP fetching settings
- ExtractConfig: Page markers and table layout
- OutputConfig: Output directory and JSON formatting
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import yaml


@dataclass
class FetchConfig:
    """Configuration for fetching the unit details page.

    Attributes:
        base_url: Details page prefix; the unit code is appended verbatim
        timeout_seconds: HTTP request timeout
        trust_env: Whether to respect system proxy settings
        follow_redirects: Whether to follow HTTP redirects
    """

    base_url: str = "https://training.gov.au/Training/Details/"
    timeout_seconds: float = 30.0
    trust_env: bool = True
    follow_redirects: bool = True


@dataclass
class ExtractConfig:
    """Configuration for locating the two regions of interest.

    Attributes:
        content_selector: CSS selector of the main content wrapper
        details_marker: Text of the h1 that precedes the code/title/release h2
        elements_marker: Text of the h2 that precedes the elements table
        header_rows: Number of leading table rows treated as headers
    """

    content_selector: str = "#layoutContentWrapper"
    details_marker: str = "Unit of competency details"
    elements_marker: str = "Elements and Performance Criteria"
    header_rows: int = 2


@dataclass
class OutputConfig:
    """Configuration for output generation.

    Attributes:
        directory: Existing directory the JSON record is written into
        indent: JSON indentation width
    """

    directory: str = "json"
    indent: int = 2


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
        directory: Directory the log file is written into
    """

    level: str = "WARNING"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "scrape.jsonl"
    directory: str = "logs"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    fetch: FetchConfig = field(default_factory=FetchConfig)
    extract: ExtractConfig = field(default_factory=ExtractConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "fetch": {
            "base_url": cfg.fetch.base_url,
            "timeout_seconds": cfg.fetch.timeout_seconds,
            "trust_env": cfg.fetch.trust_env,
            "follow_redirects": cfg.fetch.follow_redirects,
        },
        "extract": {
            "content_selector": cfg.extract.content_selector,
            "details_marker": cfg.extract.details_marker,
            "elements_marker": cfg.extract.elements_marker,
            "header_rows": cfg.extract.header_rows,
        },
        "output": {
            "directory": cfg.output.directory,
            "indent": cfg.output.indent,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
            "directory": cfg.logging.directory,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        fetch=FetchConfig(**data["fetch"]),
        extract=ExtractConfig(**data["extract"]),
        output=OutputConfig(**data["output"]),
        logging=LoggingConfig(**data["logging"]),
    )
