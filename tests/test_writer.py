from __future__ import annotations

import json
from pathlib import Path

import pytest

from uoc_scraper.errors import FilesystemError
from uoc_scraper.types import Element, PerformanceCriteria, UnitOfCompetency
from uoc_scraper.writer import output_filename, read_unit, serialize_unit, write_unit


def _sample_unit() -> UnitOfCompetency:
    return UnitOfCompetency(
        code="UEERE0035",
        title="Define and apply electrical safety requirements",
        release="2",
        elements=[
            Element(
                id="1",
                title="Identify safety requirements",
                performance_criteria=[
                    PerformanceCriteria(id="1.1", criteria="Locate and interpret safety documentation"),
                ],
            ),
            Element(id="2", title="Apply safety requirements – on site"),
        ],
    )


def test_output_filename():
    assert (
        output_filename("UEERE0035", "Define and apply electrical safety requirements")
        == "UEERE0035 - Define and apply electrical safety requirements.json"
    )


def test_serialize_unit_uses_stable_key_order():
    text = serialize_unit(_sample_unit())
    data = json.loads(text)

    assert list(data) == ["code", "title", "release", "elements"]
    assert list(data["elements"][0]) == ["id", "title", "performance_criteria"]
    assert list(data["elements"][0]["performance_criteria"][0]) == ["id", "criteria"]
    assert text.startswith('{\n  "code": "UEERE0035",')
    assert "– on site" in text


def test_serialize_unit_is_idempotent():
    assert serialize_unit(_sample_unit()) == serialize_unit(_sample_unit())


def test_write_unit_round_trips(tmp_path: Path):
    unit = _sample_unit()

    path = write_unit(unit, "UEERE0035", tmp_path)

    assert path == tmp_path / "UEERE0035 - Define and apply electrical safety requirements.json"
    assert read_unit(path) == unit


def test_write_unit_overwrites_existing_file(tmp_path: Path):
    unit = _sample_unit()
    target = tmp_path / output_filename("UEERE0035", unit.title)
    target.write_text("stale", encoding="utf-8")

    write_unit(unit, "UEERE0035", tmp_path)

    assert target.read_text(encoding="utf-8") == serialize_unit(unit)


def test_write_unit_requires_existing_directory(tmp_path: Path):
    missing = tmp_path / "json"

    with pytest.raises(FilesystemError) as excinfo:
        write_unit(_sample_unit(), "UEERE0035", missing)

    assert excinfo.value.path == missing
    assert not missing.exists()
