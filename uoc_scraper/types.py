"""
Core data types for the Unit of Competency scraper.

This module defines the records produced by a single scrape:
- PerformanceCriteria: A measurable sub-requirement of an element
- Element: A top-level learning outcome with its performance criteria
- UnitOfCompetency: The full unit record written to disk
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class PerformanceCriteria:
    """A performance criteria row belonging to one element.

    Attributes:
        id: Dotted identifier such as "1.1", leading number matches the element
        criteria: The descriptive criteria text
    """
    id: str
    criteria: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "criteria": self.criteria}


@dataclass
class Element:
    """A learning outcome of a unit, in document order.

    Attributes:
        id: Element number as digits only, e.g. "1"
        title: The element title text
        performance_criteria: Criteria attributed to this element, in row order
    """
    id: str
    title: str
    performance_criteria: list[PerformanceCriteria] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "performance_criteria": [pc.to_dict() for pc in self.performance_criteria],
        }


@dataclass
class UnitOfCompetency:
    """A scraped unit of competency record.

    Attributes:
        code: Unit code, e.g. "UEERE0035"
        title: Unit title as shown in the details heading
        release: Release label, e.g. "2"
        elements: Elements in the order they appear on the page
    """
    code: str
    title: str
    release: str
    elements: list[Element] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the output schema with a stable key order."""
        return {
            "code": self.code,
            "title": self.title,
            "release": self.release,
            "elements": [element.to_dict() for element in self.elements],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UnitOfCompetency:
        """Rebuild a record from its serialized form."""
        return cls(
            code=data["code"],
            title=data["title"],
            release=data["release"],
            elements=[
                Element(
                    id=item["id"],
                    title=item["title"],
                    performance_criteria=[
                        PerformanceCriteria(id=pc["id"], criteria=pc["criteria"])
                        for pc in item.get("performance_criteria", [])
                    ],
                )
                for item in data.get("elements", [])
            ],
        )
