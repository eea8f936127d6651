# app/models/service_area.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class HubNotes:
    """
    Optional copy shown on a hub page. Presentation only.
    """
    travel_note: Optional[str] = None
    venue_note: Optional[str] = None
    neighborhood_note: Optional[str] = None


@dataclass(frozen=True)
class Hub:
    name: str
    state: str
    slug: str
    latitude: float
    longitude: float
    intro_copy: str
    # city pages under this hub are indexed only when this is True
    index_city_pages: bool = False
    notes: Optional[HubNotes] = None

    @property
    def label(self) -> str:
        return f"{self.name}, {self.state}"


@dataclass(frozen=True)
class City:
    name: str
    state: str
    slug: str

    @property
    def label(self) -> str:
        return f"{self.name}, {self.state}"
