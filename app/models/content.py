# app/models/content.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Track:
    id: str
    title: str
    src: str
    description: Optional[str] = None
    duration: Optional[str] = None


@dataclass(frozen=True)
class PricingTier:
    name: str
    price: str
    description: str
    features: tuple[str, ...]
    highlight: bool = False
