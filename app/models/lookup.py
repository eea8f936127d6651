# app/models/lookup.py
"""
Explicit lookup results.

Registry lookups return ``Found(value)`` or the ``NOT_FOUND`` singleton so every
caller has to branch on both outcomes instead of checking for ``None``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    value: T


class NotFound:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __bool__(self) -> bool:
        return False


NOT_FOUND = NotFound()

Lookup = Union[Found[T], NotFound]
