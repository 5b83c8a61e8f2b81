"""Project descriptor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DigiSpec:
    """Holds the project's name and whether it runs under test."""

    name: str = "digispec"
    testing: bool = False