from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


class Region(Enum):
    """Closed set of regions a country can belong to."""

    AFRICA = "Africa"
    AMERICAS = "Americas"
    ASIA = "Asia"
    EUROPE = "Europe"
    OCEANIA = "Oceania"
    ANTARCTIC = "Antarctic"
    UNSPECIFIED = ""

    def __str__(self) -> str:
        return self.value or "Unspecified"


@dataclass(frozen=True)
class Country:
    """
    One immutable country record.

    Optional fields:
      - capital: None when the source has no capital
      - area: None when the source has no area (distinct from an area of 0)

    translations maps a two-letter language code to the translated name.
    It is read-only and does not take part in hashing.
    """
    name: str
    code: str
    population: int
    region: Region = Region.UNSPECIFIED
    capital: Optional[str] = None
    area: Optional[Decimal] = None
    independent: bool = False
    timezones: Tuple[str, ...] = ()
    translations: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # Freeze the nested containers so a record can never be changed in place
        object.__setattr__(self, "timezones", tuple(self.timezones))
        if not isinstance(self.translations, MappingProxyType):
            object.__setattr__(self, "translations", MappingProxyType(dict(self.translations)))
