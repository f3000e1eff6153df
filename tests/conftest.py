from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List

import pytest

from country_analytics.core.model import Country, Region


def make_country(name: str, code: str, population: int = 1000, **kwargs: Any) -> Country:
    """Build a Country with sensible defaults for the fields a test does not care about."""
    area = kwargs.pop("area", Decimal("100"))
    if area is not None and not isinstance(area, Decimal):
        area = Decimal(str(area))
    return Country(name=name, code=code, population=population, area=area, **kwargs)


def raw_country(**overrides: Any) -> Dict[str, Any]:
    raw: Dict[str, Any] = {
        "name": "Hungary",
        "code": "HU",
        "capital": "Budapest",
        "population": 9772756,
        "area": 93028.0,
        "region": "Europe",
        "independent": True,
        "timezones": ["UTC+01:00"],
        "translations": {"de": "Ungarn", "es": "Hungría"},
    }
    raw.update(overrides)
    return raw


def write_json(path: Path, payload: Any) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def countries() -> List[Country]:
    """A small, hand-made world with ties, missing areas and missing capitals."""
    return [
        make_country(
            "Hungary", "HU", 9_772_756, area="93028", capital="Budapest",
            region=Region.EUROPE, independent=True, timezones=("UTC+01:00",),
            translations={"de": "Ungarn", "es": "Hungría", "pt": "Hungria", "fa": "مجارستان"},
        ),
        make_country(
            "Norway", "NO", 5_379_475, area="323802", capital="Oslo",
            region=Region.EUROPE, independent=True, timezones=("UTC+01:00",),
            translations={"de": "Norwegen", "es": "Noruega", "pt": "Noruega"},
        ),
        make_country(
            "Ecuador", "EC", 17_643_060, area="276841", capital="Quito",
            region=Region.AMERICAS, independent=True, timezones=("UTC-06:00", "UTC-05:00"),
            translations={"de": "Ecuador", "es": "Ecuador"},
        ),
        make_country(
            "United Arab Emirates", "AE", 9_890_400, area="83600", capital="Abu Dhabi",
            region=Region.ASIA, independent=True, timezones=("UTC+04:00",),
            translations={"de": "Vereinigte Arabische Emirate", "fa": "امارات متحده عربی"},
        ),
        make_country(
            "Bouvet Island", "BV", 0, area="49", capital=None,
            region=Region.ANTARCTIC, independent=False, timezones=("UTC+01:00",),
            translations={},
        ),
        make_country(
            "Heard Island and McDonald Islands", "HM", 0, area=None, capital=None,
            region=Region.ANTARCTIC, independent=False, timezones=("UTC+05:00",),
            translations={"DE": "Heard und die McDonaldinseln"},
        ),
        make_country(
            "Vatican City", "VA", 451, area="0.44", capital="Vatican City",
            region=Region.EUROPE, independent=True, timezones=("UTC+01:00",),
            translations={"de": "Vatikanstadt", "es": "Ciudad del Vaticano"},
        ),
        make_country(
            "Nowhere", "NW", 50, area=None, capital="Ada",
            region=Region.UNSPECIFIED, independent=False, timezones=(),
            translations={},
        ),
    ]


@pytest.fixture
def tied() -> List[Country]:
    """A: 10, B: 30, C: 30."""
    return [
        make_country("A", "AA", 10),
        make_country("B", "BB", 30),
        make_country("C", "CC", 30),
    ]
