"""Numeric summaries, sums, distinct counts and derived metrics."""
from __future__ import annotations

from decimal import Decimal
from typing import Dict, Iterable, Optional, Set

from country_analytics.core.model import Country, Region
from country_analytics.core.primitives import (
    InvalidArgumentError,
    NumericSummary,
    ensure_collection,
    ensure_present,
    summarize,
)


# ---------------------------------------------------------------------------
# Population
# ---------------------------------------------------------------------------

def population_summary_statistics(countries: Iterable[Country]) -> NumericSummary:
    return summarize(ensure_collection(countries), lambda c: c.population)


def average_population(countries: Iterable[Country]) -> float:
    """Mean population, 0.0 for an empty collection."""
    summary = population_summary_statistics(countries)
    return summary.average if summary.count else 0.0


def sum_of_population_in_region(countries: Iterable[Country], region: Region) -> int:
    region = ensure_present(region, "region")
    return sum(c.population for c in ensure_collection(countries) if c.region is region)


def sum_of_european_population(countries: Iterable[Country]) -> int:
    return sum_of_population_in_region(countries, Region.EUROPE)


# ---------------------------------------------------------------------------
# Area
# ---------------------------------------------------------------------------

def summary_statistics_of_area(countries: Iterable[Country]) -> NumericSummary:
    """Summary over present areas only; countries without an area do not count."""
    return summarize(ensure_collection(countries), lambda c: c.area)


def total_area_of_countries(countries: Iterable[Country]) -> Optional[Decimal]:
    """Sum of present areas, None when no country has an area."""
    summary = summary_statistics_of_area(countries)
    if summary.is_empty:
        return None
    return Decimal(summary.total)


def country_name_population_density_pairs(countries: Iterable[Country]) -> Dict[str, float]:
    """
    Population per unit of area, keyed by country name.

    Countries with an absent or zero area are left out.
    """
    return {
        c.name: float(c.population / c.area)
        for c in ensure_collection(countries)
        if c.area is not None and c.area > 0
    }


# ---------------------------------------------------------------------------
# Names
# ---------------------------------------------------------------------------

def average_length_of_country_names(countries: Iterable[Country]) -> float:
    summary = summarize(ensure_collection(countries), lambda c: len(c.name))
    return summary.average if summary.count else 0.0


# ---------------------------------------------------------------------------
# Timezones
# ---------------------------------------------------------------------------

def count_of_distinct_timezones(countries: Iterable[Country]) -> int:
    return len({zone for c in ensure_collection(countries) for zone in c.timezones})


def distinct_timezones_in_regions(countries: Iterable[Country], *regions: Region) -> Set[str]:
    if not regions or any(r is None for r in regions):
        raise InvalidArgumentError("at least one region is required and none may be None")
    wanted = set(regions)
    return {zone for c in ensure_collection(countries) if c.region in wanted for zone in c.timezones}


def distinct_timezones_of_european_countries(countries: Iterable[Country]) -> Set[str]:
    return distinct_timezones_in_regions(countries, Region.EUROPE)


def distinct_timezones_of_european_and_asian_countries(countries: Iterable[Country]) -> Set[str]:
    return distinct_timezones_in_regions(countries, Region.EUROPE, Region.ASIA)
