"""
Grouped and partitioned views.

Groupings are total: every country lands in exactly one group, and groups
appear in order of first appearance. Partitions always carry both the True and
the False key. Counts are numbers of countries, never of field values.
"""
from __future__ import annotations

from typing import Dict, Iterable, List

from country_analytics.core.model import Country, Region
from country_analytics.core.primitives import (
    count_by,
    ensure_collection,
    ensure_present,
    first_max,
    group_by,
    partition_counts,
    starts_with_ignore_case,
    summarize,
)


# ---------------------------------------------------------------------------
# Keyed by country code
# ---------------------------------------------------------------------------

def countries_by_code(countries: Iterable[Country]) -> Dict[str, Country]:
    return {c.code: c for c in ensure_collection(countries)}


def countries_by_code_and_name(countries: Iterable[Country]) -> Dict[str, str]:
    return {c.code: c.name for c in ensure_collection(countries)}


# ---------------------------------------------------------------------------
# Partitions
# ---------------------------------------------------------------------------

def countries_partitioned_by_region_and_count(countries: Iterable[Country], region: Region) -> Dict[bool, int]:
    """Number of countries in the region (True) and outside of it (False)."""
    region = ensure_present(region, "region")
    return partition_counts(ensure_collection(countries), lambda c: c.region is region)


def countries_partitioned_by_being_european_and_count(countries: Iterable[Country]) -> Dict[bool, int]:
    return countries_partitioned_by_region_and_count(countries, Region.EUROPE)


def number_of_countries_partitioned_by_population_average(countries: Iterable[Country]) -> Dict[bool, int]:
    """True counts countries at or above the average population, False those below it."""
    countries = ensure_collection(countries)
    summary = summarize(countries, lambda c: c.population)
    if summary.is_empty:
        return {False: 0, True: 0}
    # population >= total / count, without float rounding
    return partition_counts(countries, lambda c: c.population * summary.count >= summary.total)


# ---------------------------------------------------------------------------
# By region
# ---------------------------------------------------------------------------

def countries_by_region(countries: Iterable[Country]) -> Dict[Region, List[Country]]:
    return group_by(ensure_collection(countries), lambda c: c.region)


def number_of_countries_by_region(countries: Iterable[Country]) -> Dict[Region, int]:
    return count_by(ensure_collection(countries), lambda c: c.region)


def average_population_by_region(countries: Iterable[Country]) -> Dict[Region, float]:
    return {
        region: summarize(group, lambda c: c.population).average
        for region, group in countries_by_region(countries).items()
    }


def most_populous_country_by_region(countries: Iterable[Country]) -> Dict[Region, Country]:
    return {
        region: first_max(group, lambda c: c.population)
        for region, group in countries_by_region(countries).items()
    }


def largest_population_by_region(countries: Iterable[Country]) -> Dict[Region, int]:
    return {
        region: max(c.population for c in group)
        for region, group in countries_by_region(countries).items()
    }


def longest_country_name_by_region(countries: Iterable[Country]) -> Dict[Region, str]:
    return {
        region: first_max(group, lambda c: len(c.name)).name
        for region, group in countries_by_region(countries).items()
    }


def number_of_country_names_starting_with_country_code_by_region(countries: Iterable[Country]) -> Dict[Region, int]:
    """
    Per region, how many country names start with their own two-letter code,
    ignoring case. Every region present in the input is listed, possibly with 0.
    """
    return {
        region: sum(1 for c in group if starts_with_ignore_case(c.name, c.code))
        for region, group in countries_by_region(countries).items()
    }


# ---------------------------------------------------------------------------
# By first letter and by timezone
# ---------------------------------------------------------------------------

def number_of_countries_by_first_letter(countries: Iterable[Country]) -> Dict[str, int]:
    return count_by(ensure_collection(countries), lambda c: c.name[:1].upper())


def number_of_countries_by_timezone(countries: Iterable[Country]) -> Dict[str, int]:
    """Number of distinct countries using each timezone."""
    counts: Dict[str, int] = {}
    for c in ensure_collection(countries):
        for zone in dict.fromkeys(c.timezones):
            counts[zone] = counts.get(zone, 0) + 1
    return counts
