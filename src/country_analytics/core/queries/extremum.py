"""
Extremum queries.

Ties always go to the first country in input order. Optional results are None
for an empty collection, or when no country has a value for the field.
"""
from __future__ import annotations

from typing import Iterable, Optional

from country_analytics.core.model import Country, Region
from country_analytics.core.primitives import ensure_collection, ensure_present, first_max, first_min


def max_population(countries: Iterable[Country]) -> int:
    """Largest population, 0 for an empty collection."""
    return max((c.population for c in ensure_collection(countries)), default=0)


def most_populous_country_in_region(countries: Iterable[Country], region: Region) -> Optional[Country]:
    region = ensure_present(region, "region")
    in_region = [c for c in ensure_collection(countries) if c.region is region]
    return first_max(in_region, lambda c: c.population)


def most_populous_european_country(countries: Iterable[Country]) -> Optional[Country]:
    return most_populous_country_in_region(countries, Region.EUROPE)


def most_populous_country_name_in_region(countries: Iterable[Country], region: Region) -> Optional[str]:
    country = most_populous_country_in_region(countries, region)
    return country.name if country is not None else None


def most_populous_european_country_name(countries: Iterable[Country]) -> Optional[str]:
    return most_populous_country_name_in_region(countries, Region.EUROPE)


def length_of_longest_country_name(countries: Iterable[Country]) -> int:
    return max((len(c.name) for c in ensure_collection(countries)), default=0)


def largest_non_null_area_country(countries: Iterable[Country]) -> Optional[Country]:
    """Country with the largest area; countries without an area are never considered."""
    return first_max(ensure_collection(countries), lambda c: c.area)


def largest_country(countries: Iterable[Country]) -> Optional[Country]:
    return largest_non_null_area_country(countries)


def smallest_non_null_area_country(countries: Iterable[Country]) -> Optional[Country]:
    """Country with the smallest area; countries without an area are never considered."""
    return first_min(ensure_collection(countries), lambda c: c.area)
