"""Projections and orderings: names, capitals, first-N and sorted views."""
from __future__ import annotations

from typing import Iterable, List, Optional

from country_analytics.core.model import Country, Region
from country_analytics.core.primitives import (
    SortKey,
    ensure_collection,
    ensure_count,
    ensure_present,
    equals_ignore_case,
    sort_by,
)

HUNGARY_CODE = "HU"

_REGION_ORDER = {region: idx for idx, region in enumerate(Region)}


def _capitals(countries: List[Country]) -> List[str]:
    return [c.capital for c in countries if c.capital is not None]


def _least_populous(countries: List[Country], count: int) -> List[Country]:
    return sort_by(countries, SortKey(lambda c: c.population))[:count]


# ---------------------------------------------------------------------------
# Names and capitals
# ---------------------------------------------------------------------------

def country_names(countries: Iterable[Country]) -> List[str]:
    return [c.name for c in ensure_collection(countries)]


def capitals_in_alphabetical_order(countries: Iterable[Country]) -> List[str]:
    """Capitals of the countries that have one, in alphabetical order."""
    return sorted(_capitals(ensure_collection(countries)))


def capitals_in_reverse_order(countries: Iterable[Country]) -> List[str]:
    return sorted(_capitals(ensure_collection(countries)), reverse=True)


def capitals_in_asc_length_order(countries: Iterable[Country]) -> List[str]:
    """Capitals by ascending length; equally long capitals keep their input order."""
    return sort_by(_capitals(ensure_collection(countries)), SortKey(len))


def capitals_in_asc_length_and_alphabetical_order(countries: Iterable[Country]) -> List[str]:
    return sort_by(_capitals(ensure_collection(countries)), SortKey(len), SortKey(lambda s: s))


def country_names_with_null_area(countries: Iterable[Country]) -> List[str]:
    return [c.name for c in ensure_collection(countries) if c.area is None]


def sorted_country_names_separated_by_comma(countries: Iterable[Country]) -> str:
    return ", ".join(sorted(c.name for c in ensure_collection(countries)))


def capitals_by_region_with_same_name_as_country(countries: Iterable[Country]) -> List[str]:
    """
    Capitals named like their country (ignoring case), ordered by region.

    Within a region the input order is kept.
    """
    matching = [
        c for c in ensure_collection(countries)
        if c.capital is not None and equals_ignore_case(c.capital, c.name)
    ]
    return [c.capital for c in sort_by(matching, SortKey(lambda c: _REGION_ORDER[c.region]))]


# ---------------------------------------------------------------------------
# First-N
# ---------------------------------------------------------------------------

def first_n_country_names(countries: Iterable[Country], count: int) -> List[str]:
    count = ensure_count(count)
    return [c.name for c in ensure_collection(countries)[:count]]


def first_five_country_names(countries: Iterable[Country]) -> List[str]:
    return first_n_country_names(countries, 5)


def populations_of_first_n_least_populous_countries(countries: Iterable[Country], count: int) -> List[int]:
    count = ensure_count(count)
    return [c.population for c in _least_populous(ensure_collection(countries), count)]


def populations_of_first_ten_least_populous_countries(countries: Iterable[Country]) -> List[int]:
    return populations_of_first_n_least_populous_countries(countries, 10)


def names_of_first_n_least_populous_countries(countries: Iterable[Country], count: int) -> List[str]:
    count = ensure_count(count)
    return [c.name for c in _least_populous(ensure_collection(countries), count)]


def names_of_first_ten_least_populous_countries(countries: Iterable[Country]) -> List[str]:
    return names_of_first_n_least_populous_countries(countries, 10)


# ---------------------------------------------------------------------------
# Sorted views
# ---------------------------------------------------------------------------

def countries_in_desc_population_order(countries: Iterable[Country]) -> List[Country]:
    return sort_by(ensure_collection(countries), SortKey(lambda c: c.population, descending=True))


def country_names_in_number_of_timezones_asc_order(countries: Iterable[Country]) -> List[str]:
    ordered = sort_by(ensure_collection(countries), SortKey(lambda c: len(c.timezones)))
    return [c.name for c in ordered]


def number_of_timezones_in_custom_format(countries: Iterable[Country]) -> List[str]:
    """Entries of the form ``name:count`` in ascending order of the timezone count."""
    ordered = sort_by(ensure_collection(countries), SortKey(lambda c: len(c.timezones)))
    return [f"{c.name}:{len(c.timezones)}" for c in ordered]


def european_countries_population_in_asc_order(countries: Iterable[Country]) -> List[int]:
    return sorted(c.population for c in ensure_collection(countries) if c.region is Region.EUROPE)


def countries_population_in_desc_order_in_region(countries: Iterable[Country], region: Region) -> List[int]:
    region = ensure_present(region, "region")
    return sorted(
        (c.population for c in ensure_collection(countries) if c.region is region),
        reverse=True,
    )


def countries_smaller_than_country_in_desc_order(
    countries: Iterable[Country],
    comparing_country: Country,
) -> List[Country]:
    """Countries with population less or equal to the given one, most populous first."""
    comparing_country = ensure_present(comparing_country, "comparing_country")
    smaller = [c for c in ensure_collection(countries) if c.population <= comparing_country.population]
    return sort_by(smaller, SortKey(lambda c: c.population, descending=True))


def countries_smaller_than_hungary_in_desc_order(countries: Iterable[Country]) -> List[Country]:
    countries = ensure_collection(countries)
    hungary: Optional[Country] = next((c for c in countries if c.code == HUNGARY_CODE), None)
    if hungary is None:
        return []
    return countries_smaller_than_country_in_desc_order(countries, hungary)
