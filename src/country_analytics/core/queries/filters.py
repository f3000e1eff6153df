"""Threshold filters, membership counts and existence checks."""
from __future__ import annotations

from decimal import Decimal
from typing import Iterable, List, Optional, Set, Union

from country_analytics.core.model import Country, Region
from country_analytics.core.primitives import (
    contains_ignore_case,
    ensure_collection,
    ensure_letter,
    ensure_number,
    ensure_present,
    ensure_word,
    starts_with_ignore_case,
)

ISLAND = "island"


# ---------------------------------------------------------------------------
# Region membership
# ---------------------------------------------------------------------------

def country_names_in_region(countries: Iterable[Country], region: Region) -> List[str]:
    region = ensure_present(region, "region")
    return [c.name for c in ensure_collection(countries) if c.region is region]


def european_country_names(countries: Iterable[Country]) -> List[str]:
    return country_names_in_region(countries, Region.EUROPE)


def count_of_countries_in_region(countries: Iterable[Country], region: Region) -> int:
    region = ensure_present(region, "region")
    return sum(1 for c in ensure_collection(countries) if c.region is region)


def count_of_european_countries(countries: Iterable[Country]) -> int:
    return count_of_countries_in_region(countries, Region.EUROPE)


def count_of_independent_countries(countries: Iterable[Country]) -> int:
    return sum(1 for c in ensure_collection(countries) if c.independent)


# ---------------------------------------------------------------------------
# Thresholds (all strict "below")
# ---------------------------------------------------------------------------

def countries_with_population_below_threshold(countries: Iterable[Country], threshold: int) -> List[Country]:
    threshold = ensure_number(threshold, "threshold")
    return [c for c in ensure_collection(countries) if c.population < threshold]


def countries_with_population_below_one_hundred(countries: Iterable[Country]) -> List[Country]:
    return countries_with_population_below_threshold(countries, 100)


def country_names_with_population_below_threshold(countries: Iterable[Country], threshold: int) -> List[str]:
    return [c.name for c in countries_with_population_below_threshold(countries, threshold)]


def country_names_with_population_below_one_hundred(countries: Iterable[Country]) -> List[str]:
    return country_names_with_population_below_threshold(countries, 100)


def non_null_area_country_names_below_threshold(
    countries: Iterable[Country],
    threshold: Union[int, Decimal],
) -> List[str]:
    """Names of countries whose area is present and strictly below the threshold."""
    threshold = ensure_number(threshold, "threshold")
    return [
        c.name for c in ensure_collection(countries)
        if c.area is not None and c.area < threshold
    ]


def non_null_area_country_names_below_one(countries: Iterable[Country]) -> List[str]:
    return non_null_area_country_names_below_threshold(countries, 1)


# ---------------------------------------------------------------------------
# Existence checks
# ---------------------------------------------------------------------------

def does_country_with_population_exist(countries: Iterable[Country], population: int) -> bool:
    population = ensure_number(population, "population")
    return any(c.population == population for c in ensure_collection(countries))


def does_country_with_zero_population_exist(countries: Iterable[Country]) -> bool:
    return does_country_with_population_exist(countries, 0)


def does_every_country_have_at_least_one_timezone(countries: Iterable[Country]) -> bool:
    # True for an empty collection
    return all(c.timezones for c in ensure_collection(countries))


def does_two_or_more_countries_with_same_non_null_area_exist(countries: Iterable[Country]) -> bool:
    seen: Set[Decimal] = set()
    for c in ensure_collection(countries):
        if c.area is None:
            continue
        if c.area in seen:
            return True
        seen.add(c.area)
    return False


def distinct_regions_of_null_area_countries(countries: Iterable[Country]) -> Set[Region]:
    return {c.region for c in ensure_collection(countries) if c.area is None}


# ---------------------------------------------------------------------------
# Name matching (case-insensitive)
# ---------------------------------------------------------------------------

def first_country_starting_with_letter(countries: Iterable[Country], letter: str) -> Optional[Country]:
    letter = ensure_letter(letter)
    return next((c for c in ensure_collection(countries) if starts_with_ignore_case(c.name, letter)), None)


def first_country_starting_with_h(countries: Iterable[Country]) -> Optional[Country]:
    return first_country_starting_with_letter(countries, "H")


def does_country_with_name_containing_text_exist(countries: Iterable[Country], word: str) -> bool:
    return first_country_name_containing_text(countries, word) is not None


def does_country_with_name_containing_island_exist(countries: Iterable[Country]) -> bool:
    return does_country_with_name_containing_text_exist(countries, ISLAND)


def first_country_name_containing_text(countries: Iterable[Country], word: str) -> Optional[str]:
    word = ensure_word(word)
    return next((c.name for c in ensure_collection(countries) if contains_ignore_case(c.name, word)), None)


def first_country_name_containing_island(countries: Iterable[Country]) -> Optional[str]:
    return first_country_name_containing_text(countries, ISLAND)
