from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

import pandas as pd

from country_analytics.core.model import Country, Region
from country_analytics.core.primitives import NumericSummary, ensure_collection
from country_analytics.core.queries import extremum, filters, grouping, listing, statistics

FRAME_COLUMNS = [
    "code",
    "name",
    "capital",
    "region",
    "population",
    "area",
    "independent",
    "timezones",
    "translations",
]


@dataclass
class CollectionOverview:
    """
    Canonical headline facts about a country collection.

    Every number here comes straight from a catalogue query, so the UI (or any
    other consumer) can show it without recomputing anything.
    """
    country_count: int
    independent_count: int

    population: NumericSummary
    area: NumericSummary

    countries_by_region: Dict[Region, int]
    distinct_timezone_count: int

    null_area_country_names: List[str]
    most_populous_country_name: Optional[str]
    largest_country_name: Optional[str]
    smallest_country_name: Optional[str]


def build_overview(countries: Iterable[Country]) -> CollectionOverview:
    """
    Build the overview facts for a collection.

    An empty collection gives zero counts, empty summaries and no names.
    """
    countries = ensure_collection(countries)

    most_populous = next(iter(listing.countries_in_desc_population_order(countries)), None)
    largest = extremum.largest_country(countries)
    smallest = extremum.smallest_non_null_area_country(countries)

    return CollectionOverview(
        country_count=len(countries),
        independent_count=filters.count_of_independent_countries(countries),
        population=statistics.population_summary_statistics(countries),
        area=statistics.summary_statistics_of_area(countries),
        countries_by_region=grouping.number_of_countries_by_region(countries),
        distinct_timezone_count=statistics.count_of_distinct_timezones(countries),
        null_area_country_names=listing.country_names_with_null_area(countries),
        most_populous_country_name=most_populous.name if most_populous is not None else None,
        largest_country_name=largest.name if largest is not None else None,
        smallest_country_name=smallest.name if smallest is not None else None,
    )


def countries_to_frame(countries: Iterable[Country]) -> pd.DataFrame:
    """
    One row per country, in input order.

    Nested fields are reduced to counts (timezones, translations). A missing
    area stays missing (NaN) rather than becoming 0.
    """
    rows = [
        {
            "code": c.code,
            "name": c.name,
            "capital": c.capital,
            "region": str(c.region),
            "population": c.population,
            "area": float(c.area) if c.area is not None else None,
            "independent": c.independent,
            "timezones": len(c.timezones),
            "translations": len(c.translations),
        }
        for c in ensure_collection(countries)
    ]
    df = pd.DataFrame.from_records(rows, columns=FRAME_COLUMNS)
    df["area"] = pd.to_numeric(df["area"], errors="coerce")
    return df
