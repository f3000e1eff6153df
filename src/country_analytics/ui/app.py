from __future__ import annotations

import traceback
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd
import streamlit as st

from country_analytics.config import APP_NAME, APP_VERSION
from country_analytics.core.data_loader import LoadError
from country_analytics.core.model import Country, Region
from country_analytics.core.primitives import InvalidArgumentError, NumericSummary
from country_analytics.core.queries import (
    extremum,
    filters,
    grouping,
    listing,
    statistics,
    text,
    translations,
)
from country_analytics.core.report import build_overview, countries_to_frame
from country_analytics.core.repository import configured_source, get_repository


def _format_number(x: Any) -> str:
    if x is None:
        return "n/a"
    if isinstance(x, float):
        return f"{x:,.2f}"
    return f"{x:,}"


def _summary_rows(label: str, summary: NumericSummary) -> Dict[str, str]:
    return {
        "Field": label,
        "Count": _format_number(summary.count),
        "Total": _format_number(summary.total),
        "Min": _format_number(summary.minimum),
        "Max": _format_number(summary.maximum),
        "Average": _format_number(summary.average),
    }


def _region_options(countries: Sequence[Country]) -> List[Region]:
    present = set(grouping.number_of_countries_by_region(countries))
    return [r for r in Region if r in present]


def _load_countries() -> Optional[Sequence[Country]]:
    try:
        with st.spinner("Loading countries..."):
            return get_repository().get_all()
    except LoadError as err:
        st.error(f"Could not load countries from {configured_source()}: {err}")
        st.text_area("Traceback", value=traceback.format_exc(), height=220)
        return None


def _render_overview(countries: Sequence[Country]) -> None:
    overview = build_overview(countries)

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Countries", overview.country_count)
    col2.metric("Independent", overview.independent_count)
    col3.metric("Distinct timezones", overview.distinct_timezone_count)
    col4.metric("Without area", len(overview.null_area_country_names))

    st.write(f"Most populous: {overview.most_populous_country_name or 'n/a'}")
    st.write(f"Largest by area: {overview.largest_country_name or 'n/a'}")
    st.write(f"Smallest by area: {overview.smallest_country_name or 'n/a'}")

    st.dataframe(
        pd.DataFrame([
            _summary_rows("Population", overview.population),
            _summary_rows("Area", overview.area),
        ]),
        use_container_width=True,
    )

    if overview.countries_by_region:
        by_region = pd.DataFrame(
            [{"Region": str(r), "Countries": n} for r, n in overview.countries_by_region.items()]
        )
        st.bar_chart(by_region, x="Region", y="Countries")

    with st.expander("All countries", expanded=False):
        st.dataframe(countries_to_frame(countries), use_container_width=True)


def _render_region_explorer(countries: Sequence[Country]) -> None:
    with st.expander("Region explorer", expanded=True):
        options = _region_options(countries)
        if not options:
            st.info("No regions to explore.")
            return

        region = st.selectbox("Region", options=options, format_func=str, key="region_explorer")

        most_populous = extremum.most_populous_country_in_region(countries, region)
        split = grouping.countries_partitioned_by_region_and_count(countries, region)

        st.write(f"Countries in region: {filters.count_of_countries_in_region(countries, region)}")
        st.write(f"Countries elsewhere: {split[False]}")
        st.write(f"Total population: {_format_number(statistics.sum_of_population_in_region(countries, region))}")
        st.write(f"Most populous: {most_populous.name if most_populous else 'n/a'}")
        st.write(f"Distinct timezones: {sorted(statistics.distinct_timezones_in_regions(countries, region))}")
        st.write("Populations (descending):")
        st.write(listing.countries_population_in_desc_order_in_region(countries, region))


def _render_text_search(countries: Sequence[Country]) -> None:
    with st.expander("Name search", expanded=False):
        col1, col2 = st.columns(2)
        with col1:
            word = st.text_input("Name contains (ignoring case):", value="island")
        with col2:
            letter = st.text_input("Most occurrences of letter:", value="e", max_chars=1)

        try:
            st.write(f"First match: {filters.first_country_name_containing_text(countries, word) or 'none'}")
            st.write(
                "Most occurrences of "
                f"{letter!r}: {text.country_name_with_most_number_of_letter_ignoring_case(countries, letter) or 'none'}"
            )
        except InvalidArgumentError as err:
            st.warning(str(err))

        st.write(f"Palindrome capital exists: {text.does_palindrome_capital_exist(countries)}")
        st.write(f"Capital with most vowels: {text.capital_with_most_number_of_english_vowels(countries) or 'none'}")
        st.write(f"Name with most words: {text.country_name_with_most_number_of_words(countries) or 'none'}")


def _render_translation_lookup(countries: Sequence[Country]) -> None:
    with st.expander("Translations", expanded=False):
        tags = translations.distinct_language_tags_in_alphabetical_order(countries)
        if not tags:
            st.info("No translations in this collection.")
            return

        lang = st.selectbox("Language", options=tags, key="translation_lang")

        missing = translations.count_of_countries_without_given_translation(countries, lang)
        longest = translations.longest_country_name_translation_in_language(countries, lang)
        st.write(f"Countries without a translation: {missing}")
        st.write(f"Longest translation: {longest or 'n/a'}")

        names = translations.country_names_in_language_by_country_code(countries, lang)
        st.dataframe(
            pd.DataFrame([{"Code": code, "Name": name} for code, name in names.items()]),
            use_container_width=True,
        )


def run_app() -> None:
    st.set_page_config(page_title=APP_NAME, layout="wide")
    st.title(APP_NAME)
    st.caption(f"Version {APP_VERSION}")

    countries = _load_countries()
    if countries is None:
        return

    _render_overview(countries)
    _render_region_explorer(countries)
    _render_text_search(countries)
    _render_translation_lookup(countries)
