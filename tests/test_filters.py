"""Tests for threshold, membership and existence queries."""

from __future__ import annotations

from decimal import Decimal

import pytest

from country_analytics.core.model import Region
from country_analytics.core.primitives import InvalidArgumentError
from country_analytics.core.queries import filters

from conftest import make_country


class TestRegionMembership:

    def test_names_in_region(self, countries):
        assert filters.european_country_names(countries) == ["Hungary", "Norway", "Vatican City"]
        assert filters.country_names_in_region(countries, Region.ANTARCTIC) == [
            "Bouvet Island", "Heard Island and McDonald Islands",
        ]

    def test_unspecified_region_is_queryable(self, countries):
        assert filters.country_names_in_region(countries, Region.UNSPECIFIED) == ["Nowhere"]

    def test_counts(self, countries):
        assert filters.count_of_european_countries(countries) == 3
        assert filters.count_of_countries_in_region(countries, Region.OCEANIA) == 0
        assert filters.count_of_independent_countries(countries) == 5

    def test_region_required(self, countries):
        with pytest.raises(InvalidArgumentError):
            filters.country_names_in_region(countries, None)


class TestThresholds:

    def test_population_below_one_hundred(self, countries):
        assert [c.code for c in filters.countries_with_population_below_one_hundred(countries)] == ["BV", "HM", "NW"]
        assert filters.country_names_with_population_below_one_hundred(countries) == [
            "Bouvet Island", "Heard Island and McDonald Islands", "Nowhere",
        ]

    def test_below_is_strict(self, countries, tied):
        assert filters.country_names_with_population_below_threshold(countries, 451) == [
            "Bouvet Island", "Heard Island and McDonald Islands", "Nowhere",
        ]
        assert [c.name for c in filters.countries_with_population_below_threshold(tied, 30)] == ["A"]

    def test_filtering_is_idempotent(self, countries):
        once = filters.countries_with_population_below_threshold(countries, 10_000_000)
        assert filters.countries_with_population_below_threshold(once, 10_000_000) == once

    def test_area_below_threshold_ignores_absent(self, countries):
        assert filters.non_null_area_country_names_below_one(countries) == ["Vatican City"]
        assert filters.non_null_area_country_names_below_threshold(countries, 100) == [
            "Bouvet Island", "Vatican City",
        ]

    def test_area_below_is_strict(self, countries):
        assert filters.non_null_area_country_names_below_threshold(countries, 49) == ["Vatican City"]

    @pytest.mark.parametrize("threshold", [None, "30", True, [30]])
    def test_non_numeric_threshold_rejected(self, tied, threshold):
        with pytest.raises(InvalidArgumentError):
            filters.countries_with_population_below_threshold(tied, threshold)
        with pytest.raises(InvalidArgumentError):
            filters.non_null_area_country_names_below_threshold(tied, threshold)

    def test_decimal_and_float_thresholds(self, countries):
        assert filters.non_null_area_country_names_below_threshold(countries, 0.5) == ["Vatican City"]
        assert filters.country_names_with_population_below_threshold(countries, Decimal("50.5")) == [
            "Bouvet Island", "Heard Island and McDonald Islands", "Nowhere",
        ]


class TestExistence:

    def test_population_exists(self, countries):
        assert filters.does_country_with_zero_population_exist(countries)
        assert filters.does_country_with_population_exist(countries, 451)
        assert not filters.does_country_with_population_exist(countries, 1)

    @pytest.mark.parametrize("population", [None, "451", False])
    def test_non_numeric_population_rejected(self, countries, population):
        with pytest.raises(InvalidArgumentError):
            filters.does_country_with_population_exist(countries, population)

    def test_every_country_has_timezone(self, countries):
        assert not filters.does_every_country_have_at_least_one_timezone(countries)
        assert filters.does_every_country_have_at_least_one_timezone(countries[:-1])
        assert filters.does_every_country_have_at_least_one_timezone([])

    def test_same_non_null_area(self, countries):
        # Two countries without an area do not count as sharing one
        assert not filters.does_two_or_more_countries_with_same_non_null_area_exist(countries)
        twin = make_country("Twin", "TW", area="49")
        assert filters.does_two_or_more_countries_with_same_non_null_area_exist(list(countries) + [twin])

    def test_same_area_compares_by_value(self):
        sample = [make_country("A", "AA", area="10.0"), make_country("B", "BB", area="10")]
        assert filters.does_two_or_more_countries_with_same_non_null_area_exist(sample)

    def test_distinct_regions_of_null_area(self, countries):
        assert filters.distinct_regions_of_null_area_countries(countries) == {Region.ANTARCTIC, Region.UNSPECIFIED}
        assert filters.distinct_regions_of_null_area_countries([]) == set()


class TestNameMatching:

    def test_first_starting_with_h(self, countries):
        assert filters.first_country_starting_with_h(countries).name == "Hungary"

    def test_first_starting_with_letter_ignores_case(self, countries):
        assert filters.first_country_starting_with_letter(countries, "n").name == "Norway"
        assert filters.first_country_starting_with_letter(countries, "Z") is None

    @pytest.mark.parametrize("letter", ["", "no", "1", None])
    def test_bad_letter(self, countries, letter):
        with pytest.raises(InvalidArgumentError):
            filters.first_country_starting_with_letter(countries, letter)

    def test_island(self, countries):
        assert filters.does_country_with_name_containing_island_exist(countries)
        assert filters.first_country_name_containing_island(countries) == "Bouvet Island"
        assert filters.first_country_name_containing_island(countries[:4]) is None

    def test_containing_text_ignores_case(self, countries):
        assert filters.first_country_name_containing_text(countries, "ARAB") == "United Arab Emirates"
        assert not filters.does_country_with_name_containing_text_exist(countries, "xyz")

    def test_empty_word_rejected(self, countries):
        with pytest.raises(InvalidArgumentError):
            filters.first_country_name_containing_text(countries, "")
