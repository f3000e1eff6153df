"""Tests for text-analysis queries."""

from __future__ import annotations

import pytest

from country_analytics.core.primitives import InvalidArgumentError
from country_analytics.core.queries import text

from conftest import make_country


class TestWords:

    def test_single_word_names(self, countries):
        assert text.single_word_country_names(countries) == ["Hungary", "Norway", "Ecuador", "Nowhere"]

    def test_most_words(self, countries):
        assert text.country_name_with_most_number_of_words(countries) == "Heard Island and McDonald Islands"
        assert text.country_name_with_most_number_of_words([]) is None

    def test_most_words_tie_goes_to_first(self):
        sample = [make_country("Costa Rica", "CR"), make_country("Sri Lanka", "LK")]
        assert text.country_name_with_most_number_of_words(sample) == "Costa Rica"

    def test_matching_first_and_last_letters(self):
        sample = [
            make_country("Andorra", "AD"),
            make_country("Chad", "TD"),
            make_country("Oslo Republic", "OR"),
            make_country("Austria", "AT"),
        ]
        assert text.country_names_with_matching_first_and_last_letters(sample) == ["Andorra", "Austria"]


class TestPalindromes:

    def test_palindrome_capital(self, countries):
        assert text.does_palindrome_capital_exist(countries)

    def test_no_palindrome_capital(self, countries):
        assert not text.does_palindrome_capital_exist(countries[:-1])

    def test_absent_capitals_ignored(self):
        assert not text.does_palindrome_capital_exist([make_country("A", "AA", capital=None)])
        assert not text.does_palindrome_capital_exist([])


class TestLetters:

    def test_most_e(self, countries):
        assert text.country_name_with_most_number_of_e_ignoring_case(countries) == "United Arab Emirates"

    def test_most_given_letter_ignores_case(self, countries):
        assert text.country_name_with_most_number_of_letter_ignoring_case(countries, "A") == (
            "Heard Island and McDonald Islands"
        )

    def test_bad_letter(self, countries):
        with pytest.raises(InvalidArgumentError):
            text.country_name_with_most_number_of_letter_ignoring_case(countries, "ae")

    def test_capital_with_most_vowels_tie_goes_to_first(self, countries):
        # Abu Dhabi and Vatican City both have four vowels
        assert text.capital_with_most_number_of_english_vowels(countries) == "Abu Dhabi"
        assert text.capital_with_most_number_of_english_vowels([]) is None

    def test_character_occurrences(self):
        sample = [make_country("Aba", "AB"), make_country("B b", "BB")]
        assert text.character_occurrences_in_country_names_ignoring_case(sample) == {"a": 2, "b": 3, " ": 1}
