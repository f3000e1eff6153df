"""Text analysis over names and capitals. All matching ignores case."""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from country_analytics.core.model import Country
from country_analytics.core.primitives import (
    count_letter_ignore_case,
    count_vowels,
    ensure_collection,
    ensure_letter,
    first_max,
    fold,
    is_palindrome,
    words,
)


def country_names_with_matching_first_and_last_letters(countries: Iterable[Country]) -> List[str]:
    return [c.name for c in ensure_collection(countries) if fold(c.name[:1]) == fold(c.name[-1:])]


def single_word_country_names(countries: Iterable[Country]) -> List[str]:
    return [c.name for c in ensure_collection(countries) if len(words(c.name)) == 1]


def country_name_with_most_number_of_words(countries: Iterable[Country]) -> Optional[str]:
    country = first_max(ensure_collection(countries), lambda c: len(words(c.name)))
    return country.name if country is not None else None


def does_palindrome_capital_exist(countries: Iterable[Country]) -> bool:
    return any(c.capital is not None and is_palindrome(c.capital) for c in ensure_collection(countries))


def country_name_with_most_number_of_letter_ignoring_case(
    countries: Iterable[Country],
    letter: str,
) -> Optional[str]:
    letter = ensure_letter(letter)
    country = first_max(ensure_collection(countries), lambda c: count_letter_ignore_case(c.name, letter))
    return country.name if country is not None else None


def country_name_with_most_number_of_e_ignoring_case(countries: Iterable[Country]) -> Optional[str]:
    return country_name_with_most_number_of_letter_ignoring_case(countries, "e")


def capital_with_most_number_of_english_vowels(countries: Iterable[Country]) -> Optional[str]:
    capitals = [c.capital for c in ensure_collection(countries) if c.capital is not None]
    return first_max(capitals, count_vowels)


def character_occurrences_in_country_names_ignoring_case(countries: Iterable[Country]) -> Dict[str, int]:
    """Occurrences of every character (spaces and punctuation included) in the case-folded names."""
    counts: Dict[str, int] = {}
    for c in ensure_collection(countries):
        for ch in fold(c.name):
            counts[ch] = counts.get(ch, 0) + 1
    return counts
