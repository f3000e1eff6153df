"""
Queries over country name translations.

Language codes are matched ignoring case; translated names are returned as
they are stored.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from country_analytics.core.model import Country
from country_analytics.core.primitives import (
    NumericSummary,
    ensure_collection,
    ensure_language_code,
    first_max,
    fold,
    summarize,
)

SPANISH = "es"
PORTUGUESE = "pt"
FARSI = "fa"


def translation_of(country: Country, language_code: str) -> Optional[str]:
    """The country's translation for a language code (any case), or None."""
    wanted = fold(language_code)
    for lang, text in country.translations.items():
        if fold(lang) == wanted:
            return text
    return None


def _all_translations(countries: List[Country]) -> List[Tuple[str, str]]:
    return [(lang, text) for c in countries for lang, text in c.translations.items()]


# ---------------------------------------------------------------------------
# Coverage
# ---------------------------------------------------------------------------

def count_of_countries_without_given_translation(countries: Iterable[Country], language_code: str) -> int:
    language_code = ensure_language_code(language_code)
    return sum(1 for c in ensure_collection(countries) if translation_of(c, language_code) is None)


def count_of_countries_without_spanish_translation(countries: Iterable[Country]) -> int:
    return count_of_countries_without_given_translation(countries, SPANISH)


def summary_statistics_of_number_of_country_name_translations(countries: Iterable[Country]) -> NumericSummary:
    return summarize(ensure_collection(countries), lambda c: len(c.translations))


def distinct_language_tags_in_alphabetical_order(countries: Iterable[Country]) -> List[str]:
    return sorted({lang for c in ensure_collection(countries) for lang in c.translations})


# ---------------------------------------------------------------------------
# Longest translations
# ---------------------------------------------------------------------------

def longest_country_name_translation(countries: Iterable[Country]) -> Optional[str]:
    longest = first_max(_all_translations(ensure_collection(countries)), lambda pair: len(pair[1]))
    return longest[1] if longest is not None else None


def longest_country_name_translation_with_language_code(countries: Iterable[Country]) -> Optional[str]:
    """The longest translation in the form ``language=translation``."""
    longest = first_max(_all_translations(ensure_collection(countries)), lambda pair: len(pair[1]))
    return f"{longest[0]}={longest[1]}" if longest is not None else None


def longest_country_name_translation_in_language(countries: Iterable[Country], language_code: str) -> Optional[str]:
    language_code = ensure_language_code(language_code)
    texts = [translation_of(c, language_code) for c in ensure_collection(countries)]
    return first_max(texts, lambda text: len(text) if text is not None else None)


def longest_farsi_country_name_translation(countries: Iterable[Country]) -> Optional[str]:
    return longest_country_name_translation_in_language(countries, FARSI)


# ---------------------------------------------------------------------------
# Translated names by code
# ---------------------------------------------------------------------------

def country_names_in_language_by_country_code(countries: Iterable[Country], language_code: str) -> Dict[str, str]:
    """Translated name per country code; countries lacking the translation are left out."""
    language_code = ensure_language_code(language_code)
    out: Dict[str, str] = {}
    for c in ensure_collection(countries):
        text = translation_of(c, language_code)
        if text is not None:
            out[c.code] = text
    return out


def portuguese_country_names_by_country_code(countries: Iterable[Country]) -> Dict[str, str]:
    return country_names_in_language_by_country_code(countries, PORTUGUESE)
