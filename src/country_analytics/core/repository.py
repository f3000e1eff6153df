from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Tuple

from country_analytics.config import COUNTRIES_DATA_PATH, COUNTRIES_DATA_URL
from country_analytics.core.data_loader import Source, load_countries
from country_analytics.core.model import Country

logger = logging.getLogger(__name__)


class CountryRepository:
    """
    Holds the one immutable snapshot of all countries.

    There is no write path and no refresh: get_all() returns the same tuple on
    every call. Build a new repository to look at a different source.
    """

    def __init__(self, countries: Iterable[Country]) -> None:
        self._countries: Tuple[Country, ...] = tuple(countries)

    @classmethod
    def load(cls, source: Source) -> "CountryRepository":
        """Load a repository from a file path or URL. LoadError propagates to the caller."""
        return cls(load_countries(source))

    def get_all(self) -> Tuple[Country, ...]:
        return self._countries

    def __len__(self) -> int:
        return len(self._countries)

    def __iter__(self) -> Iterator[Country]:
        return iter(self._countries)

    def __repr__(self) -> str:
        return f"CountryRepository({len(self._countries)} countries)"


# ---------------------------------------------------------------------------
# Process-wide default repository
# ---------------------------------------------------------------------------

_REPOSITORY_CACHE: Optional[CountryRepository] = None


def configured_source() -> Source:
    """The URL when COUNTRIES_DATA_URL is set, otherwise the configured file path."""
    return COUNTRIES_DATA_URL or COUNTRIES_DATA_PATH


def get_repository(refresh: bool = False) -> CountryRepository:
    """
    Return the repository for the configured source, loaded once per process.

    refresh=True discards the cached snapshot and loads the source again.
    """
    global _REPOSITORY_CACHE
    if _REPOSITORY_CACHE is not None and not refresh:
        return _REPOSITORY_CACHE

    source = configured_source()
    logger.info("Building country repository from %s", source)
    _REPOSITORY_CACHE = CountryRepository.load(source)
    return _REPOSITORY_CACHE
