"""
Query catalogue, one module per family:

- listing: projections, first-N and sorted views
- filters: thresholds, region membership, existence checks, name matching
- extremum: most populous / largest / longest, first match wins ties
- statistics: null-safe numeric summaries, sums, distinct counts, density
- grouping: grouped and partitioned views
- text: palindromes, letter, vowel and word counting
- translations: look-ups by language code

Every function takes the country collection first and never modifies it.
"""
from country_analytics.core.queries import (  # noqa: F401
    extremum,
    filters,
    grouping,
    listing,
    statistics,
    text,
    translations,
)
