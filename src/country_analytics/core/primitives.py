"""
Shared building blocks for the query catalogue.

Everything here is pure: inputs are iterated, never modified, and every
result is a freshly allocated object.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import (
    Any,
    Callable,
    Dict,
    Hashable,
    Iterable,
    List,
    Mapping,
    Optional,
    TypeVar,
    Union,
)

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)

Number = Union[int, float, Decimal]

ENGLISH_VOWELS = frozenset("aeiou")


class InvalidArgumentError(ValueError):
    """Raised when a query receives a missing or malformed argument."""


# ---------------------------------------------------------------------------
# Argument validation
# ---------------------------------------------------------------------------

def ensure_collection(records: Optional[Iterable[T]], name: str = "countries") -> List[T]:
    """
    Reject a missing collection and return a private list copy of it.

    An empty collection is valid input. Strings and mappings are rejected
    because iterating them never yields records.
    """
    if records is None:
        raise InvalidArgumentError(f"{name} must not be None")
    if isinstance(records, (str, bytes, Mapping)):
        raise InvalidArgumentError(f"{name} must be a collection of records, got {type(records).__name__}")
    return list(records)


def ensure_present(value: Optional[T], name: str) -> T:
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")
    return value


def ensure_count(count: Any, name: str = "count") -> int:
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {count!r}")
    if count < 0:
        raise InvalidArgumentError(f"{name} must not be negative, got {count}")
    return count


def ensure_number(value: Any, name: str = "value") -> Union[int, float, Decimal]:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise InvalidArgumentError(f"{name} must be a number, got {value!r}")
    return value


def ensure_letter(letter: Any) -> str:
    if not isinstance(letter, str) or len(letter) != 1 or not letter.isalpha():
        raise InvalidArgumentError(f"letter must be a single alphabetic character, got {letter!r}")
    return letter


def ensure_language_code(language_code: Any) -> str:
    if not isinstance(language_code, str) or len(language_code) != 2 or not language_code.isalpha():
        raise InvalidArgumentError(f"language code must be two letters, got {language_code!r}")
    return language_code


def ensure_word(word: Any) -> str:
    if not isinstance(word, str) or not word.strip():
        raise InvalidArgumentError(f"word must be a non-empty string, got {word!r}")
    return word


# ---------------------------------------------------------------------------
# Null-safe numeric summary
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NumericSummary:
    """
    Count/total/min/max/average over the present values of a projection.

    With no present values count is 0, total is 0 and minimum, maximum and
    average are None; callers branch on count.
    """
    count: int
    total: Number
    minimum: Optional[Number]
    maximum: Optional[Number]
    average: Optional[float]

    @property
    def is_empty(self) -> bool:
        return self.count == 0


def summarize(records: Iterable[T], projection: Callable[[T], Optional[Number]]) -> NumericSummary:
    values = [v for v in (projection(r) for r in records) if v is not None]
    if not values:
        return NumericSummary(count=0, total=0, minimum=None, maximum=None, average=None)

    total = sum(values)
    return NumericSummary(
        count=len(values),
        total=total,
        minimum=min(values),
        maximum=max(values),
        average=float(total) / len(values),
    )


# ---------------------------------------------------------------------------
# Grouping and partitioning
# ---------------------------------------------------------------------------

def group_by(records: Iterable[T], key: Callable[[T], K]) -> Dict[K, List[T]]:
    """
    Group records by key.

    Keys appear in order of first appearance and each group keeps the input's
    relative order. Every record lands in exactly one group.
    """
    groups: Dict[K, List[T]] = {}
    for record in records:
        groups.setdefault(key(record), []).append(record)
    return groups


def count_by(records: Iterable[T], key: Callable[[T], K]) -> Dict[K, int]:
    return {k: len(group) for k, group in group_by(records, key).items()}


def partition(records: Iterable[T], predicate: Callable[[T], bool]) -> Dict[bool, List[T]]:
    """Split records in two; both keys are always present."""
    parts: Dict[bool, List[T]] = {False: [], True: []}
    for record in records:
        parts[bool(predicate(record))].append(record)
    return parts


def partition_counts(records: Iterable[T], predicate: Callable[[T], bool]) -> Dict[bool, int]:
    return {k: len(group) for k, group in partition(records, predicate).items()}


# ---------------------------------------------------------------------------
# Ordering and extrema
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SortKey:
    projection: Callable[[Any], Any]
    descending: bool = False


def sort_by(records: Iterable[T], *keys: SortKey) -> List[T]:
    """
    Sort by several keys, left to right, into a new list.

    Each pass is a stable sort, applied from the last key to the first, so
    records equal on every key keep their input order.
    """
    result = list(records)
    for key in reversed(keys):
        result.sort(key=key.projection, reverse=key.descending)
    return result


def first_max(records: Iterable[T], key: Callable[[T], Any]) -> Optional[T]:
    """Record with the largest key; the first one wins ties. None keys are skipped."""
    best: Optional[T] = None
    best_key: Any = None
    found = False
    for record in records:
        k = key(record)
        if k is None:
            continue
        if not found or k > best_key:
            best, best_key, found = record, k, True
    return best


def first_min(records: Iterable[T], key: Callable[[T], Any]) -> Optional[T]:
    """Record with the smallest key; the first one wins ties. None keys are skipped."""
    best: Optional[T] = None
    best_key: Any = None
    found = False
    for record in records:
        k = key(record)
        if k is None:
            continue
        if not found or k < best_key:
            best, best_key, found = record, k, True
    return best


# ---------------------------------------------------------------------------
# Case-insensitive text predicates
# ---------------------------------------------------------------------------

def fold(text: str) -> str:
    return text.casefold()


def contains_ignore_case(text: str, fragment: str) -> bool:
    return fold(fragment) in fold(text)


def starts_with_ignore_case(text: str, prefix: str) -> bool:
    return fold(text).startswith(fold(prefix))


def equals_ignore_case(a: str, b: str) -> bool:
    return fold(a) == fold(b)


def is_palindrome(text: str) -> bool:
    folded = fold(text)
    return folded == folded[::-1]


def count_letter_ignore_case(text: str, letter: str) -> int:
    return fold(text).count(fold(letter))


def count_vowels(text: str) -> int:
    return sum(1 for ch in fold(text) if ch in ENGLISH_VOWELS)


def words(text: str) -> List[str]:
    """Split on runs of whitespace."""
    return text.split()
