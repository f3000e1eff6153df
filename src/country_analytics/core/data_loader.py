from __future__ import annotations

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from country_analytics.config import HTTP_TIMEOUT_SECONDS
from country_analytics.core.model import Country, Region

logger = logging.getLogger(__name__)

Source = Union[str, Path]

# Aliases accepted for region names in upstream data (lower-cased)
_REGION_ALIASES: Dict[str, Region] = {
    "polar": Region.ANTARCTIC,
    "antarctica": Region.ANTARCTIC,
}


class LoadError(Exception):
    """Raised when the countries source is unreadable or malformed."""


# ---------------------------------------------------------------------------
# HTTP session
# ---------------------------------------------------------------------------

def _build_retry_session() -> requests.Session:
    """
    Build a requests Session with conservative retries.
    Retries only cover the transport; a failed load is never retried.
    """
    session = requests.Session()

    retry = Retry(
        total=3,
        connect=3,
        read=3,
        status=3,
        backoff_factor=0.5,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=frozenset({"GET"}),
        raise_on_status=False,
    )

    adapter = HTTPAdapter(max_retries=retry)
    session.mount("https://", adapter)
    session.mount("http://", adapter)

    return session


_SESSION: Optional[requests.Session] = None


def _get_session() -> requests.Session:
    global _SESSION
    if _SESSION is None:
        _SESSION = _build_retry_session()
    return _SESSION


# ---------------------------------------------------------------------------
# Raw payload readers
# ---------------------------------------------------------------------------

def _is_url(source: Source) -> bool:
    return isinstance(source, str) and source.lower().startswith(("http://", "https://"))


def _parse_json(text: str, origin: str) -> Any:
    try:
        return json.loads(text, parse_float=Decimal)
    except ValueError as exc:
        raise LoadError(f"Malformed JSON in {origin}: {exc}") from exc


def _read_url(url: str, timeout_seconds: int) -> Any:
    try:
        resp = _get_session().get(url, timeout=timeout_seconds)
    except requests.RequestException as exc:
        raise LoadError(f"HTTP error while fetching {url}: {exc}") from exc

    if resp.status_code != 200:
        preview = (resp.text or "")[:200]
        raise LoadError(f"Unexpected HTTP status {resp.status_code} from {url}. Preview: {preview}")

    return _parse_json(resp.text, url)


def _read_file(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise LoadError(f"Cannot read countries file {path}: {exc}") from exc
    return _parse_json(text, str(path))


# ---------------------------------------------------------------------------
# Record decoding
# ---------------------------------------------------------------------------

def _decode_region(value: Any) -> Region:
    if value is None:
        return Region.UNSPECIFIED
    if not isinstance(value, str):
        raise LoadError(f"Field 'region' must be a string, got {type(value).__name__}")

    key = value.strip().lower()
    if key == "":
        return Region.UNSPECIFIED
    for region in Region:
        if region.value.lower() == key:
            return region
    if key in _REGION_ALIASES:
        return _REGION_ALIASES[key]
    raise LoadError(f"Unknown region {value!r}")


def _decode_area(value: Any) -> Optional[Decimal]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise LoadError(f"Field 'area' must be numeric, got {type(value).__name__}")
    area = value if isinstance(value, Decimal) else Decimal(str(value))
    if area < 0:
        raise LoadError(f"Field 'area' must not be negative, got {area}")
    return area


def _decode_timezones(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(z, str) for z in value):
        raise LoadError("Field 'timezones' must be a list of strings")
    return tuple(value)


def _decode_translations(value: Any) -> Dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise LoadError("Field 'translations' must be an object")

    out: Dict[str, str] = {}
    for lang, text in value.items():
        # Upstream data leaves some translations as null; those are simply absent
        if text is None:
            continue
        if not isinstance(lang, str) or not isinstance(text, str):
            raise LoadError(f"Translation {lang!r} must map a string to a string")
        if len(lang) != 2 or not lang.isalpha():
            raise LoadError(f"Translation key must be a two-letter language code, got {lang!r}")
        out[lang] = text
    return out


def decode_country(raw: Any) -> Country:
    """
    Decode one raw JSON object into a Country.

    Required fields: name, code, population. Missing optional fields take their
    documented defaults (absent capital/area, UNSPECIFIED region, no timezones,
    no translations, not independent). Any field with the wrong shape raises
    LoadError naming the field.
    """
    if not isinstance(raw, Mapping):
        raise LoadError(f"Country record must be an object, got {type(raw).__name__}")

    name = raw.get("name")
    if not isinstance(name, str) or not name.strip():
        raise LoadError(f"Field 'name' must be a non-empty string, got {name!r}")

    code = raw.get("code")
    if not isinstance(code, str) or len(code) != 2 or not code.isalpha():
        raise LoadError(f"Field 'code' must be two letters, got {code!r} ({name})")

    population = raw.get("population")
    if isinstance(population, bool) or not isinstance(population, int):
        raise LoadError(f"Field 'population' must be an integer, got {population!r} ({name})")
    if population < 0:
        raise LoadError(f"Field 'population' must not be negative, got {population} ({name})")

    capital = raw.get("capital")
    if capital is not None and not isinstance(capital, str):
        raise LoadError(f"Field 'capital' must be a string ({name})")

    independent = raw.get("independent", False)
    if independent is None:
        independent = False
    if not isinstance(independent, bool):
        raise LoadError(f"Field 'independent' must be a boolean ({name})")

    try:
        return Country(
            name=name,
            code=code,
            population=population,
            region=_decode_region(raw.get("region")),
            capital=capital or None,
            area=_decode_area(raw.get("area")),
            independent=independent,
            timezones=_decode_timezones(raw.get("timezones")),
            translations=_decode_translations(raw.get("translations")),
        )
    except LoadError as exc:
        raise LoadError(f"{exc} ({name})") from exc


def decode_countries(payload: Any) -> List[Country]:
    """Decode a JSON array of country objects, rejecting duplicate codes."""
    if not isinstance(payload, list):
        raise LoadError(f"Countries payload must be a JSON array, got {type(payload).__name__}")

    countries: List[Country] = []
    seen: Dict[str, int] = {}
    for idx, raw in enumerate(payload):
        try:
            country = decode_country(raw)
        except LoadError as exc:
            raise LoadError(f"Record #{idx}: {exc}") from exc

        if country.code in seen:
            raise LoadError(
                f"Record #{idx}: duplicate country code {country.code!r} (first seen at #{seen[country.code]})"
            )
        seen[country.code] = idx
        countries.append(country)

    return countries


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def load_countries(source: Source, timeout_seconds: int = HTTP_TIMEOUT_SECONDS) -> List[Country]:
    """
    Load every country from a local JSON file or an http(s) URL.

    The whole payload is read and decoded eagerly; the first malformed record
    aborts the load with LoadError.
    """
    if source is None or str(source).strip() == "":
        raise LoadError("No countries source configured.")

    if _is_url(source):
        logger.info("Loading countries from URL: %s", source)
        payload = _read_url(str(source), timeout_seconds)
    else:
        path = Path(source)
        logger.info("Loading countries from file: %s", path)
        payload = _read_file(path)

    countries = decode_countries(payload)
    if not countries:
        logger.warning("Countries source %s contained no records.", source)
    logger.info("Loaded %d countries.", len(countries))
    return countries
