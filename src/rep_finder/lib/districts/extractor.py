"""Extract canonical congressional district keys from a geographies response.

The Census geographies payload is not versioned: the congressional layer is
keyed by the Congress number (``"119th Congressional Districts"``) and the
district field is named after it (``CD119``). Extraction therefore works
from field-name patterns, as an ordered table of independent rules where
the first rule that yields a number wins.
"""

import re
from collections.abc import Callable
from typing import Any

from loguru import logger

from rep_finder.lib.districts.fips import state_for_fips
from rep_finder.lib.roster.terms import AT_LARGE_DISTRICT, make_district_key

FALLBACK_COLLECTION_KEYS = (
    "Congressional Districts",
    "Congressional District",
    "CongressionalDistricts",
    "Congressional district",
)

_CD_FIELD_RE = re.compile(r"^CD\d{1,3}$", re.IGNORECASE)
_TRAILING_DIGITS_RE = re.compile(r"(\d+)\s*$")
_DISTRICT_WORD_RE = re.compile(r"district", re.IGNORECASE)

DistrictRule = Callable[[dict[str, Any]], int | None]


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    return int(text) if text.isdecimal() and text.isascii() else None


def _trailing_number(value: Any) -> int | None:
    match = _TRAILING_DIGITS_RE.search(str(value))
    return int(match.group(1)) if match else None


def _from_cd_field(obj: dict[str, Any]) -> int | None:
    """``CD119: "12"`` style fields."""
    for name, value in obj.items():
        if _CD_FIELD_RE.match(str(name)) and value not in (None, ""):
            number = _as_int(value)
            if number is not None:
                return number
    return None


def _from_district_name(obj: dict[str, Any]) -> int | None:
    """Any ``*name*`` field reading like ``"Congressional District 12"``."""
    for name, value in obj.items():
        if "name" in str(name).lower() and isinstance(value, str) and _DISTRICT_WORD_RE.search(value):
            number = _trailing_number(value)
            if number is not None:
                return number
    return None


def _from_name_field(obj: dict[str, Any]) -> int | None:
    value = obj.get("NAME")
    if value in (None, ""):
        return None
    return _trailing_number(value)


DISTRICT_RULES: tuple[DistrictRule, ...] = (
    _from_cd_field,
    _from_district_name,
    _from_name_field,
)

STATE_FIPS_FIELDS: tuple[Callable[[dict[str, Any]], Any], ...] = (
    lambda obj: obj.get("STATE"),
    lambda obj: obj.get("STATEFP"),
    lambda obj: str(obj["GEOID"])[:2] if obj.get("GEOID") else None,
)


def find_geographies(response: Any) -> dict[str, Any] | None:
    """Locate the geographies mapping in a Census coordinates response.

    Returns:
        The geographies mapping, or None if the response carries none.
    """
    if not isinstance(response, dict):
        return None
    result = response.get("result")
    candidates = (
        result.get("geographies") if isinstance(result, dict) else None,
        response.get("geographies"),
        result,
    )
    for candidate in candidates:
        if isinstance(candidate, dict) and candidate:
            return candidate
    return None


def find_district_collection(geographies: dict[str, Any]) -> list[dict[str, Any]] | None:
    """Find the list of congressional district objects.

    The first key containing "congress" (any case) is used; when it is empty,
    a fixed set of known spellings is tried.
    """
    collection = None
    for key, value in geographies.items():
        if "congress" in str(key).lower():
            collection = value
            break

    if not collection:
        for key in FALLBACK_COLLECTION_KEYS:
            collection = geographies.get(key)
            if collection:
                break

    if not collection or not isinstance(collection, list):
        return None
    return collection


def extract_district_number(obj: dict[str, Any]) -> str:
    """Return the normalized district number for one district object."""
    for rule in DISTRICT_RULES:
        number = rule(obj)
        if number is not None:
            return str(number) if number > 0 else AT_LARGE_DISTRICT
    return AT_LARGE_DISTRICT


def extract_state(obj: dict[str, Any]) -> str | None:
    """Return the postal code for one district object, or None."""
    for read in STATE_FIPS_FIELDS:
        code = read(obj)
        if code not in (None, ""):
            return state_for_fips(code)
    return None


def resolve_districts(response: Any) -> set[str]:
    """Extract the set of ``STATE-N`` keys from a geographies response.

    Objects with an unknown or missing state FIPS code are skipped.

    Args:
        response: Parsed JSON from the Census geographies endpoint.

    Returns:
        Set of canonical district keys (empty when none are found).
    """
    geographies = find_geographies(response)
    if geographies is None:
        return set()
    collection = find_district_collection(geographies)
    if collection is None:
        return set()

    keys: set[str] = set()
    for obj in collection:
        if not isinstance(obj, dict):
            continue
        state = extract_state(obj)
        if state is None:
            logger.debug("Skipping district object with unrecognized state FIPS: GEOID={!r}", obj.get("GEOID"))
            continue
        keys.add(make_district_key(state, extract_district_number(obj)))
    return keys
