"""Roster library: House officeholder index built from the legislators roster.

Public API:
    - load_roster / RosterLoadError: Read the YAML roster from disk
    - normalize_term / normalize_district: Term -> canonical district key
    - NormalizedTerm / MalformedTermError: Normalizer result and per-term error
    - build_index: Select the current occupant for every House seat
    - OfficeholderEntry / OfficeholderIndex: Index value and mapping types
    - display_name / parse_name: Name normalization over roster name shapes
    - resolve_representatives / ResolvedRepresentative: Join keys to the index
    - make_district_key / split_district_key / district_sort_key: Key helpers
"""

from rep_finder.lib.roster.index import OfficeholderEntry, OfficeholderIndex, build_index
from rep_finder.lib.roster.loader import RosterLoadError, load_roster
from rep_finder.lib.roster.names import FlatName, PrecomputedName, StructuredName, display_name, parse_name
from rep_finder.lib.roster.resolution import (
    DEFAULT_PHOTO_URL_TEMPLATE,
    ResolvedRepresentative,
    photo_url,
    resolve_representatives,
)
from rep_finder.lib.roster.terms import (
    MalformedTermError,
    NormalizedTerm,
    district_sort_key,
    make_district_key,
    normalize_district,
    normalize_term,
    split_district_key,
)

__all__ = [
    "DEFAULT_PHOTO_URL_TEMPLATE",
    "FlatName",
    "MalformedTermError",
    "NormalizedTerm",
    "OfficeholderEntry",
    "OfficeholderIndex",
    "PrecomputedName",
    "ResolvedRepresentative",
    "RosterLoadError",
    "StructuredName",
    "build_index",
    "display_name",
    "district_sort_key",
    "load_roster",
    "make_district_key",
    "normalize_district",
    "normalize_term",
    "parse_name",
    "photo_url",
    "resolve_representatives",
    "split_district_key",
]
