"""Districts library: congressional district keys from Census geographies.

Public API:
    - resolve_districts: Geographies response -> set of ``STATE-N`` keys
    - find_geographies / find_district_collection: Locate the district layer
    - extract_district_number / extract_state: Per-object field extraction
    - FIPS_TO_STATE / state_for_fips: State FIPS translation
"""

from rep_finder.lib.districts.extractor import (
    DISTRICT_RULES,
    extract_district_number,
    extract_state,
    find_district_collection,
    find_geographies,
    resolve_districts,
)
from rep_finder.lib.districts.fips import FIPS_TO_STATE, state_for_fips

__all__ = [
    "DISTRICT_RULES",
    "FIPS_TO_STATE",
    "extract_district_number",
    "extract_state",
    "find_district_collection",
    "find_geographies",
    "resolve_districts",
    "state_for_fips",
]
