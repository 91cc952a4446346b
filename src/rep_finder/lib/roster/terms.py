"""Term normalization: raw roster term -> canonical district key and currency."""

import re
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, time
from typing import Any

HOUSE_TERM_TYPE = "rep"
AT_LARGE_DISTRICT = "1"

_DIGITS_RE = re.compile(r"\d+")
_AT_LARGE_RE = re.compile(r"at[-\s]*large", re.IGNORECASE)
_STATE_RE = re.compile(r"^[A-Z]{2}$")


class MalformedTermError(ValueError):
    """Raised when a House term cannot be normalized.

    The index builder skips the offending term and keeps going.
    """


@dataclass(frozen=True)
class NormalizedTerm:
    """A House term reduced to what seat selection needs."""

    key: str
    state: str
    district: str
    is_current: bool
    start_epoch: int
    person: dict = field(default_factory=dict, compare=False, repr=False)
    term: dict = field(default_factory=dict, compare=False, repr=False)


def make_district_key(state: str, district: str) -> str:
    """Build a canonical ``STATE-N`` key."""
    return f"{state}-{district}"


def split_district_key(key: str) -> tuple[str, str]:
    """Split a canonical key into ``(state, district)``."""
    state, _, district = key.partition("-")
    return state, district


def district_sort_key(key: str) -> tuple[str, int]:
    """Sort key ordering districts by state, then numerically."""
    state, district = split_district_key(key)
    return state, int(district) if district.isdigit() else 0


def normalize_district(raw: Any) -> str:
    """Normalize a raw district value to a positive integer string.

    Missing, empty, zero and "at-large" values become ``"1"``.

    Raises:
        MalformedTermError: If the value is neither numeric nor at-large.
    """
    if raw is None or isinstance(raw, bool):
        return AT_LARGE_DISTRICT

    if isinstance(raw, float):
        if not raw.is_integer():
            msg = f"Non-integral district {raw!r}"
            raise MalformedTermError(msg)
        raw = int(raw)

    if isinstance(raw, int):
        number = raw
    elif isinstance(raw, str):
        text = raw.strip()
        match = _DIGITS_RE.search(text)
        if match:
            number = int(match.group(0))
        elif not text or _AT_LARGE_RE.search(text):
            return AT_LARGE_DISTRICT
        else:
            msg = f"Unrecognized district {raw!r}"
            raise MalformedTermError(msg)
    else:
        msg = f"Unsupported district type {type(raw).__name__}"
        raise MalformedTermError(msg)

    if number < 0:
        msg = f"Negative district {raw!r}"
        raise MalformedTermError(msg)
    if number == 0:
        return AT_LARGE_DISTRICT
    return str(number)


def _parse_date(value: Any, field_name: str) -> date | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError as e:
            msg = f"Unparseable {field_name} date {value!r}"
            raise MalformedTermError(msg) from e
    msg = f"Unsupported {field_name} date type {type(value).__name__}"
    raise MalformedTermError(msg)


def _epoch(value: date | None) -> int:
    if value is None:
        return 0
    return int(datetime.combine(value, time.min, tzinfo=UTC).timestamp())


def normalize_term(term: dict, today: date, person: dict | None = None) -> NormalizedTerm | None:
    """Normalize one roster term.

    Args:
        term: Raw term mapping from the roster.
        today: Evaluation date for the currency check.
        person: Owning legislator record, kept for later materialization.

    Returns:
        NormalizedTerm, or None when the term is not a House seat.

    Raises:
        MalformedTermError: If the term is a House term with bad data.
    """
    if term.get("type") != HOUSE_TERM_TYPE:
        return None

    state = term.get("state")
    if not isinstance(state, str) or not _STATE_RE.match(state.strip().upper()):
        msg = f"Missing or invalid state {state!r}"
        raise MalformedTermError(msg)
    state = state.strip().upper()

    district = normalize_district(term.get("district"))
    start = _parse_date(term.get("start"), "start")
    end = _parse_date(term.get("end"), "end")

    # Absent bounds are open-ended
    is_current = (start is None or start <= today) and (end is None or end >= today)

    return NormalizedTerm(
        key=make_district_key(state, district),
        state=state,
        district=district,
        is_current=is_current,
        start_epoch=_epoch(start),
        person=person if person is not None else {},
        term=term,
    )
