"""Officeholder index: current occupant per ``STATE-N`` House seat."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from loguru import logger

from rep_finder.lib.roster.names import display_name
from rep_finder.lib.roster.terms import MalformedTermError, NormalizedTerm, normalize_term


@dataclass(frozen=True)
class OfficeholderEntry:
    """The materialized occupant of one House seat.

    The originating roster records are kept for downstream enrichment.
    """

    state: str
    district: str
    name: str
    party: str = ""
    phone: str = ""
    url: str = ""
    bioguide: str | None = None
    raw_person: dict = field(default_factory=dict)
    raw_term: dict = field(default_factory=dict)


OfficeholderIndex = dict[str, OfficeholderEntry]


def _first_of(*values: object) -> str:
    for value in values:
        if value:
            return str(value)
    return ""


def _bioguide(person: dict) -> str | None:
    ids = person.get("id")
    if isinstance(ids, dict) and ids.get("bioguide"):
        return str(ids["bioguide"])
    return None


def _select_candidate(candidates: list[NormalizedTerm]) -> NormalizedTerm:
    """Pick the authoritative term for one seat.

    The first current candidate wins. Otherwise the candidate with the
    greatest start wins; on equal starts the first-encountered candidate
    is kept.
    """
    for candidate in candidates:
        if candidate.is_current:
            return candidate

    best = candidates[0]
    for candidate in candidates[1:]:
        if candidate.start_epoch > best.start_epoch:
            best = candidate
    return best


def _materialize(candidate: NormalizedTerm) -> OfficeholderEntry:
    person, term = candidate.person, candidate.term
    return OfficeholderEntry(
        state=candidate.state,
        district=candidate.district,
        name=display_name(person),
        party=_first_of(term.get("party"), person.get("party")),
        phone=_first_of(term.get("phone"), person.get("phone")),
        url=_first_of(term.get("url"), person.get("url"), person.get("website")),
        bioguide=_bioguide(person),
        raw_person=person,
        raw_term=term,
    )


def build_index(roster: Iterable[dict], today: date | None = None) -> OfficeholderIndex:
    """Build the officeholder index from a full roster.

    Malformed terms are skipped individually; the build never aborts on
    bad records.

    Args:
        roster: Legislator records, each with a ``terms`` list.
        today: Evaluation date for currency (defaults to today).

    Returns:
        A new mapping of district key to officeholder.
    """
    today = today or date.today()
    candidates: dict[str, list[NormalizedTerm]] = {}
    skipped = 0

    for person in roster:
        if not isinstance(person, dict):
            skipped += 1
            logger.warning("Skipping non-mapping roster entry of type {}", type(person).__name__)
            continue
        terms = person.get("terms") or []
        if not isinstance(terms, list):
            skipped += 1
            logger.warning("Skipping legislator {!r}: terms is not a list", display_name(person))
            continue
        for term in terms:
            if not isinstance(term, dict):
                skipped += 1
                continue
            try:
                normalized = normalize_term(term, today, person=person)
            except MalformedTermError as e:
                skipped += 1
                logger.warning("Skipping term for {!r}: {}", display_name(person), e)
                continue
            if normalized is None:
                continue
            candidates.setdefault(normalized.key, []).append(normalized)

    index: OfficeholderIndex = {key: _materialize(_select_candidate(group)) for key, group in candidates.items()}
    logger.info("Indexed {} House seats ({} terms skipped)", len(index), skipped)
    return index
