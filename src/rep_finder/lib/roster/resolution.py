"""Join canonical district keys against the officeholder index."""

from collections.abc import Iterable
from dataclasses import dataclass

from rep_finder.lib.roster.index import OfficeholderIndex
from rep_finder.lib.roster.terms import split_district_key

DEFAULT_PHOTO_URL_TEMPLATE = "https://bioguide.congress.gov/photo/{bioguide}.jpg"


@dataclass(frozen=True)
class ResolvedRepresentative:
    """A representative for one district, or a ``missing`` placeholder."""

    state: str
    district: str
    name: str | None = None
    party: str | None = None
    phone: str | None = None
    url: str | None = None
    bioguide: str | None = None
    photo: str | None = None
    missing: bool = False
    raw_person: dict | None = None
    raw_term: dict | None = None


def photo_url(bioguide: str | None, template: str = DEFAULT_PHOTO_URL_TEMPLATE) -> str | None:
    """Derive the official photo URL for a bioguide ID."""
    if not bioguide:
        return None
    return template.format(bioguide=bioguide)


def resolve_representatives(
    keys: Iterable[str],
    index: OfficeholderIndex,
    photo_url_template: str = DEFAULT_PHOTO_URL_TEMPLATE,
) -> list[ResolvedRepresentative]:
    """Resolve each district key to its representative.

    A key with no index entry yields a placeholder with ``missing=True``.

    Args:
        keys: Canonical ``STATE-N`` keys, in the desired output order.
        index: Officeholder index to read from.
        photo_url_template: Template with a ``{bioguide}`` placeholder.

    Returns:
        One ResolvedRepresentative per key.
    """
    results: list[ResolvedRepresentative] = []
    for key in keys:
        state, district = split_district_key(key)
        entry = index.get(key)
        if entry is None:
            results.append(ResolvedRepresentative(state=state, district=district, missing=True))
            continue
        results.append(
            ResolvedRepresentative(
                state=state,
                district=district,
                name=entry.name,
                party=entry.party,
                phone=entry.phone,
                url=entry.url,
                bioguide=entry.bioguide,
                photo=photo_url(entry.bioguide, photo_url_template),
                raw_person=entry.raw_person,
                raw_term=entry.raw_term,
            )
        )
    return results
