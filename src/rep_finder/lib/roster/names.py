"""Display-name normalization over the roster's name representations.

A legislator's name arrives in one of three shapes:

* structured: ``name: {first, middle, last, ...}``
* flat: ``first_name`` / ``last_name`` at the top level
* precomputed: ``name`` (string) or ``full_name``

``parse_name`` picks the variant from which fields are present; each variant
renders itself.
"""

from dataclasses import dataclass


def _join(*parts: object) -> str:
    return " ".join(str(p).strip() for p in parts if p and str(p).strip())


@dataclass(frozen=True)
class StructuredName:
    first: str | None = None
    middle: str | None = None
    last: str | None = None

    def display(self) -> str:
        return _join(self.first, self.middle, self.last)


@dataclass(frozen=True)
class FlatName:
    first_name: str | None = None
    last_name: str | None = None

    def display(self) -> str:
        return _join(self.first_name, self.last_name)


@dataclass(frozen=True)
class PrecomputedName:
    full_name: str

    def display(self) -> str:
        return self.full_name


PersonName = StructuredName | FlatName | PrecomputedName


def parse_name(person: dict) -> PersonName | None:
    """Select the name variant for a legislator record.

    Returns:
        The matching variant, or None if the record carries no name.
    """
    name = person.get("name")
    if isinstance(name, dict):
        return StructuredName(first=name.get("first"), middle=name.get("middle"), last=name.get("last"))
    if person.get("first_name") or person.get("last_name"):
        return FlatName(first_name=person.get("first_name"), last_name=person.get("last_name"))
    full_name = name or person.get("full_name")
    if isinstance(full_name, str) and full_name:
        return PrecomputedName(full_name=full_name)
    return None


def display_name(person: dict | None) -> str:
    """Return the display name for a legislator, or an empty string."""
    if not person:
        return ""
    parsed = parse_name(person)
    return parsed.display() if parsed is not None else ""
