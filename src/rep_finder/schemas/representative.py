"""Pydantic v2 schemas for representative lookup responses."""

from pydantic import BaseModel, Field


class RepresentativeResponse(BaseModel):
    """A House representative for one district, or a missing marker."""

    model_config = {"from_attributes": True}

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


class Centroid(BaseModel):
    """ZIP centroid coordinates."""

    lat: float
    lon: float


class RepresentativeLookupResponse(BaseModel):
    """Representatives for every congressional district at a ZIP centroid."""

    zip: str = Field(description="Five-digit ZIP code")
    centroid: Centroid
    districts: list[str] = Field(description="Canonical STATE-N district keys")
    representatives: list[RepresentativeResponse]


class ReloadResponse(BaseModel):
    """Result of rebuilding the officeholder index."""

    ok: bool
    entries: int


class HealthResponse(BaseModel):
    """Service health with the current index size."""

    status: str
    entries: int
