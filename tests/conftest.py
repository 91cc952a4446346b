"""Shared test fixtures: settings, a sample roster on disk, and index isolation."""

from collections.abc import Generator
from datetime import date
from pathlib import Path

import pytest
import yaml

from rep_finder.core.config import Settings
from rep_finder.services.representative_service import set_index

TODAY = date(2024, 6, 1)


@pytest.fixture
def sample_roster() -> list[dict]:
    """A small roster covering current, historical, at-large and Senate terms."""
    return [
        {
            "id": {"bioguide": "D000001"},
            "name": {"first": "Jane", "last": "Doe"},
            "terms": [
                {
                    "type": "rep",
                    "state": "CA",
                    "district": "12",
                    "start": date(2021, 1, 3),
                    "end": None,
                    "party": "Democrat",
                    "phone": "202-225-0001",
                    "url": "https://doe.house.gov",
                },
            ],
        },
        {
            "id": {"bioguide": "Y000033"},
            "name": {"first": "Don", "middle": "E.", "last": "Young"},
            "terms": [
                {
                    "type": "rep",
                    "state": "AK",
                    "district": 0,
                    "start": date(2023, 1, 3),
                    "end": date(2025, 1, 3),
                    "party": "Republican",
                },
            ],
        },
        {
            "id": {"bioguide": "S000001"},
            "name": {"first": "Sam", "last": "Senator"},
            "terms": [
                {"type": "sen", "state": "CA", "start": date(2019, 1, 3), "end": date(2025, 1, 3)},
            ],
        },
        {
            "id": {"bioguide": "O000001"},
            "first_name": "Olive",
            "last_name": "Older",
            "party": "Whig",
            "terms": [
                {"type": "rep", "state": "CA", "district": 13, "start": date(2001, 1, 3), "end": date(2003, 1, 3)},
            ],
        },
        {
            "id": {"bioguide": "N000001"},
            "full_name": "Ned Newer",
            "website": "https://newer.example.com",
            "terms": [
                {
                    "type": "rep",
                    "state": "CA",
                    "district": 13,
                    "start": date(2011, 1, 3),
                    "end": date(2013, 1, 3),
                    "party": "Independent",
                },
            ],
        },
    ]


@pytest.fixture
def roster_file(tmp_path: Path, sample_roster: list[dict]) -> Path:
    """Write the sample roster as YAML and return its path."""
    path = tmp_path / "legislators-current.yaml"
    path.write_text(yaml.safe_dump(sample_roster, sort_keys=False), encoding="utf-8")
    return path


@pytest.fixture
def settings(roster_file: Path) -> Settings:
    """Test application settings pointing at the sample roster."""
    return Settings(
        _env_file=None,
        legislators_file=str(roster_file),
        log_level="DEBUG",
    )


@pytest.fixture(autouse=True)
def _reset_index() -> Generator[None]:
    """Clear the process-wide index between tests."""
    set_index(None)
    yield
    set_index(None)


def census_response(*districts: dict) -> dict:
    """Build a Census geographies/coordinates response around district objects."""
    return {
        "result": {
            "input": {"location": {"x": -122.27, "y": 37.80}},
            "geographies": {
                "States": [{"STATE": "06", "NAME": "California"}],
                "119th Congressional Districts": list(districts),
            },
        }
    }


@pytest.fixture
def make_census_response():
    """Factory fixture for Census geographies responses."""
    return census_response
