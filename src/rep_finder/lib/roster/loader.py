"""Roster file loading (unitedstates/congress-legislators YAML)."""

from pathlib import Path

import yaml
from loguru import logger


class RosterLoadError(Exception):
    """Raised when the roster file is missing, unreadable, or malformed.

    Args:
        path: Path of the roster file.
        message: Human-readable error description.
    """

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = str(path)
        self.message = message
        super().__init__(f"{self.path}: {message}")


def load_roster(path: str | Path) -> list[dict]:
    """Read the legislator roster from a YAML file.

    Args:
        path: Path to ``legislators-current.yaml`` (or a historical roster).

    Returns:
        List of legislator records.

    Raises:
        RosterLoadError: If the file is absent, unreadable, not valid YAML,
            or its top level is not a list.
    """
    roster_path = Path(path)
    if not roster_path.is_file():
        msg = "Roster file not found. Download legislators-current.yaml from the unitedstates/congress-legislators repo."
        raise RosterLoadError(roster_path, msg)

    try:
        with roster_path.open(encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except OSError as e:
        raise RosterLoadError(roster_path, f"Could not read roster file: {e}") from e
    except yaml.YAMLError as e:
        raise RosterLoadError(roster_path, f"Invalid YAML: {e}") from e

    if not isinstance(data, list):
        raise RosterLoadError(roster_path, f"Expected a list of legislators, got {type(data).__name__}")

    logger.debug("Loaded {} legislators from {}", len(data), roster_path)
    return data
