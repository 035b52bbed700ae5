"""Whole-file JSON persistence for the project list.

The file is replaced as a whole on every save; there is no incremental
update and no locking, so the last writer wins.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, List

from common.errors import StoreParseError, StoreReadError, StoreWriteError
from common.logging_setup import get_logger
from store.models import Project

logger = get_logger(__name__)


class ProjectStore:
    """Load and save the ordered project list at a fixed path."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> List[Project]:
        """
        Read every project from disk.

        Returns:
            Projects in file order; an empty list when the file does not exist

        Raises:
            StoreReadError: If the file exists but cannot be read
            StoreParseError: If the contents are not a valid project list
        """
        if not self.path.exists():
            logger.info(f"No data file at {self.path}, starting fresh")
            return []

        try:
            with open(self.path, "rb") as handle:
                raw = handle.read()
        except OSError as exc:
            raise StoreReadError(f"could not read data file: {exc}") from exc

        try:
            payload = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise StoreParseError(f"could not parse data file: {exc}") from exc

        projects = _decode_projects(payload)
        logger.info(f"Loaded {len(projects)} project(s) from {self.path}")
        return projects

    def save(self, projects: List[Project]) -> None:
        """
        Overwrite the data file with the given projects.

        Raises:
            StoreWriteError: If serialization or the write fails
        """
        try:
            data = json.dumps([project.to_dict() for project in projects], indent=2)
        except (TypeError, ValueError) as exc:
            raise StoreWriteError(f"could not encode data: {exc}") from exc

        # Write beside the target and swap it in, so a failed write leaves
        # the previous file intact
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(data)
            os.chmod(tmp_path, 0o644)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StoreWriteError(f"could not write data file: {exc}") from exc

        logger.debug(f"Saved {len(projects)} project(s) to {self.path}")


def _decode_projects(payload: Any) -> List[Project]:
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise StoreParseError("could not parse data file: expected a JSON array")

    projects: List[Project] = []
    for index, item in enumerate(payload):
        problem = _project_problem(item)
        if problem:
            raise StoreParseError(
                f"could not parse data file: project {index} {problem}"
            )
        projects.append(Project.from_dict(item))
    return projects


def _project_problem(item: Any) -> str | None:
    if not isinstance(item, dict):
        return "is not an object"
    if not isinstance(item.get("name"), str):
        return "has no string name"
    colors = item.get("colors")
    if colors is not None and not (
        isinstance(colors, list) and all(isinstance(c, str) for c in colors)
    ):
        return "has malformed colors"
    urls = item.get("urls")
    if urls is None:
        return None
    if not isinstance(urls, list):
        return "has malformed urls"
    for entry in urls:
        if not (
            isinstance(entry, dict)
            and isinstance(entry.get("name"), str)
            and isinstance(entry.get("url"), str)
        ):
            return "has a malformed URL entry"
    return None
