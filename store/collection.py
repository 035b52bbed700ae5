"""In-memory project list that persists itself after every change."""

from __future__ import annotations

from typing import List, Optional

from common.errors import ValidationError
from common.logging_setup import get_logger
from store.models import NamedURL, Project, is_valid_hex_color
from store.storage import ProjectStore

logger = get_logger(__name__)


class ProjectCollection:
    """
    Owns the session's projects and writes them through to a ProjectStore.

    Each add validates its input, mutates the list and then saves the whole
    list. When the save fails the mutation is kept and the StoreWriteError
    propagates, so the next successful save still includes it.
    """

    def __init__(self, store: ProjectStore, projects: Optional[List[Project]] = None) -> None:
        self._store = store
        self.projects: List[Project] = list(projects or [])

    @classmethod
    def load(cls, store: ProjectStore) -> "ProjectCollection":
        return cls(store, store.load())

    def __len__(self) -> int:
        return len(self.projects)

    def __getitem__(self, index: int) -> Project:
        return self.projects[index]

    def add_project(self, name: str) -> Project:
        if not name:
            raise ValidationError("project name must not be empty")
        project = Project(name=name)
        self.projects.append(project)
        logger.info(f"Added project {name!r}")
        self._save()
        return project

    def add_color(self, index: int, color: str) -> int:
        """Append a color to a project and return its position."""
        if not is_valid_hex_color(color):
            raise ValidationError(f"invalid hex color: {color!r}")
        project = self.projects[index]
        project.colors.append(color)
        logger.info(f"Added color {color} to {project.name!r}")
        self._save()
        return len(project.colors) - 1

    def add_url(self, index: int, name: str, url: str) -> int:
        """Append a named URL to a project and return its position."""
        if not name or not url:
            raise ValidationError("URL name and address must not be empty")
        project = self.projects[index]
        project.urls.append(NamedURL(name=name, url=url))
        logger.info(f"Added URL {name!r} to {project.name!r}")
        self._save()
        return len(project.urls) - 1

    def _save(self) -> None:
        try:
            self._store.save(self.projects)
        except Exception:
            logger.exception(f"Failed to save projects to {self._store.path}")
            raise
