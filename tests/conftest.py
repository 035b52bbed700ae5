"""Shared fixtures for Diamonds tests."""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from store.collection import ProjectCollection
from store.models import NamedURL, Project
from store.storage import ProjectStore
from ui_service.handlers import Session
from ui_service.state import NavState


@pytest.fixture
def store(tmp_path):
    """A store backed by a data file in a temporary directory."""
    return ProjectStore(tmp_path / "data.json")


@pytest.fixture
def clipboard():
    """A clipboard sink that records writes."""
    return Mock(spec=["write_text"])


@pytest.fixture
def session(store, clipboard):
    """A session over an empty project list."""
    return Session(projects=ProjectCollection(store), clipboard=clipboard)


@pytest.fixture
def populated_session(store, clipboard):
    """A session with two projects, the first holding colors and URLs."""
    projects = [
        Project(
            name="Branding",
            colors=["#1ABC9C", "#FFF", "#FF5733"],
            urls=[
                NamedURL(name="Docs", url="https://example.com/docs"),
                NamedURL(name="Repo", url="https://example.com/repo"),
            ],
        ),
        Project(name="Website"),
    ]
    store.save(projects)
    return Session(projects=ProjectCollection(store, projects), clipboard=clipboard)


@pytest.fixture
def ui_state():
    return NavState()


def press(keys, ui_state, session):
    """Feed a sequence of keys (a list, or a string of single characters)."""
    from ui_service.handlers import handle_key

    results = [handle_key(key, ui_state, session) for key in keys]
    return results[-1] if results else True
