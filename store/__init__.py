"""Project model and persistence for Diamonds."""

from store.models import NamedURL, Project, is_valid_hex_color
from store.storage import ProjectStore
from store.collection import ProjectCollection

__all__ = [
    "NamedURL",
    "Project",
    "ProjectCollection",
    "ProjectStore",
    "is_valid_hex_color",
]
