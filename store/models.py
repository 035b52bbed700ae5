"""Project data structures for Diamonds.

Persisted layout (one JSON array, one object per project):
==========================================================
| Key    | Type                          | Description                 |
|--------|-------------------------------|-----------------------------|
| name   | string                        | Project name                |
| colors | array of string               | Hex colors, in insert order |
| urls   | array of {"name", "url"}      | Named links, in insert order|
==========================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

HEX_COLOR_PREFIX = "#"
HEX_COLOR_SHORT_LEN = 4  # "#RGB"
HEX_COLOR_LONG_LEN = 7  # "#RRGGBB"


def is_valid_hex_color(value: str) -> bool:
    """Return True for '#RGB' or '#RRGGBB' shaped strings (digits unchecked)."""
    return value.startswith(HEX_COLOR_PREFIX) and len(value) in (
        HEX_COLOR_SHORT_LEN,
        HEX_COLOR_LONG_LEN,
    )


@dataclass
class NamedURL:
    name: str
    url: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "url": self.url}

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "NamedURL":
        return cls(name=payload["name"], url=payload["url"])


@dataclass
class Project:
    name: str
    colors: List[str] = field(default_factory=list)
    urls: List[NamedURL] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "colors": list(self.colors),
            "urls": [url.to_dict() for url in self.urls],
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Project":
        # Missing or null collections load as empty
        return cls(
            name=payload["name"],
            colors=list(payload.get("colors") or []),
            urls=[NamedURL.from_dict(item) for item in payload.get("urls") or []],
        )

    def describe(self) -> str:
        """Short summary such as '2 colors, 1 URL'."""
        color_word = "color" if len(self.colors) == 1 else "colors"
        url_word = "URL" if len(self.urls) == 1 else "URLs"
        return f"{len(self.colors)} {color_word}, {len(self.urls)} {url_word}"
