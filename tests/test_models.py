"""Unit tests for Project, NamedURL and hex color validation."""

import pytest

from store.models import NamedURL, Project, is_valid_hex_color


@pytest.mark.parametrize("value", ["#FFF", "#FF5733", "#abc", "#GGGGGG"])
def test_hex_color_accepted(value) -> None:
    assert is_valid_hex_color(value)


@pytest.mark.parametrize("value", ["#FF57", "FF5733", "#FF57333", "", "#", "FFF"])
def test_hex_color_rejected(value) -> None:
    assert not is_valid_hex_color(value)


def test_project_defaults_to_empty_collections() -> None:
    project = Project(name="Branding")
    assert project.colors == []
    assert project.urls == []


def test_project_to_dict() -> None:
    project = Project(
        name="Branding",
        colors=["#1ABC9C"],
        urls=[NamedURL(name="Docs", url="https://example.com")],
    )

    assert project.to_dict() == {
        "name": "Branding",
        "colors": ["#1ABC9C"],
        "urls": [{"name": "Docs", "url": "https://example.com"}],
    }


def test_project_from_dict_treats_null_collections_as_empty() -> None:
    project = Project.from_dict({"name": "Legacy", "colors": None, "urls": None})
    assert project.colors == []
    assert project.urls == []

    project = Project.from_dict({"name": "Bare"})
    assert project.colors == []
    assert project.urls == []


def test_project_from_dict_builds_named_urls() -> None:
    project = Project.from_dict(
        {"name": "Site", "colors": [], "urls": [{"name": "Home", "url": "https://a.b"}]}
    )
    assert project.urls == [NamedURL(name="Home", url="https://a.b")]


def test_describe_pluralizes() -> None:
    assert Project(name="a").describe() == "0 colors, 0 URLs"
    one = Project(name="b", colors=["#000"], urls=[NamedURL("x", "y")])
    assert one.describe() == "1 color, 1 URL"
    many = Project(name="c", colors=["#000", "#111"], urls=[NamedURL("x", "y")] * 3)
    assert many.describe() == "2 colors, 3 URLs"
