"""Tests for generated-file classification and path identity."""

import pytest

from navigate_straight.declaration_location import DeclarationLocation
from navigate_straight.file_kind import FileKind
from navigate_straight.is_generated_file import (
    classify_file,
    file_name_of,
    is_generated_file,
)
from navigate_straight.is_same_path import is_same_path
from navigate_straight.line_position import LinePosition


@pytest.mark.parametrize(
    "path",
    [
        "obj/Debug/Foo.g.cs",
        "obj\\Debug\\MainWindow.g.i.cs",
        "FOO.G.CS",
        "Foo.G.I.Cs",
    ],
)
def test_generated_suffixes(path: str) -> None:
    """Verify that both generated markers are recognized in any case."""
    assert is_generated_file(path)
    assert classify_file(path) is FileKind.GENERATED


@pytest.mark.parametrize("path", ["Foo.cs", "Foo.gcs", "g.cs/Foo.cs", "", None])
def test_user_authored(path: str | None) -> None:
    """Verify that other names and missing paths are user-authored."""
    assert not is_generated_file(path)
    assert classify_file(path) is FileKind.USER_AUTHORED


def test_custom_suffixes() -> None:
    """Verify that the suffix list can be replaced."""
    assert is_generated_file("Form1.Designer.cs", [".designer.cs"])
    assert not is_generated_file("Foo.g.cs", [".designer.cs"])


def test_file_name_of() -> None:
    """Verify that both separator styles are stripped."""
    assert file_name_of("a/b\\c.g.cs") == "c.g.cs"
    assert file_name_of("plain.cs") == "plain.cs"


def test_location_factory_classifies() -> None:
    """Verify that DeclarationLocation.in_file classifies from the name."""
    start, end = LinePosition(1, 0), LinePosition(2, 0)
    assert DeclarationLocation.in_file("X.g.cs", start, end).is_generated
    assert not DeclarationLocation.in_file("X.cs", start, end).is_generated


def test_is_same_path() -> None:
    """Verify case-insensitive identity and that empty paths never match."""
    assert is_same_path("C:\\Src\\Foo.cs", "c:\\src\\foo.CS")
    assert not is_same_path("Foo.cs", "Bar.cs")
    assert not is_same_path("", "")
    assert not is_same_path(None, "Foo.cs")
