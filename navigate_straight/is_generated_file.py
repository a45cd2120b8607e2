"""Predicate for checking if a source file was emitted by a code generator."""

from collections.abc import Iterable

from navigate_straight.file_kind import FileKind

# Compiler-emitted partials, and the same after further machine processing.
GENERATED_SUFFIXES: tuple[str, ...] = (".g.cs", ".g.i.cs")


def file_name_of(path: str) -> str:
    """Return the last path component, accepting both separator styles."""
    return path.replace("\\", "/").rsplit("/", 1)[-1]


def is_generated_file(
    path: str | None, suffixes: Iterable[str] = GENERATED_SUFFIXES
) -> bool:
    """Check if the file name ends with a generated-file suffix.

    Matching is case-insensitive. A missing path is never generated, so
    absent path information cannot discard a candidate.
    """
    if not path:
        return False
    name = file_name_of(path).lower()
    return any(name.endswith(s.lower()) for s in suffixes if s)


def classify_file(
    path: str | None, suffixes: Iterable[str] = GENERATED_SUFFIXES
) -> FileKind:
    """Return the FileKind for a path."""
    if is_generated_file(path, suffixes):
        return FileKind.GENERATED
    return FileKind.USER_AUTHORED
