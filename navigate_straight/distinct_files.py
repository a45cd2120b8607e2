"""Logic for collecting the distinct files a symbol is declared in."""

from collections.abc import Iterable

from navigate_straight.declaration_location import DeclarationLocation


def distinct_files(locations: Iterable[DeclarationLocation]) -> list[str]:
    """Return distinct file paths, ignoring case, in first-seen order.

    Locations without a path are skipped.
    """
    seen: set[str] = set()
    files = []
    for loc in locations:
        if not loc.file_path:
            continue
        key = loc.file_path.casefold()
        if key not in seen:
            seen.add(key)
            files.append(loc.file_path)
    return files
