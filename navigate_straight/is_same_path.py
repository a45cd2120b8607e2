"""Predicate for comparing file paths the way the host file system does."""


def is_same_path(a: str | None, b: str | None) -> bool:
    """Check if two paths name the same file, ignoring case.

    An empty or missing path never matches anything, itself included.
    """
    if not a or not b:
        return False
    return a.casefold() == b.casefold()
