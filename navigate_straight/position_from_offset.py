"""Logic for converting a text offset into a line/column position."""

from navigate_straight.line_position import LinePosition


def position_from_offset(text: str, offset: int) -> LinePosition:
    """Return the zero-based position of an offset in the current text.

    The column is counted from the start of the offset's own line. Offsets
    outside the text are clamped to its bounds.
    """
    offset = min(max(offset, 0), len(text))
    line = text.count("\n", 0, offset)
    line_start = text.rfind("\n", 0, offset) + 1
    return LinePosition(line, offset - line_start)
