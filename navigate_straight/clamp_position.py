"""Logic for fitting a possibly stale position into the current document."""

from navigate_straight.line_position import LinePosition


def document_lines(text: str) -> list[str]:
    """Split text into editor lines, without line terminators.

    A trailing newline starts a final empty line, as it does in an editor.
    """
    return [line.removesuffix("\r") for line in text.split("\n")]


def clamp_position(text: str, position: LinePosition) -> LinePosition:
    """Clamp a position into the text.

    The line is clamped to ``[0, line_count - 1]`` and the column to
    ``[0, len(line)]``.
    """
    lines = document_lines(text)
    line = min(max(position.line, 0), len(lines) - 1)
    column = min(max(position.column, 0), len(lines[line]))
    return LinePosition(line, column)
