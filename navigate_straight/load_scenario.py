"""Load a caret and a symbol's declarations from a YAML scenario file.

Example::

    caret: {file: src/Foo.cs, line: 15, column: 4}
    locations:
      - file: src/Foo.cs
        start: {line: 10, column: 0}
        end: {line: 20, column: 1}
      - file: obj/Foo.g.cs
        start: {line: 1}
        end: {line: 5, column: 1}
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from navigate_straight.line_position import LinePosition
from navigate_straight.source_span import SourceSpan


class ScenarioError(ValueError):
    """Raised when a scenario file is missing or malformed."""


@dataclass
class Scenario:
    """A caret and the raw locations of the symbol under it."""

    caret_file: str
    caret_position: LinePosition
    spans: list[SourceSpan]


def load_scenario(path: Path) -> Scenario:
    """Load and validate a scenario YAML file."""
    if not path.is_file():
        msg = f"Scenario file not found: {path}"
        raise ScenarioError(msg)
    try:
        doc = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        msg = f"Cannot read {path} as UTF-8 YAML: {e}"
        raise ScenarioError(msg) from e
    if not isinstance(doc, dict):
        msg = f"Expected a mapping at the top of {path}"
        raise ScenarioError(msg)
    return parse_scenario(doc)


def parse_scenario(doc: dict[str, Any]) -> Scenario:
    """Build a Scenario from parsed YAML."""
    caret = doc.get("caret")
    if not isinstance(caret, dict) or not caret.get("file"):
        msg = "Scenario needs a 'caret' with a 'file'"
        raise ScenarioError(msg)

    raw_locations = doc.get("locations") or []
    if not isinstance(raw_locations, list):
        msg = "'locations' must be a list"
        raise ScenarioError(msg)

    return Scenario(
        caret_file=str(caret["file"]),
        caret_position=_position(caret, "caret"),
        spans=[_span(raw, i) for i, raw in enumerate(raw_locations)],
    )


def _span(raw: object, index: int) -> SourceSpan:
    where = f"locations[{index}]"
    if not isinstance(raw, dict):
        msg = f"{where} must be a mapping"
        raise ScenarioError(msg)
    file_path = raw.get("file")
    return SourceSpan(
        file_path=str(file_path) if file_path else None,
        start=_position(raw.get("start"), f"{where}.start"),
        end=_position(raw.get("end"), f"{where}.end"),
        in_source=_flag(raw.get("in_source", True), f"{where}.in_source"),
    )


def _flag(raw: object, where: str) -> bool:
    if not isinstance(raw, bool):
        msg = f"{where} must be true or false"
        raise ScenarioError(msg)
    return raw


def _position(raw: object, where: str) -> LinePosition:
    if not isinstance(raw, dict) or "line" not in raw:
        msg = f"{where} needs a 'line'"
        raise ScenarioError(msg)
    line, column = raw["line"], raw.get("column", 0)
    if not (_is_int(line) and _is_int(column)):
        msg = f"{where} has a non-integer line or column"
        raise ScenarioError(msg)
    return LinePosition(line, column)


def _is_int(value: object) -> bool:
    # bool is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)
