"""Command line entry point: resolve a navigation scenario and print the result."""

import argparse
import logging
from pathlib import Path

from navigate_straight.caret_context import build_caret_context
from navigate_straight.load_config import ConfigError, generated_suffixes, load_config
from navigate_straight.load_scenario import ScenarioError, load_scenario
from navigate_straight.navigation_resolver import resolve
from navigate_straight.source_span import to_declaration_locations


def run(args: argparse.Namespace) -> int:
    """Resolve the scenario named by the parsed arguments."""
    try:
        config = load_config(args.config)
    except ConfigError as e:
        msg = f"Invalid config: {e}"
        raise SystemExit(msg) from e
    try:
        scenario = load_scenario(args.scenario)
    except ScenarioError as e:
        msg = f"Invalid scenario: {e}"
        raise SystemExit(msg) from e

    locations = to_declaration_locations(scenario.spans, generated_suffixes(config))
    caret = build_caret_context(
        scenario.caret_file, scenario.caret_position, locations
    )
    print(resolve(locations, caret))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run."""
    ap = argparse.ArgumentParser(
        description=(
            "Decide where go to definition should jump for a caret and a "
            "symbol's declaration locations."
        ),
    )
    ap.add_argument(
        "scenario",
        type=Path,
        help="YAML file with a 'caret' and the symbol's 'locations'",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log each resolution step",
    )
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
