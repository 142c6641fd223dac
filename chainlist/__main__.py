"""Demo entry point."""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from .demo.demo_config import DemoConfig
from .demo.scenarios import SCENARIOS, run_scenarios


def load_config(path: Path | None, scenarios: list[str], verbose: bool) -> DemoConfig:
    """Load the config file, then apply command line overrides."""
    if path is None:
        config = DemoConfig()
    else:
        config = DemoConfig.model_validate_json(path.read_text())

    overrides: dict[str, object] = {}
    if scenarios:
        overrides["scenarios"] = scenarios
    if verbose:
        overrides["log_level"] = "DEBUG"
    if overrides:
        config = DemoConfig.model_validate({**config.model_dump(), **overrides})
    return config


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="chainlist - copy-on-write linked list demonstrations")
    parser.add_argument("--config", type=Path, help="JSON file with demo settings")
    parser.add_argument("--scenario", action="append", default=[], help="Scenario to run (repeatable)")
    parser.add_argument("--list", action="store_true", help="List available scenarios")
    parser.add_argument("--verbose", action="store_true", help="Log copy-on-write activity")

    args = parser.parse_args(argv)

    if args.list:
        for name, scenario in SCENARIOS.items():
            print(f"{name}: {scenario.__doc__}")
        return 0

    try:
        config = load_config(args.config, args.scenario, args.verbose)
    except (OSError, ValidationError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    for name, lines in run_scenarios(config):
        print(f"== {name}")
        for line in lines:
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
