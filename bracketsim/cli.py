#!/usr/bin/env python
"""
Bracket Simulator - CLI

Usage:
    bracket [SEED]

Simulates every configured region from SEED (or the current time) and
prints the bracket to stdout. There are no flags: the first argument is
always the seed, so "-h" or "--seed" is rejected like any other non-integer.
Arguments after the seed are ignored.
"""
import re
import sys
import time
from typing import List, Optional

from pydantic import ValidationError

from bracketsim.bracket import BracketSimulator, BracketRenderer
from bracketsim.config import Settings
from bracketsim.exceptions import ConfigurationError, SeedArgumentError
from bracketsim.utils.observability import Logger, initialize_observability

logger = Logger(__name__)

# Optional sign followed by ASCII digits, nothing else
SEED_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_seed(value: Optional[str]) -> int:
    """Integer seed from the command line, or the current Unix time."""
    if value is None:
        return int(time.time())
    if not SEED_PATTERN.fullmatch(value):
        raise SeedArgumentError(value)
    return int(value)


def load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e


def cmd_simulate(value: Optional[str], settings: Settings) -> int:
    """Simulate and print the tournament."""
    try:
        seed = parse_seed(value)
    except SeedArgumentError as e:
        logger.log_error("invalid_seed", value=e.value)
        print(f"ERROR: {e}")
        return 1

    logger.with_run_id()
    logger.log_event("simulation_started", seed=seed)
    simulator = BracketSimulator(seed, settings=settings.simulation)
    result = simulator.run()
    print(BracketRenderer().render_text(result))

    stats = result.summary()
    logger.log_event(
        "simulation_finished",
        seed=seed,
        upsets=stats.upsets,
        champions=stats.champions,
    )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    value = argv[0] if argv else None

    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"ERROR: invalid configuration\n{e}")
        return 1

    observability = settings.observability
    initialize_observability(
        environment=observability.environment,
        log_level=observability.log_level,
        log_format=observability.log_format,
    )

    if len(argv) > 1:
        logger.log_event("arguments_ignored", arguments=argv[1:])

    return cmd_simulate(value, settings)


if __name__ == "__main__":
    sys.exit(main())
