# Area: Shared
"""
car_counter.cli — Command-line interface
========================================

Provides the CLI entry point for playing in a terminal.

Usage:
    python -m car_counter                         # Play with defaults
    python -m car_counter --config config.json    # Custom difficulty
    python -m car_counter --seed 7 --no-save      # Reproducible, nothing saved

Settings are merged in this order (later wins):
    1. Config file (--config, JSON)
    2. Environment variables (a .env file in the working directory is read)
    3. CLI flags
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from .errors import ConfigError

# Environment variable → config key
ENV_MAPPINGS = {
    "CAR_COUNTER_DB": "db_path",
    "CAR_COUNTER_LOG_FILE": "log_file",
    "CAR_COUNTER_SEED": "seed",
    "CAR_COUNTER_ICON": "icon",
    "CAR_COUNTER_MIN_ITEMS": "min_items",
    "CAR_COUNTER_START_MAX_ITEMS": "start_max_items",
    "CAR_COUNTER_MAX_ITEMS_CAP": "max_items_cap",
    "CAR_COUNTER_MAX_ITEMS_INCREMENT": "max_items_increment",
    "CAR_COUNTER_START_TIME_LIMIT": "start_time_limit",
    "CAR_COUNTER_MIN_TIME_LIMIT": "min_time_limit",
    "CAR_COUNTER_TIME_DECREMENT": "time_decrement",
}

# Config keys whose environment values are integers
INT_KEYS = {
    "seed",
    "min_items",
    "start_max_items",
    "max_items_cap",
    "max_items_increment",
    "start_time_limit",
    "min_time_limit",
    "time_decrement",
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="car-counter",
        description="Car Counter - count the cars before the time runs out",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  car-counter
  car-counter --config config.json
  car-counter --seed 7 --no-save
  CAR_COUNTER_START_TIME_LIMIT=20 car-counter
        """,
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--db",
        type=str,
        help="SQLite file holding the best score (default: car_counter.db)",
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for the item counts (reproducible games)",
    )

    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Keep the best score in memory only",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="JSON log file (default: car_counter.log)",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log at DEBUG level",
    )

    return parser.parse_args(argv)


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """
    Load config from file and environment.

    Raises:
        ConfigError: If the file is not valid JSON or an environment
            value that must be an integer is not one
    """
    config: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError([f"config file not found: {config_path}"])
        try:
            with open(path, encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError([f"{config_path}: {e}"]) from e
        if not isinstance(config, dict):
            raise ConfigError([f"{config_path}: expected a JSON object"])

    load_dotenv()
    errors = []
    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            value: Any = os.environ[env_key]
            if config_key in INT_KEYS:
                try:
                    value = int(value)
                except ValueError:
                    errors.append(f"{env_key}: expected an integer, got {value!r}")
                    continue
            config[config_key] = value
    if errors:
        raise ConfigError(errors)

    return config


def apply_args(config: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    """Override config values with CLI flags that were given."""
    if args.db:
        config["db_path"] = args.db
    if args.seed is not None:
        config["seed"] = args.seed
    if args.no_save:
        config["no_save"] = True
    if args.log_file:
        config["log_file"] = args.log_file
    if args.verbose:
        config["log_level"] = logging.DEBUG
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    # Import runner here so --help works without touching the database
    from .runner import GameRunner

    try:
        config = apply_args(load_config(args.config), args)
        runner = GameRunner(config=config)
    except ConfigError as e:
        print(e.format_error_log(), file=sys.stderr)
        return 1

    runner.run()
    return 0
