#!/usr/bin/env python3
"""
Order manager demo - named methods versus command dispatch.

Runs the same place/track/cancel sequence against two managers: one that
exposes a method per operation, and one that only knows how to execute
command objects.

Usage:
    # Built-in scenario, both variants
    python run_order_demo.py

    # Scenario from a YAML file, command variant only
    python run_order_demo.py examples/order_demo.yml --variant command
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml

sys.path.insert(0, str(Path(__file__).parent / "src"))

from engine.command_manager import CommandOrderManager
from engine.commands import build_command
from engine.order_manager import OrderManager
from utils.logging_config import setup_logging

LOGGER = logging.getLogger("order_demo")

DEFAULT_SCENARIO = {
    "direct": [
        {"action": "place", "order": "yuca", "id": "311"},
        {"action": "track", "id": "311"},
        {"action": "cancel", "id": "311"},
    ],
    "command": [
        {"action": "place", "order": "Pad Thai", "id": "1234"},
        {"action": "track", "id": "1234"},
        {"action": "cancel", "id": "1234"},
    ],
}


def load_config(config_file: str) -> dict:
    with open(config_file, "r") as handle:
        config = yaml.safe_load(handle) or {}
    if not isinstance(config, dict):
        raise ValueError(
            f"Scenario file '{config_file}' must map variant names to step lists"
        )
    return config


def _scenario_steps(config: dict, variant: str) -> list[dict]:
    steps = config.get(variant, [])
    if not isinstance(steps, list):
        raise ValueError(f"Scenario section '{variant}' must be a list of steps")
    return steps


def _step_args(step: dict) -> tuple[str, ...]:
    # IDs may come back from YAML as ints.
    order_id = str(step["id"])
    if step["action"] == "place":
        return (str(step["order"]), order_id)
    return (order_id,)


def run_direct_scenario(steps, manager: OrderManager | None = None) -> OrderManager:
    """Apply each step through the manager's named methods."""
    manager = manager or OrderManager()
    for step in steps:
        action = step["action"]
        args = _step_args(step)
        if action == "place":
            print(manager.place_order(*args))
        elif action == "track":
            print(manager.track_order(*args))
        elif action == "cancel":
            print(manager.cancel_order(*args))
        else:
            raise ValueError(f"Unknown action '{action}' in direct scenario")
    return manager


def run_command_scenario(
    steps, manager: CommandOrderManager | None = None
) -> CommandOrderManager:
    """Build a command for each step and hand it to ``execute``."""
    manager = manager or CommandOrderManager()
    for step in steps:
        command = build_command(step["action"], *_step_args(step))
        manager.execute(command)
    return manager


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Command pattern order demo")
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to scenario file (YAML); built-in scenario if omitted",
    )
    parser.add_argument(
        "--variant",
        default="both",
        choices=["direct", "command", "both"],
        help="Which manager to run",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level)

    if args.config is None:
        config = DEFAULT_SCENARIO
    elif not Path(args.config).exists():
        print(f"Error: Config file '{args.config}' not found!")
        return 1
    else:
        config = load_config(args.config)

    if args.variant in ("direct", "both"):
        print("=== Direct manager ===")
        manager = run_direct_scenario(_scenario_steps(config, "direct"))
        print(f"Orders: {list(manager.list_orders())}")

    if args.variant in ("command", "both"):
        print("=== Command manager ===")
        steps = _scenario_steps(config, "command")
        LOGGER.debug("Dispatching %d commands", len(steps))
        manager = run_command_scenario(steps)
        print(f"Orders: {list(manager.list_orders())}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
