"""Command objects for the order manager.

Each factory returns a :class:`Command` wrapping one behavior. The behavior
receives the manager's order list as its first argument, followed by any
extra arguments passed to ``CommandOrderManager.execute``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from engine.order_manager import canceled_message, placed_message, tracking_message

LOGGER = logging.getLogger(__name__)


class UnknownCommandError(ValueError):
    """Raised when a command name has no registered factory."""


@dataclass(frozen=True)
class Command:
    execute: Callable[..., Any]


def place_order_command(order: str, order_id: str) -> Command:
    def place(orders: list[str], *args: Any) -> None:
        orders.append(order_id)
        LOGGER.debug("Command placed %s (%d orders)", order_id, len(orders))
        print(placed_message(order, order_id))

    return Command(place)


def cancel_order_command(order_id: str) -> Command:
    """Return a command that announces the cancellation of ``order_id``.

    The filter compares an ``id`` attribute that plain string identifiers do
    not have, and the result is only bound locally. The manager's list is
    never modified through this command, unlike ``OrderManager.cancel_order``.
    """

    def cancel(orders: list[str], *args: Any) -> None:
        orders = [order for order in orders if getattr(order, "id", None) != order_id]
        LOGGER.debug("%d orders visible after cancel filter", len(orders))
        print(canceled_message(order_id))

    return Command(cancel)


def track_order_command(order_id: str) -> Command:
    def track(*args: Any) -> None:
        LOGGER.debug("Command tracking %s", order_id)
        print(tracking_message(order_id))

    return Command(track)


COMMAND_FACTORIES: dict[str, Callable[..., Command]] = {
    "place": place_order_command,
    "track": track_order_command,
    "cancel": cancel_order_command,
}


def build_command(name: str, *args: Any) -> Command:
    factory = COMMAND_FACTORIES.get(name)
    if factory is None:
        raise UnknownCommandError(
            f"Unknown command '{name}'. Expected one of: {', '.join(COMMAND_FACTORIES)}"
        )
    return factory(*args)
