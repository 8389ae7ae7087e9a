"""Order management with named operations."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

LOGGER = logging.getLogger(__name__)

ETA_MINUTES = 20


def placed_message(order: str, order_id: str) -> str:
    return f"You have successfully ordered {order} ({order_id})"


def tracking_message(order_id: str) -> str:
    return f"Your order {order_id} will arrive in {ETA_MINUTES} minutes."


def canceled_message(order_id: str) -> str:
    return f"You have canceled your order {order_id}"


@dataclass
class OrderManager:
    """Manager that exposes each order operation as its own method."""

    orders: list[str] = field(default_factory=list)

    def place_order(self, order: str, order_id: str) -> str:
        self.orders.append(order_id)
        LOGGER.debug("Placed %s as %s (%d orders)", order, order_id, len(self.orders))
        return placed_message(order, order_id)

    def track_order(self, order_id: str) -> str:
        LOGGER.debug("Tracking %s", order_id)
        return tracking_message(order_id)

    def cancel_order(self, order_id: str) -> str:
        self.orders = [order for order in self.orders if order != order_id]
        LOGGER.debug("Canceled %s (%d orders left)", order_id, len(self.orders))
        return canceled_message(order_id)

    def list_orders(self) -> tuple[str, ...]:
        return tuple(self.orders)
