"""Order manager with a single command entry point."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from engine.commands import Command


@dataclass
class CommandOrderManager:
    orders: list[str] = field(default_factory=list)

    def execute(self, command: Command, *args: Any) -> Any:
        return command.execute(self.orders, *args)

    def list_orders(self) -> tuple[str, ...]:
        return tuple(self.orders)
