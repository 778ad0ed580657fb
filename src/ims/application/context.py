"""Application context: the single owner of session state.

One live Inventory and one in-progress Order, passed explicitly to every
handler instead of living in module or window globals.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ims.application.dto import DEFAULT_DATE_FORMAT
from ims.domain.model.inventory import Inventory
from ims.domain.model.order import Order


@dataclass
class AppContext:
    inventory: Inventory = field(default_factory=Inventory)
    current_order: Order = field(default_factory=Order)
    currency: str = "USD"
    date_format: str = DEFAULT_DATE_FORMAT

    def start_new_order(self) -> Order:
        """Drop the in-progress order and begin an empty one."""
        self.current_order = Order()
        return self.current_order
