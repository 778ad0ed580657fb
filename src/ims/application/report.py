"""Application service: read-only report over the inventory.

Renders products and placed orders either as text lines or as table rows.
Nothing here mutates state, so repeated calls without intervening changes
return equal content.
"""

from __future__ import annotations

from decimal import Decimal

from ims.application.dto import (
    DEFAULT_DATE_FORMAT,
    OrderRowDTO,
    ProductRowDTO,
    ReportSummaryDTO,
)
from ims.domain.model.inventory import Inventory
from ims.domain.model.value_objects import Money


class ReportHandler:

    def __init__(
        self,
        inventory: Inventory,
        date_format: str = DEFAULT_DATE_FORMAT,
        currency: str = "USD",
    ) -> None:
        self._inventory = inventory
        self._date_format = date_format
        self._currency = currency

    # --- Text lines -----------------------------------------------------------

    def product_lines(self) -> list[str]:
        """One ``name (id)`` line per product."""
        return [f"{p.name} ({p.id})" for p in self._inventory.get_all_products()]

    def order_lines(self) -> list[str]:
        """One ``Order on <date> | Total: $<total>`` line per placed order."""
        return [
            f"Order on {row.date} | Total: {row.total}" for row in self.order_rows()
        ]

    # --- Table rows -----------------------------------------------------------

    def product_rows(self) -> list[ProductRowDTO]:
        return [
            ProductRowDTO(id=p.id, name=p.name, price=str(p.price), stock=p.stock)
            for p in self._inventory.get_all_products()
        ]

    def order_rows(self) -> list[OrderRowDTO]:
        return [
            OrderRowDTO(
                date=o.created_at.strftime(self._date_format),
                total=str(o.total_price),
            )
            for o in self._inventory.get_all_orders()
        ]

    # --- Totals ---------------------------------------------------------------

    def summary(self) -> ReportSummaryDTO:
        """Counts plus the placed orders' grand total.

        Orders in different currencies are totalled separately and joined
        with `` + ``; with no orders the total is zero in the report currency.
        The grand total is a plain Decimal sum, so it is not bound by the
        per-order amount limit.
        """
        totals: dict[str, Decimal] = {}
        for order in self._inventory.get_all_orders():
            if order.currency is None:
                continue
            totals[order.currency] = (
                totals.get(order.currency, Decimal("0")) + order.total_price.amount
            )
        orders_total = " + ".join(f"${amount:.2f}" for amount in totals.values())
        return ReportSummaryDTO(
            product_count=self._inventory.product_count,
            order_count=self._inventory.order_count,
            units_in_stock=sum(p.stock for p in self._inventory.get_all_products()),
            orders_total=orders_total or str(Money.zero(self._currency)),
        )
