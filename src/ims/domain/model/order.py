"""Order aggregate.

An order is created empty, grows through ``add_item()`` and is then handed
to the Inventory.  Nothing removes items once they are added.

Lines are keyed by product id, not by object identity: adding two
different Product objects that share an id accumulates into one line,
which keeps the product reference that was added first.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from types import MappingProxyType

from ims.domain.exceptions import InvalidArgumentError
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class OrderLine:
    """One product and how many units of it were ordered."""

    product: Product
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value


class Order:
    """Aggregate root for a set of (product, quantity) pairs.

    The total is derived from current product prices on every access;
    nothing is cached or snapshotted.
    """

    def __init__(self) -> None:
        self._created_at = datetime.now(timezone.utc)
        self._lines: dict[str, OrderLine] = {}

    @property
    def created_at(self) -> datetime:
        return self._created_at

    # --- Mutation -------------------------------------------------------------

    def add_item(self, product: Product | None, quantity: int) -> None:
        """Add ``quantity`` units of ``product``, accumulating on repeats.

        Raises InvalidArgumentError for a missing product, a quantity that
        is not a positive integer, a price in another currency than the
        lines already present, or a total too large to represent.  A
        rejected call changes nothing.
        """
        if product is None:
            raise InvalidArgumentError("Product is required")
        qty = Quantity(quantity)

        currency = self.currency
        if currency is not None and product.price.currency != currency:
            raise InvalidArgumentError(
                f"Product {product.id} is priced in {product.price.currency}, "
                f"but this order is in {currency}"
            )

        existing = self._lines.get(product.id)
        if existing is None:
            line = OrderLine(product=product, quantity=qty)
        else:
            line = OrderLine(product=existing.product, quantity=existing.quantity + qty)

        pending = dict(self._lines)
        pending[product.id] = line
        # Raises before anything is committed.
        self._sum(pending.values())
        self._lines = pending

    # --- Queries --------------------------------------------------------------

    @property
    def items(self) -> Mapping[Product, int]:
        """Read-only snapshot of product -> quantity."""
        return MappingProxyType(
            {line.product: line.quantity.value for line in self._lines.values()}
        )

    @property
    def lines(self) -> tuple[OrderLine, ...]:
        return tuple(self._lines.values())

    def quantity_of(self, product: Product | str) -> int:
        product_id = product if isinstance(product, str) else product.id
        line = self._lines.get(product_id)
        return line.quantity.value if line is not None else 0

    @property
    def currency(self) -> str | None:
        """Currency of the lines, or None while the order is empty."""
        for line in self._lines.values():
            return line.product.price.currency
        return None

    @property
    def total_price(self) -> Money:
        return self._sum(self._lines.values())

    @staticmethod
    def _sum(lines: Iterable[OrderLine]) -> Money:
        total: Money | None = None
        for line in lines:
            total = line.line_total if total is None else total + line.line_total
        return total if total is not None else Money.zero()

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)

    def __repr__(self) -> str:
        return (
            f"Order(created_at={self._created_at.isoformat()}, "
            f"lines={len(self._lines)}, total={self.total_price})"
        )
