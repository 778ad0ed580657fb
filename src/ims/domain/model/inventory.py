"""Inventory aggregate: the in-memory store of products and placed orders.

Products are keyed by id; placed orders are kept in the order they were
placed and are never removed.
"""

from __future__ import annotations

from ims.domain.exceptions import InvalidArgumentError
from ims.domain.model.order import Order
from ims.domain.model.product import Product


class Inventory:
    """Aggregate root owning the product catalogue and the order history.

    Invariants:
    - no two products share an id
    - the order history never contains ``None``

    Products and orders are shared by reference with whoever built them.

    Not safe for concurrent mutation: there is no locking, so callers that
    share an Inventory between threads must synchronise externally.
    """

    def __init__(self) -> None:
        self._products: dict[str, Product] = {}
        self._orders: list[Order] = []

    # --- Products -------------------------------------------------------------

    def add_product(self, product: Product | None) -> None:
        if product is None:
            raise InvalidArgumentError("Product is required")
        if product.id in self._products:
            raise InvalidArgumentError(f"Product ID '{product.id}' already exists")
        self._products[product.id] = product

    def get_product_by_id(self, product_id: str) -> Product | None:
        """Return the stored product, or None for an unknown id."""
        return self._products.get(product_id)

    def get_all_products(self) -> list[Product]:
        """Return every stored product.  Callers must not rely on the order."""
        return list(self._products.values())

    # --- Orders ---------------------------------------------------------------

    def place_order(self, order: Order | None) -> None:
        """Append an order to the history.

        Stock levels are left untouched: placing an order does not reduce
        the stock of the products it contains.
        """
        if order is None:
            raise InvalidArgumentError("Order is required")
        self._orders.append(order)

    def get_all_orders(self) -> list[Order]:
        """Return placed orders, oldest first."""
        return list(self._orders)

    # --- Computed properties --------------------------------------------------

    @property
    def product_count(self) -> int:
        return len(self._products)

    @property
    def order_count(self) -> int:
        return len(self._orders)
