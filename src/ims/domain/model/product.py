"""Product entity.

A product is created once by the caller and handed to an Inventory, which
then owns it.  Only the stock level changes after creation.
"""

from __future__ import annotations

from decimal import Decimal

from ims.domain.exceptions import InvalidArgumentError
from ims.domain.model.value_objects import Money


class Product:
    """A stocked item: identifier, name, price and quantity on hand.

    ``id``, ``name`` and ``price`` are read-only.  ``stock`` changes only
    through ``set_stock()``, and the change is visible to every holder of
    the reference.

    Equality is identity: two products with identical fields are still two
    different products.
    """

    __slots__ = ("_id", "_name", "_price", "_stock")

    def __init__(
        self,
        id: str,
        name: str,
        price: Money | Decimal | str | int,
        stock: int = 0,
    ) -> None:
        if not isinstance(price, Money):
            price = Money.of(price)
        _check_stock(stock)
        self._id = id
        self._name = name
        self._price = price
        self._stock = stock

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def price(self) -> Money:
        return self._price

    @property
    def stock(self) -> int:
        return self._stock

    def set_stock(self, new_stock: int) -> None:
        """Replace the stock level."""
        _check_stock(new_stock)
        self._stock = new_stock

    def __repr__(self) -> str:
        return (
            f"Product(id={self._id!r}, name={self._name!r}, "
            f"price={self._price}, stock={self._stock})"
        )


def _check_stock(stock: int) -> None:
    if isinstance(stock, bool) or not isinstance(stock, int):
        raise InvalidArgumentError(
            f"Stock must be an integer, got {type(stock).__name__}"
        )
    if stock < 0:
        raise InvalidArgumentError(f"Stock cannot be negative, got {stock}")
