"""Data Transfer Objects returned by handlers.

Prices and dates arrive pre-formatted, so the CLI never touches Money,
Product or Order directly.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.model.order import Order
from ims.domain.model.product import Product

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M UTC"


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    price: str  # formatted, e.g. "$15.00"
    stock: int

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=str(product.price),
            stock=product.stock,
        )


@dataclass(frozen=True)
class OrderLineDTO:
    """A single line of an order as displayed to the user."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """A complete order as displayed to the user."""

    created_at: str
    items: list[OrderLineDTO]
    total: str

    @property
    def is_empty(self) -> bool:
        return not self.items

    @staticmethod
    def from_order(order: Order, date_format: str = DEFAULT_DATE_FORMAT) -> OrderDTO:
        return OrderDTO(
            created_at=order.created_at.strftime(date_format),
            items=[
                OrderLineDTO(
                    product_id=line.product.id,
                    product_name=line.product.name,
                    quantity=line.quantity.value,
                    unit_price=str(line.product.price),
                    line_total=str(line.line_total),
                )
                for line in order.lines
            ],
            total=str(order.total_price),
        )


@dataclass(frozen=True)
class ProductRowDTO:
    """Tabular report row: id, name, price, stock."""

    id: str
    name: str
    price: str
    stock: int


@dataclass(frozen=True)
class OrderRowDTO:
    """Tabular report row: date, total."""

    date: str
    total: str


@dataclass(frozen=True)
class ReportSummaryDTO:
    product_count: int
    order_count: int
    units_in_stock: int
    orders_total: str
