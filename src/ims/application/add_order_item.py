"""Application service: Add Order Item use case.

Resolves a product id against the inventory and adds it to the
in-progress order held by the context.
"""

from __future__ import annotations

import logging

from ims.application.context import AppContext
from ims.application.dto import OrderDTO
from ims.application.result import ErrorKind, Failure, Result, Success
from ims.application.validators import InputError, parse_product_id, parse_quantity
from ims.domain.exceptions import InvalidArgumentError

LOGGER = logging.getLogger(__name__)


class AddOrderItemHandler:

    def __init__(self, context: AppContext) -> None:
        self._context = context

    def handle(self, product_id: str, quantity: str) -> Result[OrderDTO]:
        try:
            pid = parse_product_id(product_id)
            qty = parse_quantity(quantity)
        except InputError as exc:
            LOGGER.warning("Order item rejected: %s", exc)
            return Failure(ErrorKind.INVALID_INPUT, str(exc))

        product = self._context.inventory.get_product_by_id(pid)
        if product is None:
            LOGGER.warning("Order item rejected: unknown product %s", pid)
            return Failure(ErrorKind.NOT_FOUND, f"Product with ID '{pid}' not found")

        order = self._context.current_order
        try:
            order.add_item(product, qty)
        except InvalidArgumentError as exc:
            LOGGER.warning("Order item rejected: %s", exc)
            return Failure(ErrorKind.INVALID_ARGUMENT, str(exc))

        LOGGER.info(
            "Added %d x %s to current order (now %d)",
            qty, product.id, order.quantity_of(product),
        )
        return Success(OrderDTO.from_order(order, self._context.date_format))
