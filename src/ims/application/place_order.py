"""Application service: Place Order use case.

Hands the in-progress order to the inventory and starts a fresh one.
Stock is not reduced by placing an order.
"""

from __future__ import annotations

import logging

from ims.application.context import AppContext
from ims.application.dto import OrderDTO
from ims.application.result import ErrorKind, Failure, Result, Success
from ims.domain.exceptions import InvalidArgumentError

LOGGER = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(self, context: AppContext) -> None:
        self._context = context

    def handle(self) -> Result[OrderDTO]:
        order = self._context.current_order
        if order.is_empty:
            LOGGER.warning("Place order rejected: current order has no items")
            return Failure(ErrorKind.INVALID_INPUT, "Order must contain at least one item")

        try:
            self._context.inventory.place_order(order)
        except InvalidArgumentError as exc:
            LOGGER.warning("Place order rejected: %s", exc)
            return Failure(ErrorKind.INVALID_ARGUMENT, str(exc))

        self._context.start_new_order()
        LOGGER.info(
            "Order placed with %d line(s), total %s (orders on record: %d)",
            len(order), order.total_price, self._context.inventory.order_count,
        )
        return Success(OrderDTO.from_order(order, self._context.date_format))
