"""Application services: queries and resets on the in-progress order."""

from __future__ import annotations

import logging

from ims.application.context import AppContext
from ims.application.dto import OrderDTO
from ims.application.result import Result, Success

LOGGER = logging.getLogger(__name__)


class ShowCurrentOrderHandler:

    def __init__(self, context: AppContext) -> None:
        self._context = context

    def handle(self) -> Result[OrderDTO]:
        return Success(
            OrderDTO.from_order(self._context.current_order, self._context.date_format)
        )


class DiscardOrderHandler:

    def __init__(self, context: AppContext) -> None:
        self._context = context

    def handle(self) -> Result[OrderDTO]:
        """Throw away the in-progress order.  Placed orders are unaffected."""
        dropped = len(self._context.current_order)
        order = self._context.start_new_order()
        LOGGER.info("Discarded current order (%d line(s))", dropped)
        return Success(OrderDTO.from_order(order, self._context.date_format))
