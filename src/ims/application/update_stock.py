"""Application service: Update Stock use case."""

from __future__ import annotations

import logging

from ims.application.context import AppContext
from ims.application.dto import ProductDTO
from ims.application.result import ErrorKind, Failure, Result, Success
from ims.application.validators import InputError, parse_product_id, parse_stock
from ims.domain.exceptions import InvalidArgumentError

LOGGER = logging.getLogger(__name__)


class UpdateStockHandler:

    def __init__(self, context: AppContext) -> None:
        self._context = context

    def handle(self, product_id: str, stock: str) -> Result[ProductDTO]:
        """Set a product's stock level.

        The new level is seen by every order that references the product,
        since orders hold the product itself rather than a copy.
        """
        try:
            pid = parse_product_id(product_id)
            units = parse_stock(stock)
        except InputError as exc:
            LOGGER.warning("Stock update rejected: %s", exc)
            return Failure(ErrorKind.INVALID_INPUT, str(exc))

        product = self._context.inventory.get_product_by_id(pid)
        if product is None:
            LOGGER.warning("Stock update rejected: unknown product %s", pid)
            return Failure(ErrorKind.NOT_FOUND, f"Product with ID '{pid}' not found")

        try:
            product.set_stock(units)
        except InvalidArgumentError as exc:
            LOGGER.warning("Stock update rejected: %s", exc)
            return Failure(ErrorKind.INVALID_ARGUMENT, str(exc))

        LOGGER.info("Stock for %s set to %d", product.id, product.stock)
        return Success(ProductDTO.from_product(product))
