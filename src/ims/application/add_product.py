"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from ims.application.context import AppContext
from ims.application.dto import ProductDTO
from ims.application.result import ErrorKind, Failure, Result, Success
from ims.application.validators import (
    InputError,
    parse_price,
    parse_product_id,
    parse_stock,
    require_text,
)
from ims.domain.exceptions import InvalidArgumentError
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money

LOGGER = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, context: AppContext) -> None:
        self._context = context

    def handle(self, product_id: str, name: str, price: str, stock: str) -> Result[ProductDTO]:
        """Add a new product to the inventory from raw form input."""
        try:
            pid = parse_product_id(product_id)
            clean_name = require_text(name, "Product name")
            amount = parse_price(price)
            units = parse_stock(stock)
        except InputError as exc:
            LOGGER.warning("Add product rejected: %s", exc)
            return Failure(ErrorKind.INVALID_INPUT, str(exc))

        try:
            product = Product(
                id=pid,
                name=clean_name,
                price=Money.of(amount, self._context.currency),
                stock=units,
            )
            self._context.inventory.add_product(product)
        except InvalidArgumentError as exc:
            LOGGER.warning("Add product rejected: %s", exc)
            return Failure(ErrorKind.INVALID_ARGUMENT, str(exc))

        LOGGER.info("Product %s '%s' added at %s", product.id, product.name, product.price)
        return Success(ProductDTO.from_product(product))
