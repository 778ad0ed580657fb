"""Application service: Find Product use case (query)."""

from __future__ import annotations

from ims.application.context import AppContext
from ims.application.dto import ProductDTO
from ims.application.result import ErrorKind, Failure, Result, Success
from ims.application.validators import InputError, parse_product_id


class FindProductHandler:

    def __init__(self, context: AppContext) -> None:
        self._context = context

    def handle(self, product_id: str) -> Result[ProductDTO]:
        try:
            pid = parse_product_id(product_id)
        except InputError as exc:
            return Failure(ErrorKind.INVALID_INPUT, str(exc))

        product = self._context.inventory.get_product_by_id(pid)
        if product is None:
            return Failure(ErrorKind.NOT_FOUND, f"Product with ID '{pid}' not found")
        return Success(ProductDTO.from_product(product))
