"""Application service: Record Transaction use case.

Writes the stock movement, then applies its effect to the product's
quantity through the product repository. The two writes are separate
store operations:

  1. the transaction is inserted;
  2. the product's stock is set to the new quantity, provided it still
     holds the quantity read at the start.

The condition on step 2 means two movements racing on the same product
cannot overwrite each other: the later one fails instead. If step 2
fails the transaction from step 1 is deleted again so history and stock
stay in step. A crash between the two steps still leaves them
inconsistent.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime

from stockwise.application.validation import require_positive
from stockwise.domain.exceptions import (
    EntityNotFoundError,
    StoreOperationError,
    ValidationError,
)
from stockwise.domain.model.transaction import Transaction, TransactionType
from stockwise.domain.repository.product_repository import ProductRepository
from stockwise.domain.repository.transaction_repository import TransactionRepository

logger = logging.getLogger(__name__)


class RecordTransactionHandler:

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._transaction_repo = transaction_repo
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        transaction_type: TransactionType,
        quantity: int,
        timestamp: datetime | None = None,
        transaction_id: str | None = None,
    ) -> Transaction:
        require_positive(quantity, "Transaction quantity")

        product = self._product_repo.find_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        new_quantity = product.quantity + transaction_type.stock_delta(quantity)
        if new_quantity < 0:
            raise ValidationError(
                f"Insufficient stock for {product.name} "
                f"(need {quantity}, have {product.quantity})"
            )

        transaction = Transaction(
            id=transaction_id or uuid.uuid4().hex[:12],
            product=product,
            type=transaction_type,
            quantity=quantity,
            timestamp=timestamp or datetime.now(),
        )
        if self._transaction_repo.find_by_id(transaction.id) is not None:
            raise ValidationError(f"Transaction '{transaction.id}' already exists")
        if not self._transaction_repo.add(transaction):
            raise StoreOperationError(f"Transaction '{transaction.id}' could not be saved")

        if not self._product_repo.update_quantity(product_id, product.quantity, new_quantity):
            if not self._transaction_repo.delete(transaction.id):
                logger.error(
                    "Transaction %s recorded but product %s was not updated",
                    transaction.id, product_id,
                )
            raise StoreOperationError(
                f"Stock for product '{product_id}' could not be updated; "
                "stock may have changed meanwhile"
            )
        product.quantity = new_quantity
        return transaction
