"""Application service: Checkout use case.

Turns the current cart into an immutable Order exactly once per
successful payment:

    IDLE -> AMOUNT_COMPUTED -> PAYMENT_METHOD_CHOSEN -> PAID
         -> ORDER_RECORDED -> CART_CLEARED

An empty cart or an unknown payment method ends in ABORTED before any
durable side effect.  Those rejections are returned on the outcome, not
raised, so the caller decides how to react.

An order ID is consumed only after a payment label has been produced,
and the cart is cleared only once the Order exists.  Writing the audit
log and the order history is best-effort: a failure there is logged and
reported as a warning, but the order stands.  A failure of the ID
counter is not recoverable and propagates with the cart left intact.

A checkout holds the cart's lock from start to finish, so concurrent
checkouts and cart additions are serialized against it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from pos.domain.exceptions import (
    InvalidPaymentMethod,
    LogStoreUnavailable,
    OrderStoreUnavailable,
)
from pos.domain.model.cart import Cart
from pos.domain.model.order import Order
from pos.domain.model.payment import PaymentMethod, pay
from pos.domain.model.value_objects import Money
from pos.domain.repository.order_id_generator import OrderIdGenerator
from pos.domain.repository.order_log import OrderLog
from pos.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class CheckoutStage(Enum):
    IDLE = "IDLE"
    AMOUNT_COMPUTED = "AMOUNT_COMPUTED"
    PAYMENT_METHOD_CHOSEN = "PAYMENT_METHOD_CHOSEN"
    PAID = "PAID"
    ORDER_RECORDED = "ORDER_RECORDED"
    CART_CLEARED = "CART_CLEARED"
    ABORTED = "ABORTED"


class Rejection(Enum):
    EMPTY_CART_CHECKOUT = "EMPTY_CART_CHECKOUT"
    INVALID_PAYMENT_METHOD = "INVALID_PAYMENT_METHOD"


@dataclass(frozen=True)
class CheckoutOutcome:
    """Result of one checkout attempt.

    Exactly one of ``order`` and ``rejection`` is set.
    """

    stage: CheckoutStage
    order: Order | None = None
    rejection: Rejection | None = None
    message: str = ""
    total: Money | None = None
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return self.order is not None

    @staticmethod
    def placed(order: Order, warnings: list[str]) -> CheckoutOutcome:
        return CheckoutOutcome(
            stage=CheckoutStage.CART_CLEARED,
            order=order,
            message=f"Order #{order.order_id} placed",
            total=order.total,
            warnings=tuple(warnings),
        )

    @staticmethod
    def rejected(
        rejection: Rejection, message: str, total: Money | None = None
    ) -> CheckoutOutcome:
        return CheckoutOutcome(
            stage=CheckoutStage.ABORTED,
            rejection=rejection,
            message=message,
            total=total,
        )


class CheckoutWorkflow:

    def __init__(
        self,
        cart: Cart,
        id_generator: OrderIdGenerator,
        order_log: OrderLog,
        order_repo: OrderRepository,
    ) -> None:
        self._cart = cart
        self._id_generator = id_generator
        self._order_log = order_log
        self._order_repo = order_repo
        # Shared with the cart so no product can be added between the
        # order snapshot and the clear.
        self._lock = cart.lock
        self._stage = CheckoutStage.IDLE

    @property
    def stage(self) -> CheckoutStage:
        """Stage reached by the most recent (or running) checkout."""
        return self._stage

    def execute(self, choice: PaymentMethod | str | int) -> CheckoutOutcome:
        """Check out the whole cart, paying with *choice*."""
        with self._lock:
            self._stage = CheckoutStage.IDLE
            outcome = self._run(choice)
            self._stage = outcome.stage
            return outcome

    def _run(self, choice: PaymentMethod | str | int) -> CheckoutOutcome:
        # Step 1: nothing to sell
        if self._cart.is_empty():
            logger.info("Checkout rejected: cart is empty")
            return CheckoutOutcome.rejected(
                Rejection.EMPTY_CART_CHECKOUT, "Shopping cart is empty"
            )

        # Step 2: amount
        total = self._cart.total()
        self._stage = CheckoutStage.AMOUNT_COMPUTED

        # Step 3: payment method
        try:
            method = PaymentMethod.parse(choice)
        except InvalidPaymentMethod as exc:
            logger.info("Checkout rejected: %s", exc)
            return CheckoutOutcome.rejected(
                Rejection.INVALID_PAYMENT_METHOD, str(exc), total=total
            )
        self._stage = CheckoutStage.PAYMENT_METHOD_CHOSEN

        # Step 4: payment
        label = pay(method, total)
        self._stage = CheckoutStage.PAID

        # Step 5: identity + immutable record.  CounterStoreUnavailable
        # propagates with the cart still intact.
        order_id = self._id_generator.next_id()
        order = Order.place(order_id, self._cart.lines(), label)

        # Step 6: best-effort audit trail and history
        warnings: list[str] = []
        try:
            self._order_log.append(order.order_id, order.payment_method_label)
        except LogStoreUnavailable as exc:
            logger.warning("Order #%d placed but audit log write failed: %s", order_id, exc)
            warnings.append(str(exc))
        try:
            self._order_repo.add(order)
        except OrderStoreUnavailable as exc:
            logger.warning("Order #%d placed but history write failed: %s", order_id, exc)
            warnings.append(str(exc))
        self._stage = CheckoutStage.ORDER_RECORDED

        # Step 7
        self._cart.clear()
        logger.info(
            "Order #%d placed: %d item(s), total %s, paid using %s",
            order_id,
            order.item_count,
            order.total,
            label,
        )
        return CheckoutOutcome.placed(order, warnings)
