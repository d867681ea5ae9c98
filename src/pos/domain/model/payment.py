"""Payment methods.

The set of methods is closed, so it is an Enum rather than a class
hierarchy.  ``pay`` dispatches on the member and returns the label that
gets recorded on the order.  No real payment processing happens here.
"""

from __future__ import annotations

from enum import Enum

from pos.domain.exceptions import InvalidPaymentMethod
from pos.domain.model.value_objects import Money


class PaymentMethod(Enum):
    CASH = "1"
    CARD = "2"
    GCASH = "3"

    @property
    def key(self) -> str:
        """Menu key the customer types to pick this method."""
        return self.value

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def short_name(self) -> str:
        return _SHORT_NAMES[self]

    @classmethod
    def parse(cls, choice: PaymentMethod | str | int) -> PaymentMethod:
        """Resolve a menu key (``"1"``), member name (``"gcash"``) or member.

        Raises InvalidPaymentMethod for anything else.
        """
        if isinstance(choice, PaymentMethod):
            return choice
        if isinstance(choice, bool) or not isinstance(choice, (str, int)):
            raise InvalidPaymentMethod(f"Invalid payment method: {choice!r}")

        raw = str(choice).strip()
        for method in cls:
            if raw == method.key or raw.upper() == method.name:
                return method
        raise InvalidPaymentMethod(
            f"Invalid payment method: {raw!r}. Choose one of {menu_prompt()}."
        )


_LABELS = {
    PaymentMethod.CASH: "Cash",
    PaymentMethod.CARD: "Credit/Debit Card",
    PaymentMethod.GCASH: "GCash",
}

_SHORT_NAMES = {
    PaymentMethod.CASH: "Cash",
    PaymentMethod.CARD: "Card",
    PaymentMethod.GCASH: "GCash",
}


def pay(method: PaymentMethod, amount: Money) -> str:
    """Settle *amount* with *method* and return the method's label.

    Every method accepts any non-negative amount, and Money cannot be
    negative, so this never fails.
    """
    return method.label


def menu_prompt() -> str:
    """Payment menu line, e.g. ``1: Cash, 2: Card, 3: GCash``."""
    return ", ".join(f"{m.key}: {m.short_name}" for m in PaymentMethod)
