"""Abstract append-only audit log of checkouts."""

from __future__ import annotations

from abc import ABC, abstractmethod


class OrderLog(ABC):

    @abstractmethod
    def append(self, order_id: int, payment_method_label: str) -> None:
        """Durably record that *order_id* was paid with *payment_method_label*.

        Raises LogStoreUnavailable if the record could not be written.
        """
