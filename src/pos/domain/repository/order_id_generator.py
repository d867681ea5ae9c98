"""Abstract source of order IDs.

Defined in the domain layer so the checkout workflow never depends on
how the counter is stored.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class OrderIdGenerator(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Issue the next order ID.

        IDs are positive, unique and strictly increasing over the whole
        history of the store, including across restarts.  The new value
        must be persisted before it is returned.
        """

    @abstractmethod
    def last_issued(self) -> int:
        """Return the most recently issued ID, or 0 if none has been."""
