"""Append-only text file implementation of OrderLog.

One human-readable line per successful checkout.  The core never reads
the file back; it is an audit trail only.
"""

from __future__ import annotations

import os
import threading
from pathlib import Path

from pos.domain.exceptions import LogStoreUnavailable
from pos.domain.repository.order_log import OrderLog

LOG_LINE = "Order {order_id} has been successfully checked out and paid using {label}."


def format_entry(order_id: int, payment_method_label: str) -> str:
    return LOG_LINE.format(order_id=order_id, label=payment_method_label)


class TextFileOrderLog(OrderLog):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.Lock()

    def append(self, order_id: int, payment_method_label: str) -> None:
        entry = format_entry(order_id, payment_method_label) + "\n"
        with self._lock:
            try:
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                with self._file_path.open("a", encoding="utf-8") as fh:
                    fh.write(entry)
                    fh.flush()
                    os.fsync(fh.fileno())
            except OSError as exc:
                raise LogStoreUnavailable(
                    f"Cannot append to order log {self._file_path}: {exc}"
                ) from exc
