"""Text-file-backed implementation of OrderIdGenerator.

The file holds a single decimal integer: the last order ID handed out.
Every ``next_id()`` call re-reads it, increments it and writes it back
before returning.  The write goes to a temporary sibling file that is
fsynced and renamed over the counter, and the directory is fsynced
after the rename.  After a crash the file holds either the old or the
new value and never a torn one.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from pos.domain.exceptions import CounterStoreUnavailable
from pos.domain.repository.order_id_generator import OrderIdGenerator
from pos.infrastructure.persistence.atomic_file import atomic_write_text

logger = logging.getLogger(__name__)


class FileOrderIdGenerator(OrderIdGenerator):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.Lock()

    # --- OrderIdGenerator interface -------------------------------------------

    def next_id(self) -> int:
        with self._lock:
            new_id = self._read() + 1
            self._write(new_id)
        logger.debug("Issued order ID %d", new_id)
        return new_id

    def last_issued(self) -> int:
        with self._lock:
            return self._read()

    # --- File helpers ---------------------------------------------------------

    def _read(self) -> int:
        try:
            raw = self._file_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return 0
        except OSError as exc:
            raise CounterStoreUnavailable(
                f"Cannot read order counter {self._file_path}: {exc}"
            ) from exc

        try:
            value = int(raw.strip())
        except ValueError:
            logger.warning(
                "Order counter %s is unreadable (%r); starting from 0",
                self._file_path,
                raw[:20],
            )
            return 0
        if value < 0:
            logger.warning(
                "Order counter %s is negative (%d); starting from 0",
                self._file_path,
                value,
            )
            return 0
        return value

    def _write(self, value: int) -> None:
        try:
            atomic_write_text(self._file_path, f"{value}\n")
        except OSError as exc:
            raise CounterStoreUnavailable(
                f"Cannot persist order counter {self._file_path}: {exc}"
            ) from exc
