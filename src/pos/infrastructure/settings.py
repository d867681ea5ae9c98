"""Runtime settings resolved from CLI flags and ``POS_*`` env vars.

click resolves each option from the command line first, then from its
environment variable, then from the defaults below.  The result is
frozen and stored on ``click.Context.obj``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_DATA_DIR = Path("data")

COUNTER_FILE = "order_id.txt"
LOG_FILE = "order_logs.txt"
ORDERS_FILE = "orders.json"


@dataclass(frozen=True)
class Settings:
    """Resolved configuration for one CLI invocation.

    Attributes:
        data_dir: Directory holding the counter, audit log and order history.
        max_cart_lines: Most distinct products a cart may hold; None for
            no limit.
        verbose: DEBUG logging for ``pos``.
        log_json: JSON log lines instead of console rendering.
    """

    data_dir: Path = DEFAULT_DATA_DIR
    max_cart_lines: int | None = None
    verbose: bool = False
    log_json: bool = False

    @property
    def counter_path(self) -> Path:
        return self.data_dir / COUNTER_FILE

    @property
    def log_path(self) -> Path:
        return self.data_dir / LOG_FILE

    @property
    def orders_path(self) -> Path:
        return self.data_dir / ORDERS_FILE
