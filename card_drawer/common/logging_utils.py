# card_drawer/common/logging_utils.py

import logging
import os
from typing import Any, Optional

# Environment switches:
#   LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
#   LOG_BODY=1 to include response body previews in logs
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_BODY = os.getenv("LOG_BODY", "0") == "1"


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Call once at program start (client/main.py)."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def preview(body: str, max_len: int = 120) -> str:
    """Single-line body preview limited to max_len characters."""
    shown = " ".join(body[:max_len].split())
    if len(body) > max_len:
        shown += f" ... (+{len(body) - max_len} chars)"
    return shown


def log_exchange(
    logger: logging.Logger,
    method: str,                  # "GET"
    url: str,
    status: Optional[int],        # None when no response arrived
    body: str = "",
    parsed: Optional[Any] = None,
    note: str = "",
    level: int = logging.DEBUG,
) -> None:
    """
    Unified HTTP exchange log.
    parsed: any parsed object (dataclass or dict) to print summary.
    """
    base = f"[HTTP][{method}] {url} status={status if status is not None else '-'}"
    if note:
        base += f" | {note}"

    if parsed is not None:
        base += f" | parsed={parsed}"

    if LOG_BODY and body:
        base += f" | body={preview(body)}"

    logger.log(level, base)
