"""Timed operation block used by the logging decorators.

:func:`timed_operation` wraps one service call. When the block exits it
writes exactly one entry to the injected structlog logger: ``info`` with
the elapsed time when the body returned, ``error`` with the elapsed time,
the context fields, and the exception when the body raised. The exception
itself always propagates unchanged.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

logger = logging.getLogger(__name__)


def _elapsed_ms(start: float) -> float:
    return max(0.0, (time.perf_counter() - start) * 1000)


def _emit(log: Any, level: str, event: str, **fields: Any) -> None:
    """Write one entry to *log*. Sink failures never reach the caller."""
    try:
        getattr(log, level)(event, **fields)
    except Exception:
        logger.debug("Log sink failed to record %r", event, exc_info=True)


@contextmanager
def timed_operation(
    log: Any,
    op: str,
    *,
    success: str,
    failure: str,
    **context: Any,
) -> Generator[None]:
    """Time the enclosed call and log its outcome once.

    Args:
        log: structlog logger (anything with ``info``/``error`` methods).
        op: Operation name, logged as the ``op`` field.
        success: Event written at info level when the body returns.
        failure: Event written at error level when the body raises.
        **context: Identifiers (IDs, filters) attached to the failure entry.
    """
    start = time.perf_counter()
    failed: BaseException | None = None
    try:
        yield
    except BaseException as exc:
        failed = exc
        raise
    finally:
        took_ms = _elapsed_ms(start)
        if failed is None:
            _emit(log, "info", success, op=op, took_ms=took_ms)
        else:
            _emit(log, "error", failure, op=op, took_ms=took_ms, error=failed, **context)
