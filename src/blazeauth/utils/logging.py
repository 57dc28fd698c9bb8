"""Structured logging helpers for BlazeAuth."""

from __future__ import annotations

import logging
import time
import uuid
from contextvars import ContextVar
from typing import Any, Dict, Optional

ROOT_LOGGER = "blazeauth"
DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(correlation_id)s | %(name)s | %(message)s"

_correlation_id: ContextVar[str | None] = ContextVar("blazeauth_correlation_id", default=None)


class CorrelationIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id()
        return True


def configure_logging(level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> None:
    """
    Attach a stream handler to the ``blazeauth`` logger once.

    Later calls leave the existing handler and level untouched.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    handler.addFilter(CorrelationIdFilter())
    logger.addHandler(handler)
    logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def set_correlation_id(value: Optional[str] = None) -> str:
    token = value or uuid.uuid4().hex
    _correlation_id.set(token)
    return token


def get_correlation_id() -> str:
    cid = _correlation_id.get()
    if cid is None:
        cid = set_correlation_id()
    return cid


class CallTimer:
    """
    Context manager logging how long its block took.

    Blocks at or above ``threshold_ms`` are logged at WARNING, faster ones at DEBUG.
    """

    def __init__(
        self,
        name: str,
        logger: logging.Logger,
        threshold_ms: int,
        extra: Dict[str, Any],
    ) -> None:
        self.name = name
        self.logger = logger
        self.threshold_ms = threshold_ms
        self.extra = extra
        self.elapsed_ms: Optional[float] = None
        self._start = 0.0

    def __enter__(self) -> "CallTimer":
        self._start = time.monotonic()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed_ms = (time.monotonic() - self._start) * 1000
        level = logging.WARNING if self.elapsed_ms >= self.threshold_ms else logging.DEBUG
        payload = dict(self.extra, elapsed_ms=self.elapsed_ms, failed=exc_type is not None)
        self.logger.log(level, "%s took %.2fms", self.name, self.elapsed_ms, extra=payload)


def time_call(name: str, logger: logging.Logger, *, threshold_ms: int = 100, **extra: Any) -> CallTimer:
    return CallTimer(name, logger, threshold_ms, extra)
