"""Retry utilities for transient database failures using tenacity."""

from dataclasses import dataclass

import structlog
from sqlalchemy.exc import OperationalError
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

logger = structlog.get_logger(__name__)


@dataclass
class DbRetryConfig:
    """Configuration for database retries with exponential backoff."""

    max_attempts: int = 3
    min_wait: float = 0.05
    max_wait: float = 1.0
    multiplier: float = 0.1


def _log_retry(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "Transient database error, retrying",
        attempt=retry_state.attempt_number,
        error=str(exc),
    )


def get_db_retrying(config: DbRetryConfig | None = None) -> AsyncRetrying:
    """Get configured AsyncRetrying for OperationalError (lock timeouts, deadlocks).

    Usage:
        async for attempt in get_db_retrying():
            with attempt:
                await do_transaction()

    The wrapped block must leave the session usable for the next attempt
    (roll back on failure).
    """
    cfg = config or DbRetryConfig()
    return AsyncRetrying(
        retry=retry_if_exception_type(OperationalError),
        stop=stop_after_attempt(cfg.max_attempts),
        wait=wait_exponential(
            multiplier=cfg.multiplier,
            min=cfg.min_wait,
            max=cfg.max_wait,
        ),
        before_sleep=_log_retry,
        reraise=True,
    )
