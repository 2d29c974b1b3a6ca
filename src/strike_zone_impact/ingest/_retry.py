import logging
from collections.abc import Callable
from typing import Any

import httpx
from tenacity import RetryCallState, retry, retry_if_exception, stop_after_attempt, wait_exponential_jitter

logger = logging.getLogger(__name__)

type RetryPolicy = Callable[[Callable[..., Any]], Callable[..., Any]]


def _is_transient(exc: BaseException) -> bool:
    """Connection trouble, rate limiting and server errors; a 404 means the file moved and stays moved."""
    if isinstance(exc, httpx.TransportError):
        return True
    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        return status == 429 or status >= 500
    return False


def default_http_retry(label: str, attempts: int = 3) -> RetryPolicy:
    """Retry policy for one reference-table download (the register zip or People.csv).

    *label* names the download in the warning logged before each retry.
    """

    def _log_retry(retry_state: RetryCallState) -> None:
        logger.warning(
            "Retrying %s (attempt %d of %d): %s", label, retry_state.attempt_number, attempts, retry_state.outcome
        )

    return retry(
        stop=stop_after_attempt(attempts),
        wait=wait_exponential_jitter(initial=1, max=10),
        retry=retry_if_exception(_is_transient),
        before_sleep=_log_retry,
        reraise=True,
    )
