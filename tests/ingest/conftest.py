import httpx
import pytest
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_none


@pytest.fixture
def no_wait_retry():
    return retry(
        stop=stop_after_attempt(3),
        wait=wait_none(),
        retry=retry_if_exception_type((httpx.TransportError, httpx.HTTPStatusError)),
        reraise=True,
    )
