import httpx
import structlog

from config.meta import (
    META_HTTP_CONNECT_TIMEOUT,
    META_HTTP_TIMEOUT,
    META_MAX_CONNECTIONS,
    META_MAX_KEEPALIVE,
)

logger = structlog.get_logger(__name__)

_client: httpx.AsyncClient | None = None


def init_http_client() -> httpx.AsyncClient:
    global _client
    if _client is None:
        _client = httpx.AsyncClient(
            timeout=httpx.Timeout(META_HTTP_TIMEOUT, connect=META_HTTP_CONNECT_TIMEOUT),
            limits=httpx.Limits(
                max_connections=META_MAX_CONNECTIONS,
                max_keepalive_connections=META_MAX_KEEPALIVE,
            ),
        )
        logger.debug("HTTP client created")
    return _client


async def close_http_client():
    global _client
    if _client:
        await _client.aclose()
        _client = None


def get_http_client() -> httpx.AsyncClient:
    if _client is None:
        raise RuntimeError("HTTP client not initialized")
    return _client
