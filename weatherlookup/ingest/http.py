"""Shared GET helper that maps httpx failures onto TransportError."""

import logging

import httpx

from weatherlookup.errors import TransportError

logger = logging.getLogger(__name__)

BODY_SNIPPET_CHARS = 200


def http_get(
    url: str,
    params: dict,
    user_agent: str,
    connect_timeout: float,
    read_timeout: float,
) -> httpx.Response:
    """Issue a single GET. No retries; the timeout is the only resilience."""
    headers = {"User-Agent": user_agent, "Accept": "application/json"}
    timeout = httpx.Timeout(read_timeout, connect=connect_timeout)
    logger.debug("GET %s params=%s", url, params)
    try:
        resp = httpx.get(url, params=params, headers=headers, timeout=timeout)
    except httpx.RequestError as e:
        logger.error("Request to %s failed: %s", url, e)
        raise TransportError(f"Request failed: {e}") from e

    if not resp.is_success:
        body = resp.text[:BODY_SNIPPET_CHARS]
        logger.error("%s returned %d: %s", url, resp.status_code, body)
        raise TransportError(
            f"HTTP {resp.status_code}: {body}", resp.status_code, body
        )
    return resp
