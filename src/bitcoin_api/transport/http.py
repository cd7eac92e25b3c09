from __future__ import annotations

import logging

import httpx

from bitcoin_api.errors import ConfigurationError, TransportError
from bitcoin_api.transport.base import HttpReply, Transport

logger = logging.getLogger(__name__)

AUTH_REALM = "jsonrpc"


def parse_endpoint_url(url: str) -> httpx.URL:
    """Validate a daemon URL without touching the network."""
    if not isinstance(url, str) or not url.strip():
        raise ConfigurationError(f"invalid RPC url: {url!r}")
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise ConfigurationError(f"invalid RPC url {url!r}: {e}") from e
    if parsed.scheme not in {"http", "https"}:
        raise ConfigurationError(f"invalid RPC url {url!r}: scheme must be http or https")
    if not parsed.host:
        raise ConfigurationError(f"invalid RPC url {url!r}: missing host")
    return parsed


class HttpxTransport(Transport):
    """One httpx client per call; credentials are sent on the first request.

    ``mount`` replaces the network layer (e.g. ``httpx.MockTransport``).
    """

    def __init__(
        self,
        timeout: float | None = None,
        *,
        mount: httpx.BaseTransport | None = None,
    ) -> None:
        self.timeout = timeout
        self._mount = mount

    def post(self, url: httpx.URL, body: bytes, *, username: str, password: str) -> HttpReply:
        headers = {
            "Content-Type": "application/json",
            "Content-Length": str(len(body)),
        }
        site = f"{url.scheme}://{url.netloc.decode('ascii')}"
        logger.debug("POST %s (basic auth, realm=%s, %d bytes)", site, AUTH_REALM, len(body))
        try:
            with httpx.Client(
                auth=httpx.BasicAuth(username, password),
                timeout=self.timeout,
                follow_redirects=False,
                transport=self._mount,
            ) as client:
                resp = client.post(url, content=body, headers=headers)
        except httpx.TimeoutException as e:
            raise TransportError(f"timed out talking to {site}: {e}", timed_out=True) from e
        except httpx.RequestError as e:
            raise TransportError(f"network error talking to {site}: {e}") from e
        logger.debug("HTTP %d from %s (%d bytes)", resp.status_code, site, len(resp.content))
        return HttpReply(status_code=resp.status_code, content=resp.content)


__all__ = ["AUTH_REALM", "HttpxTransport", "parse_endpoint_url"]
