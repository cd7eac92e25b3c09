"""Synchronous JSON-RPC client for bitcoind-compatible daemons.

Each call is one authenticated HTTP POST: encode, send, decode, dispatch.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from bitcoin_api.config import RpcEndpoint
from bitcoin_api.errors import RpcError
from bitcoin_api.rpc.jsonrpc import decode_response, make_request
from bitcoin_api.transport.base import Transport
from bitcoin_api.transport.http import HttpxTransport, parse_endpoint_url

if TYPE_CHECKING:
    from bitcoin_api.outcome import CallOutcome

logger = logging.getLogger(__name__)


def call(
    url: str,
    username: str,
    password: str,
    command: str,
    params: Sequence[str] = (),
    *,
    transport: Transport | None = None,
) -> Any:
    """Execute ``command`` against the daemon at ``url`` and return its result.

    Raises :class:`~bitcoin_api.errors.RpcError` when the daemon answers with
    an error object, and a :class:`~bitcoin_api.errors.FatalError` subclass
    for a bad url, a transport failure or an undecodable response.
    """
    endpoint_url = parse_endpoint_url(url)
    request = make_request(command, params)
    body = request.encode()
    reply = (transport or HttpxTransport()).post(
        endpoint_url, body, username=username, password=password
    )
    response = decode_response(reply.content, status_code=reply.status_code)
    try:
        return response.unwrap()
    except RpcError as e:
        logger.debug("%s failed with RPC error %d: %s", command, e.code, e.message)
        raise


class BitcoinClient:
    """Credentials bound once, commands issued many times.

    Holds no per-call state, so one instance may be shared between threads.
    """

    def __init__(self, endpoint: RpcEndpoint, *, transport: Transport | None = None) -> None:
        parse_endpoint_url(endpoint.url)
        self.endpoint = endpoint
        self.transport = transport or HttpxTransport(timeout=endpoint.timeout)

    @classmethod
    def connect(
        cls,
        url: str,
        username: str = "",
        password: str = "",
        timeout: float | None = None,
    ) -> BitcoinClient:
        return cls(RpcEndpoint(url=url, username=username, password=password, timeout=timeout))

    def call(self, command: str, params: Sequence[str] = ()) -> Any:
        return call(
            self.endpoint.url,
            self.endpoint.username,
            self.endpoint.password,
            command,
            params,
            transport=self.transport,
        )

    def outcome(self, command: str, params: Sequence[str] = ()) -> CallOutcome:
        from bitcoin_api.outcome import call_outcome

        return call_outcome(
            self.endpoint.url,
            self.endpoint.username,
            self.endpoint.password,
            command,
            params,
            transport=self.transport,
        )

    def __repr__(self) -> str:
        return f"BitcoinClient(url={self.endpoint.url!r}, username={self.endpoint.username!r})"


__all__ = ["call", "BitcoinClient"]
