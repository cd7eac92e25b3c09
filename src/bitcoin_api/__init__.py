"""Minimal JSON-RPC client for bitcoind-compatible daemons."""

from bitcoin_api.client import BitcoinClient, call
from bitcoin_api.config import RpcEndpoint
from bitcoin_api.errors import (
    ConfigurationError,
    FatalError,
    ResponseDecodeError,
    RpcError,
    TransportError,
)
from bitcoin_api.outcome import CallOutcome, FatalFailure, RpcFailure, Success, call_outcome

__all__ = [
    "call",
    "call_outcome",
    "BitcoinClient",
    "RpcEndpoint",
    "RpcError",
    "FatalError",
    "ConfigurationError",
    "TransportError",
    "ResponseDecodeError",
    "CallOutcome",
    "Success",
    "RpcFailure",
    "FatalFailure",
]
