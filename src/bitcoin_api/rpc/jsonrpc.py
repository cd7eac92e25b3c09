from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from bitcoin_api.errors import ResponseDecodeError, RpcError

JSONRPC_VERSION = "2.0"
REQUEST_ID = 1


@dataclass(frozen=True)
class RpcRequest:
    method: str
    params: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(self.params))

    @property
    def id(self) -> int:
        return REQUEST_ID

    def to_dict(self) -> dict[str, Any]:
        # Key order is part of the wire format
        return {
            "jsonrpc": JSONRPC_VERSION,
            "method": self.method,
            "params": list(self.params),
            "id": REQUEST_ID,
        }

    def encode(self) -> bytes:
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":")).encode(
            "utf-8"
        )


def make_request(method: str, params: Sequence[str] = ()) -> RpcRequest:
    if not isinstance(method, str) or not method:
        raise ValueError("command must be a non-empty string")
    if isinstance(params, (str, bytes)):
        raise TypeError("params must be a sequence of strings, not a single string")
    items = tuple(params)
    for item in items:
        if not isinstance(item, str):
            raise TypeError(f"params must contain only strings, got {type(item).__name__}")
    return RpcRequest(method=method, params=items)


def encode_request(method: str, params: Sequence[str] = ()) -> bytes:
    return make_request(method, params).encode()


@dataclass(frozen=True)
class RpcResponse:
    result: Any
    error: Any

    def unwrap(self) -> Any:
        """Return ``result`` or raise the error carried by the response.

        A null ``result`` alongside a null ``error`` is a successful call.
        """
        if self.error is None:
            return self.result
        raise build_rpc_error(self.error)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def decode_response(body: bytes, *, status_code: int | None = None) -> RpcResponse:
    if not body or not body.strip():
        raise ResponseDecodeError(
            f"empty response body (HTTP {status_code})", status_code=status_code
        )
    try:
        payload = json.loads(body, parse_constant=_reject_constant)
    # RecursionError: nesting deeper than the interpreter stack
    except (ValueError, RecursionError) as e:
        raise ResponseDecodeError(
            f"response is not valid JSON (HTTP {status_code}): {e}", status_code=status_code
        ) from e
    if not isinstance(payload, dict):
        raise ResponseDecodeError(
            f"expected a JSON object, got {type(payload).__name__}", status_code=status_code
        )
    missing = [k for k in ("result", "error") if k not in payload]
    if missing:
        raise ResponseDecodeError(
            f"response is missing required keys: {', '.join(missing)}", status_code=status_code
        )
    return RpcResponse(result=payload["result"], error=payload["error"])


def build_rpc_error(error: Any) -> RpcError:
    if not isinstance(error, dict):
        raise ResponseDecodeError(f"error field must be an object, got {type(error).__name__}")
    code = error.get("code")
    message = error.get("message")
    # bool is an int subclass
    if not isinstance(code, int) or isinstance(code, bool):
        raise ResponseDecodeError(f"error.code must be an integer, got {code!r}")
    if not isinstance(message, str):
        raise ResponseDecodeError(f"error.message must be a string, got {message!r}")
    return RpcError(code, message)


__all__ = [
    "JSONRPC_VERSION",
    "REQUEST_ID",
    "RpcRequest",
    "RpcResponse",
    "make_request",
    "encode_request",
    "decode_response",
    "build_rpc_error",
]
