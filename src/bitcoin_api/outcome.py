from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Union

from bitcoin_api.client import call
from bitcoin_api.errors import FatalError, FatalKind, RpcError
from bitcoin_api.transport.base import Transport


@dataclass(frozen=True)
class Success:
    value: Any


@dataclass(frozen=True)
class RpcFailure:
    code: int
    message: str


@dataclass(frozen=True)
class FatalFailure:
    kind: FatalKind
    detail: str


CallOutcome = Union[Success, RpcFailure, FatalFailure]


def call_outcome(
    url: str,
    username: str,
    password: str,
    command: str,
    params: Sequence[str] = (),
    *,
    transport: Transport | None = None,
) -> CallOutcome:
    """Like :func:`bitcoin_api.client.call`, but returns the failure instead of raising it."""
    try:
        value = call(url, username, password, command, params, transport=transport)
    except RpcError as e:
        return RpcFailure(code=e.code, message=e.message)
    except FatalError as e:
        return FatalFailure(kind=e.kind, detail=e.detail)
    return Success(value)


__all__ = ["Success", "RpcFailure", "FatalFailure", "CallOutcome", "call_outcome"]
