from __future__ import annotations

from typing import Literal

FatalKind = Literal["config", "transport", "decode"]


class RpcError(Exception):
    """Error object returned by the daemon for a well-formed request."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(code, message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"RPC error {self.code}: {self.message}"


class FatalError(RuntimeError):
    """A call failed for reasons other than the daemon rejecting it.

    Never a subclass of or wrapped into :class:`RpcError`. Only the
    subclasses are raised; each one names its ``kind``.
    """

    kind: FatalKind

    def __init__(self, message: str) -> None:
        if type(self) is FatalError:
            raise TypeError("raise ConfigurationError, TransportError or ResponseDecodeError")
        super().__init__(message)
        self.detail = message


class ConfigurationError(FatalError):
    kind: FatalKind = "config"


class TransportError(FatalError):
    kind: FatalKind = "transport"

    def __init__(self, message: str, *, timed_out: bool = False) -> None:
        super().__init__(message)
        self.timed_out = timed_out

    def __reduce__(self):
        return (_rebuild_transport_error, (self.detail, self.timed_out))


class ResponseDecodeError(FatalError):
    kind: FatalKind = "decode"

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

    def __reduce__(self):
        return (_rebuild_decode_error, (self.detail, self.status_code))


# Keyword-only attributes need a module-level constructor to survive pickling
def _rebuild_transport_error(message: str, timed_out: bool) -> TransportError:
    return TransportError(message, timed_out=timed_out)


def _rebuild_decode_error(message: str, status_code: int | None) -> ResponseDecodeError:
    return ResponseDecodeError(message, status_code=status_code)


__all__ = [
    "FatalKind",
    "RpcError",
    "FatalError",
    "ConfigurationError",
    "TransportError",
    "ResponseDecodeError",
]
