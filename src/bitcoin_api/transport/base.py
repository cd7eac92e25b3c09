from __future__ import annotations

import abc
from dataclasses import dataclass

import httpx


@dataclass(frozen=True)
class HttpReply:
    status_code: int
    content: bytes


class Transport(abc.ABC):
    """Abstract transport for a single authenticated JSON-RPC POST."""

    @abc.abstractmethod
    def post(self, url: httpx.URL, body: bytes, *, username: str, password: str) -> HttpReply:
        """Send ``body`` to ``url`` and return the raw reply, whatever its status."""
