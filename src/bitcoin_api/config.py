from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RpcEndpoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str = Field(..., description="Daemon URL including port, e.g. http://127.0.0.1:8332")
    username: str = ""
    password: str = Field("", repr=False)
    timeout: float | None = Field(None, gt=0, description="HTTP timeout in seconds; None waits")


__all__ = [
    "RpcEndpoint",
]
