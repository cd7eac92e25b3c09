from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from bitcoin_api.config import RpcEndpoint
from bitcoin_api.errors import ConfigurationError


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    import os

    url = os.environ.get("BITCOIN_API_URL")
    if url:
        data["url"] = url
    user = os.environ.get("BITCOIN_API_USER")
    if user:
        data["username"] = user
    password = os.environ.get("BITCOIN_API_PASSWORD")
    if password:
        data["password"] = password
    timeout = os.environ.get("BITCOIN_API_TIMEOUT")
    if timeout:
        data["timeout"] = timeout
    return data


def _normalize(data: dict[str, Any]) -> dict[str, Any]:
    """Map bitcoin.conf style keys onto the RpcEndpoint schema."""
    out = {k: v for k, v in data.items() if not k.startswith("rpc") and k != "user"}
    if "username" not in out:
        user = data.get("user", data.get("rpcuser"))
        if user is not None:
            out["username"] = user
    if "password" not in out and data.get("rpcpassword") is not None:
        out["password"] = data["rpcpassword"]
    if "url" not in out and ("rpcconnect" in data or "rpcport" in data):
        scheme = data.get("rpcscheme") or "http"
        host = data.get("rpcconnect") or "127.0.0.1"
        port = data.get("rpcport") or 8332
        out["url"] = f"{scheme}://{host}:{port}"
    return out


def load_config(path: str | None = None, **overrides: Any) -> RpcEndpoint:
    """Build an RpcEndpoint from a file, then the environment, then ``overrides``.

    ``path`` may be None to configure from the environment alone. Override
    values of None are ignored.
    """
    data: Any = {}
    if path:
        p = Path(path)
        try:
            text = p.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"cannot read configuration {path}: {e}") from e
        if p.suffix.lower() in {".yaml", ".yml"}:
            import yaml

            try:
                data = yaml.safe_load(text) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid configuration: {e}") from e
        else:
            try:
                data = json.loads(text)
            except ValueError as e:
                raise ConfigurationError(f"Invalid configuration: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError("Invalid configuration: top level must be a mapping")

    data = _apply_env_overrides(_normalize(data))
    data.update({k: v for k, v in overrides.items() if v is not None})
    if not data.get("url"):
        raise ConfigurationError("Invalid configuration: no RPC url (set url or BITCOIN_API_URL)")
    try:
        return RpcEndpoint.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
