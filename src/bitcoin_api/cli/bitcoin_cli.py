from __future__ import annotations

import json
import logging
from typing import Any

import typer

from bitcoin_api.client import BitcoinClient
from bitcoin_api.config import RpcEndpoint
from bitcoin_api.errors import FatalError, RpcError
from bitcoin_api.utils.stdout_guard import StdoutGuard

app = typer.Typer(add_completion=False, help="Call a bitcoind-compatible JSON-RPC daemon.")

logger = logging.getLogger(__name__)


def _resolve_endpoint(
    config: str | None,
    url: str | None,
    user: str | None,
    password: str | None,
    timeout: float | None,
) -> RpcEndpoint:
    from bitcoin_api.config_loader import load_config

    # Command-line values win over the config file and environment
    return load_config(config, url=url, username=user, password=password, timeout=timeout)


def _render(result: Any) -> str:
    # Bare strings are printed unquoted, as bitcoin-cli does
    if isinstance(result, str):
        return result
    return json.dumps(result, indent=2, ensure_ascii=False)


def _require_command(value: str) -> str:
    if not value.strip():
        raise typer.BadParameter("must be a non-empty RPC command name")
    return value


# Unknown options fall through to PARAMS so negative numbers like -1 are arguments
@app.command("call", context_settings={"ignore_unknown_options": True})
def call_command(
    command: str = typer.Argument(
        ..., help="RPC command, e.g. getblockchaininfo", callback=_require_command
    ),
    params: list[str] | None = typer.Argument(
        None, help="Positional string arguments; use -- before values that look like options"
    ),
    url: str | None = typer.Option(None, "--url", help="Daemon URL, e.g. http://127.0.0.1:8332"),
    user: str | None = typer.Option(None, "--user", "-u", help="RPC username"),
    password: str | None = typer.Option(None, "--password", "-p", help="RPC password"),
    config: str | None = typer.Option(None, "--config", "-c", help="Path to YAML/JSON config"),
    timeout: float | None = typer.Option(None, "--timeout", help="HTTP timeout in seconds"),
) -> None:
    """Send one COMMAND to the daemon and print its result as JSON."""
    with StdoutGuard():
        try:
            endpoint = _resolve_endpoint(config, url, user, password, timeout)
            result = BitcoinClient(endpoint).call(command, params or [])
        except (TypeError, ValueError) as e:
            typer.echo(f"error: {e}", err=True)
            raise typer.Exit(code=2) from e
        except RpcError as e:
            typer.echo(f"error code: {e.code}\nerror message:\n{e.message}", err=True)
            raise typer.Exit(code=1) from e
        except FatalError as e:
            logger.debug("%s failed: %s", command, e, exc_info=True)
            typer.echo(f"error: {e}", err=True)
            raise typer.Exit(code=2) from e
    typer.echo(_render(result))


@app.callback()
def default() -> None:
    """Call a bitcoind-compatible JSON-RPC daemon."""


def main() -> None:
    app()


if __name__ == "__main__":
    main()
