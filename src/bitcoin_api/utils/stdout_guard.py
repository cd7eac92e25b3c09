from __future__ import annotations

import contextlib
import logging
import os
import sys


class StdoutGuard(contextlib.AbstractContextManager):
    """
    Send logging and stray print-style output to stderr while active.

    - stdout is reserved for the RPC result document, written after exit
    - logs go to stderr
    """

    def __init__(self) -> None:
        self._orig_stdout = sys.stdout
        # Configure root logger only once
        if not logging.getLogger().handlers:
            logging.basicConfig(
                stream=sys.stderr,
                level=os.environ.get("BITCOIN_API_LOG_LEVEL", "WARNING").upper(),
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            )

    def __enter__(self) -> StdoutGuard:
        self._orig_stdout = sys.stdout
        sys.stdout = sys.stderr
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        sys.stdout = self._orig_stdout
        return False
