from __future__ import annotations

from typing import Any, Optional


class OriginError(Exception):
    """Base error for the ORIGIN identity SDK."""


class OriginConfigurationError(OriginError):
    """Raised when client configuration is missing or invalid."""


class RemoteReadError(OriginError):
    """Raised when a read-only contract call could not be completed."""

    def __init__(self, source: str, function: str, message: Optional[str] = None, args: tuple[Any, ...] = ()) -> None:
        self.source = source
        self.function = function
        self.call_args = args
        detail = message or "call failed"
        super().__init__(f"{source}.{function} failed: {detail}")
