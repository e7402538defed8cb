from __future__ import annotations

from typing import Any, Optional


class VottunError(RuntimeError):
    exit_code: int = 1


class VottunTransportError(VottunError):
    """Network-level failure (DNS, connection refused, timeout)."""

    exit_code = 3


class VottunHttpError(VottunError):
    exit_code = 4

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class VottunApiError(VottunError):
    """The API answered with an application-level ``code`` field."""

    exit_code = 5

    def __init__(self, code: Any, message: Any) -> None:
        super().__init__(f"Vottun API error: [{code}] {message}")
        self.code = code
        self.message = message


class ContractNotConfiguredError(VottunError, ValueError):
    exit_code = 2


class MissingArgumentError(VottunError, ValueError):
    exit_code = 2
