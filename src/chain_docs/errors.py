"""
Structured error types for chain documentation generation.

Formatting never fails on sparse data: a missing value renders as a
placeholder. Errors exist only at the edges where input shape matters,
namely chain-set validation, module selection and settings loading.

Architecture:
    ::

        ┌──────────────────────────────────────────────────────┐
        │                    ChainDocsError                     │
        │             (category, context, cause)                │
        ├──────────────────────────────────────────────────────┤
        │  ValidationError            ConfigError              │
        │  (VALIDATION)               (CONFIG)                 │
        │       │                          │                    │
        │  DuplicateChainIdError      UnknownModuleError       │
        │                             InvalidSettingsError     │
        └──────────────────────────────────────────────────────┘

Examples:
    >>> error = DuplicateChainIdError(2, ["ethereum", "sepolia"])
    >>> error.to_dict()["category"]
    'VALIDATION'

Tags:
    error-handling, exception-hierarchy, chain-docs
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Error categories used for classification in logs."""

    VALIDATION = "VALIDATION"     # Chain set violates an invariant
    CONFIG = "CONFIG"             # Bad settings or selector
    INTERNAL = "INTERNAL"         # Bugs, unexpected state


class ChainDocsError(Exception):
    """Base exception for all chain documentation errors.

    Subclasses set ``default_category``. Extra keyword arguments are kept
    in ``context`` and included in ``to_dict()`` for structured logging.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        cause: Exception | None = None,
        **context: Any,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        if self.context:
            result["context"] = dict(self.context)
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# VALIDATION ERRORS
# =============================================================================


class ValidationError(ChainDocsError):
    """Chain data violates an invariant and must be fixed at the source."""

    default_category = ErrorCategory.VALIDATION


class DuplicateChainIdError(ValidationError):
    """Two or more chains share the same Wormhole chain id."""

    def __init__(self, chain_id: int, names: list[str]):
        self.chain_id = chain_id
        self.names = list(names)
        super().__init__(
            f"Chain id {chain_id} is used by more than one chain: {', '.join(self.names)}",
            chain_id=chain_id,
            names=self.names,
        )


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(ChainDocsError):
    """Configuration error. Never recoverable at runtime."""

    default_category = ErrorCategory.CONFIG


class UnknownModuleError(ConfigError):
    """Contract module selector does not name a known module."""

    def __init__(self, value: Any, choices: list[str] | None = None):
        self.value = value
        self.choices = list(choices or [])
        message = f"Unknown contract module: {value!r}"
        if self.choices:
            message += f" (expected one of: {', '.join(self.choices)})"
        super().__init__(message, value=repr(value))


class InvalidSettingsError(ConfigError):
    """Settings file could not be read or holds invalid values."""

    pass


__all__ = [
    "ErrorCategory",
    "ChainDocsError",
    "ValidationError",
    "DuplicateChainIdError",
    "ConfigError",
    "UnknownModuleError",
    "InvalidSettingsError",
]
