"""
Exceptions raised by cryptohash.

Only problems cryptohash detects itself use these classes. Errors from
hashlib, zlib and pycryptodome reach the caller unchanged.
"""

from __future__ import annotations

from typing import Any


def _restore(cls: type, state: dict) -> CryptoHashException:
    err = cls.__new__(cls)
    Exception.__init__(err, state["message"])
    err.__dict__.update(state)
    return err


class CryptoHashException(Exception):
    """
    Base class for cryptohash errors.

    Attributes:
        message: Human-readable description
        context: Values that help diagnose the failure
        exit_code: Status the CLI exits with
    """

    exit_code: int = 1

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = dict(context or {})

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value!r}" for key, value in self.context.items())
        return f"{self.message} ({details})"

    def __reduce__(self):
        # Subclass __init__ signatures differ from args; rebuild from state.
        return (_restore, (type(self), self.__dict__))


class ConfigValidationError(CryptoHashException, ValueError):
    """A config file or CRYPTOHASH_* variable holds an invalid value, or a key is unknown."""

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        file_path: str | None = None,
    ) -> None:
        context: dict[str, Any] = {}
        if key:
            context["key"] = key
        if file_path:
            context["file_path"] = file_path
        super().__init__(message, context=context)


class UnknownAlgorithmError(CryptoHashException, ValueError):
    """
    The algorithm selector names no registered algorithm and is not a Hasher.

    ``algorithm`` holds the selector exactly as the caller passed it (no
    stripping, no case folding).
    """

    exit_code: int = 2

    def __init__(self, algorithm: Any, *, available: list[str] | None = None) -> None:
        self.algorithm = algorithm
        context: dict[str, Any] = {"algorithm": algorithm}
        if available:
            context["available"] = available
        super().__init__(f"Unknown hash algorithm: {algorithm!r}", context=context)
