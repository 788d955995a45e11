from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Error:
    code: str
    message: str
    path: str


class OutcomeError(ValueError):
    """Raised when a value is not a valid ``{"ok": ...}``/``{"error": ...}`` outcome."""

    error: Error

    def __init__(self, error: Error) -> None:
        super().__init__(f"{error.code}:{error.path}:{error.message}")
        self.error = error
