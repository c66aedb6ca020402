"""Exception types raised by the casekit conversion functions."""

from __future__ import annotations


class InvalidArgumentTypeError(TypeError):
    """Raised when a conversion function receives something other than ``str``."""

    def __init__(self, function: str, value: object) -> None:
        self.function = function
        self.received = type(value).__name__
        super().__init__(f"{function} input must be a string, got {self.received}")
