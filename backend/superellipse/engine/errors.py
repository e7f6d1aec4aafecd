"""Engine error types."""

from __future__ import annotations


class InvalidParameter(ValueError):
    """A shape parameter violates its mathematical precondition."""

    def __init__(self, parameter: str, message: str) -> None:
        super().__init__(message)
        self.parameter = parameter
