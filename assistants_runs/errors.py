from typing import Any


class InvalidArgumentError(ValueError):
    """Raised when an argument passed to a request constructor can't be used."""

    def __init__(self, argument: str, value: Any, message: str):
        self.argument = argument
        self.value = value
        super().__init__(message)
