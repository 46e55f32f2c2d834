"""
Exceptions raised by the print spooler.
"""


class SpoolerError(Exception):
    """Base class for print spooler errors."""


class InvalidArgumentError(SpoolerError, ValueError):
    """
    Raised when an operation receives an argument it cannot accept.

    Attributes:
        argument: Name of the offending argument.
    """

    def __init__(self, argument: str, message: str | None = None):
        self.argument = argument
        super().__init__(message or f"Argument '{argument}' must not be None")
