"""
Core module.
Contains the shared print spooler and its errors.
"""

from spooler.core.exceptions import InvalidArgumentError, SpoolerError
from spooler.core.print_spooler import PrintSpooler, get_print_spooler

__all__ = [
    "PrintSpooler",
    "get_print_spooler",
    "InvalidArgumentError",
    "SpoolerError",
]
