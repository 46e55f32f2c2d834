"""
Type definitions for the print spooler.
"""

from spooler.types.report import PrintReport, SpoolerStatus

__all__ = [
    "PrintReport",
    "SpoolerStatus",
]
