"""Utility modules for cagepack."""

from cagepack.utils.logger import RunLogger
from cagepack.utils.display import StatusDisplay, LiveLogger

__all__ = [
    "RunLogger",
    "StatusDisplay",
    "LiveLogger",
]
