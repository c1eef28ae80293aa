"""Utility modules for cmvn.

This module exports commonly used utility functions.
"""

from cmvn.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from cmvn.utils.log import configure_logging

__all__ = [
    "configure_logging",
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
