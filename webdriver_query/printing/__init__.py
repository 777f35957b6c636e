"""
Diagnostic formatting for driver and element handles.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from .formatter import (
    eliminate_breaks,
    format_driver,
    format_element,
    format_handle,
    truncate_text,
)
from .handles import Capabilities, DriverHandle, ElementHandle, HandleKind

__all__ = [
    "Capabilities",
    "DriverHandle",
    "ElementHandle",
    "HandleKind",
    "eliminate_breaks",
    "format_driver",
    "format_element",
    "format_handle",
    "truncate_text",
]
