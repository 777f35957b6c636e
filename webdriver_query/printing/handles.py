"""
Read-only views of driver and element objects.

The formatter and the regex filter only ever call these accessors; adapters
for a concrete driver (Selenium, Playwright, ...) implement them.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class ElementHandle(Protocol):
    """Element accessors."""

    def tag_name(self) -> Optional[str]: ...

    def text(self) -> Optional[str]: ...

    def attribute(self, name: str) -> Optional[str]: ...


@dataclass(frozen=True)
class Capabilities:
    """Browser capabilities reported by a driver session."""

    browser_name: Optional[str] = None
    version: Optional[str] = None
    javascript_enabled: Optional[bool] = None
    raw: Mapping[str, Any] = field(default_factory=dict)

    @property
    def native_events(self) -> bool:
        value = self.raw.get("nativeEvents")
        if isinstance(value, str):
            return value.strip().lower() == "true"
        return bool(value)


@runtime_checkable
class DriverHandle(Protocol):
    """Driver session accessors."""

    def page_title(self) -> Optional[str]: ...

    def current_url(self) -> Optional[str]: ...

    def capabilities(self) -> Capabilities: ...


class HandleKind(str, Enum):
    """Kinds of handle the formatter renders."""

    DRIVER = "driver"
    ELEMENT = "element"

    @classmethod
    def detect(cls, handle: Any) -> "HandleKind":
        if isinstance(handle, DriverHandle):
            return cls.DRIVER
        if isinstance(handle, ElementHandle):
            return cls.ELEMENT
        raise TypeError(
            f"Cannot format {type(handle).__name__}: "
            "not a driver handle or an element handle"
        )
