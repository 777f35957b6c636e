"""
Diagnostic strings for driver and element handles.

Output is one line, bounded in length, and skips fields that are missing or
empty, e.g.:

    #<Tag: <a>, Text: Sign in, Href: https://example.com/login, Object: FakeElement at 0x7f...>

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import re
from typing import Any, List, Optional, Tuple

from ..core.config import FormatterConfig
from ..core.constants import ELEMENT_ATTRIBUTE_LABELS, FREE_TEXT_ATTRIBUTES
from .handles import DriverHandle, ElementHandle, HandleKind

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def truncate_text(text: Optional[str], limit: int = 60, ellipsis: str = "...") -> str:
    """Return the first `limit` characters of `text`, plus `ellipsis` if cut."""
    if not text:
        return ""
    if len(text) > limit:
        return text[:limit] + ellipsis
    return text


def eliminate_breaks(text: Optional[str], replacement: str = "  ") -> str:
    """Replace each line break (\\r\\n, \\r or \\n) with `replacement`."""
    if not text:
        return ""
    return _LINE_BREAK_RE.sub(replacement, text)


def _present(value: Any) -> bool:
    return value is not None and value != ""


def _object_label(handle: Any) -> str:
    return f"{type(handle).__name__} at {id(handle):#x}"


def _render(fields: List[Tuple[str, str]], handle: Any) -> str:
    parts = [f"{label}: {value}" for label, value in fields]
    parts.append(f"Object: {_object_label(handle)}")
    return "#<" + ", ".join(parts) + ">"


def format_element(
    element: ElementHandle, config: Optional[FormatterConfig] = None
) -> str:
    """Render an element handle: tag, text and the common attributes."""
    config = config or FormatterConfig()

    def clean(value: str) -> str:
        return truncate_text(
            eliminate_breaks(value, config.line_break_replacement),
            config.truncate_length,
            config.ellipsis,
        )

    fields: List[Tuple[str, str]] = []
    tag_name = element.tag_name()
    if _present(tag_name):
        fields.append(("Tag", f"<{tag_name}>"))
    text = element.text()
    if _present(text):
        fields.append(("Text", clean(text)))
    for attr, label in ELEMENT_ATTRIBUTE_LABELS:
        value = element.attribute(attr)
        if not _present(value):
            continue
        fields.append((label, clean(value) if attr in FREE_TEXT_ATTRIBUTES else value))
    return _render(fields, element)


def format_driver(driver: DriverHandle, config: Optional[FormatterConfig] = None) -> str:
    """Render a driver handle: page, browser and capability summary."""
    config = config or FormatterConfig()
    caps = driver.capabilities()
    fields: List[Tuple[str, str]] = []

    title = driver.page_title()
    if _present(title):
        fields.append(("Title", title))
    url = driver.current_url()
    if _present(url):
        fields.append(("URL", truncate_text(url, config.truncate_length, config.ellipsis)))
    if _present(caps.browser_name):
        fields.append(("Browser", caps.browser_name))
    if _present(caps.version):
        fields.append(("Version", caps.version))
    if caps.javascript_enabled is not None:
        fields.append(("JS Enabled", str(caps.javascript_enabled).lower()))
    fields.append(("Native Events Enabled", str(caps.native_events).lower()))
    return _render(fields, driver)


def format_handle(
    handle: Any,
    kind: Optional[HandleKind] = None,
    config: Optional[FormatterConfig] = None,
) -> str:
    """
    Render a driver or element handle.

    Args:
        handle: object implementing DriverHandle or ElementHandle
        kind: skip detection when the caller knows the kind
        config: formatter settings

    Raises:
        TypeError: if the handle implements neither protocol
    """
    kind = HandleKind(kind) if kind is not None else HandleKind.detect(handle)
    if kind is HandleKind.DRIVER:
        return format_driver(handle, config)
    return format_element(handle, config)
