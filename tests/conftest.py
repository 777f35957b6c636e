"""
Pytest fixtures: in-memory driver and element handles.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import logging
from typing import Dict, Optional

import pytest

from webdriver_query.printing.handles import Capabilities


class FakeElement:
    """Element handle backed by plain values."""

    def __init__(
        self,
        tag: Optional[str] = "div",
        text: Optional[str] = None,
        attrs: Optional[Dict[str, str]] = None,
    ):
        self._tag = tag
        self._text = text
        self._attrs = dict(attrs or {})

    def tag_name(self) -> Optional[str]:
        return self._tag

    def text(self) -> Optional[str]:
        return self._text

    def attribute(self, name: str) -> Optional[str]:
        return self._attrs.get(name)


class FakeDriver:
    """Driver handle backed by plain values."""

    def __init__(
        self,
        title: Optional[str] = None,
        url: Optional[str] = None,
        caps: Optional[Capabilities] = None,
    ):
        self._title = title
        self._url = url
        self._caps = caps or Capabilities()

    def page_title(self) -> Optional[str]:
        return self._title

    def current_url(self) -> Optional[str]:
        return self._url

    def capabilities(self) -> Capabilities:
        return self._caps


@pytest.fixture
def make_element():
    """Factory for FakeElement handles."""
    return FakeElement


@pytest.fixture
def make_driver():
    """Factory for FakeDriver handles."""
    return FakeDriver


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handler, level and record factory changes made by configure_logging."""
    record_factory = logging.getLogRecordFactory()
    package_logger = logging.getLogger("webdriver_query")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate
    logging.setLogRecordFactory(record_factory)
