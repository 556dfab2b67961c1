"""Shared test fixtures."""

import pytest

from epochdate.render.iso8601 import ISO8601DateRenderer, ISO8601Renderer
from epochdate.render.java import JavaRenderer
from epochdate.render.locale import LocaleRenderer
from epochdate.timezone import TimezoneOffset


@pytest.fixture
def pst():
    return TimezoneOffset(offset_minutes=-480, name="PST")


@pytest.fixture
def sgt():
    return TimezoneOffset(offset_minutes=480, name="SGT")


@pytest.fixture
def java_renderer():
    return JavaRenderer()


@pytest.fixture
def iso8601_renderer():
    return ISO8601Renderer()


@pytest.fixture
def iso8601_date_renderer():
    return ISO8601DateRenderer()


@pytest.fixture
def locale_renderer():
    return LocaleRenderer()
