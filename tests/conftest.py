"""Pytest configuration and shared fixtures for textual-statusline tests."""

import os

# Must be set before litellm is first imported, or it fetches the model map
os.environ["LITELLM_LOCAL_MODEL_COST_MAP"] = "True"

import pytest

from textual_statusline import ContextPercentageUsableWidget, WidgetItem
from textual_statusline.utils.model_context import clear_model_windows


@pytest.fixture(autouse=True)
def clear_windows():
    """The model window map is module state; start each test empty."""
    clear_model_windows()
    yield
    clear_model_windows()


@pytest.fixture
def widget() -> ContextPercentageUsableWidget:
    """Create a context percentage widget."""
    return ContextPercentageUsableWidget()


@pytest.fixture
def item() -> WidgetItem:
    """A context widget item with default settings."""
    return WidgetItem(id="ctx", type="context-percentage-usable")
