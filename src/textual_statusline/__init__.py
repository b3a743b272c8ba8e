"""Status-line widgets for Textual apps.

    from textual.app import App, ComposeResult
    from textual_statusline import StatusItem, WidgetItem

    class MyApp(App):
        def compose(self) -> ComposeResult:
            yield StatusItem(WidgetItem(id="ctx", type="context-percentage-usable"))

    MyApp().run()

Update the item's render context as token usage comes in with
``StatusItem.set_context()``.
"""

import logging
import os

# Setup logging to file (controlled by TEXTUAL_STATUSLINE_LOGGING_LEVEL env var)
_log_level = os.environ.get("TEXTUAL_STATUSLINE_LOGGING_LEVEL", "").upper()
if _log_level:
    logging.basicConfig(
        filename="textual_statusline.log",
        level=getattr(logging, _log_level, logging.DEBUG),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

from .registry import WidgetRegistry, create_default_registry, get_widget
from .types import (
    ContextConfig,
    CustomKeybind,
    DisplayMode,
    RenderContext,
    TokenMetrics,
    WidgetEditorDisplay,
    WidgetItem,
)
from .utils import get_context_config, load_model_windows
from .widget import StatusWidget
from .widgets import ContextPercentageUsableWidget, StatusItem, render_progress_bar

__version__ = "0.1.0"
__all__ = [
    "ContextConfig",
    "ContextPercentageUsableWidget",
    "CustomKeybind",
    "DisplayMode",
    "RenderContext",
    "StatusItem",
    "StatusWidget",
    "TokenMetrics",
    "WidgetEditorDisplay",
    "WidgetItem",
    "WidgetRegistry",
    "create_default_registry",
    "get_context_config",
    "get_widget",
    "load_model_windows",
    "render_progress_bar",
]
