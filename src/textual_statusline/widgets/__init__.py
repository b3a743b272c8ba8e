"""Widget components for textual-statusline."""

from .context_percentage_usable import (
    ContextDisplayOptions,
    ContextPercentageUsableWidget,
    render_progress_bar,
)
from .status_item import StatusItem

__all__ = [
    "ContextDisplayOptions",
    "ContextPercentageUsableWidget",
    "StatusItem",
    "render_progress_bar",
]
