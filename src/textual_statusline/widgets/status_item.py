"""Textual widget hosting a single status-line item."""

from __future__ import annotations

import logging

from rich.text import Text
from textual import events
from textual.message import Message
from textual.widgets import Static

from ..types import RenderContext, Settings, WidgetItem
from ..utils.model_context import load_model_windows, model_windows_loaded
from ..widget import StatusWidget

log = logging.getLogger(__name__)


class StatusItem(Static):
    """Renders one ``WidgetItem`` and routes the widget's keybinds to it.

    The item is treated as a value: key presses swap in the new item returned
    by the widget and post ``ItemChanged`` so the app can persist it.
    """

    can_focus = True

    DEFAULT_CSS = """
    StatusItem {
        height: 1;
        width: auto;
        padding: 0 1;
    }
    StatusItem.hidden {
        display: none;
    }
    """

    class ItemChanged(Message):
        """Posted when a keybind produced a new item."""

        def __init__(self, old: WidgetItem, new: WidgetItem) -> None:
            super().__init__()
            self.old = old
            self.new = new

    def __init__(
        self,
        item: WidgetItem,
        widget: StatusWidget | None = None,
        *,
        context: RenderContext | None = None,
        settings: Settings | None = None,
        load_models: bool = True,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        if widget is None:
            # Deferred, the registry imports this package
            from ..registry import get_widget

            widget = get_widget(item.type)
            if widget is None:
                raise ValueError(f"Unknown widget type: {item.type}")

        super().__init__(name=name, id=id, classes=classes, markup=False)
        self.item = item
        self.status_widget = widget
        self.render_context = context or RenderContext()
        self.settings: Settings = settings or {}
        self._load_models = load_models

    def on_mount(self) -> None:
        self._update_content()
        if self._load_models and not model_windows_loaded():
            self.run_worker(self._load_model_windows, thread=True, group="model-windows")

    def _load_model_windows(self) -> None:
        """Load model context sizes in a thread, then redraw."""
        load_model_windows()
        self.app.call_from_thread(self._refresh_content)

    def render_text(self) -> str:
        """Current output, or an empty string when the widget hides itself."""
        return self.status_widget.render(self.item, self.render_context, self.settings) or ""

    def editor_label(self) -> str:
        display = self.status_widget.get_editor_display(self.item)
        if display.modifier_text:
            return f"{display.display_text} {display.modifier_text}"
        return display.display_text

    def set_context(self, context: RenderContext) -> None:
        """Swap in new render context (e.g. after a token usage update)."""
        self.render_context = context
        self._refresh_content()

    def dispatch_key(self, key: str) -> bool:
        """Run the editor action bound to ``key``. Returns True if handled."""
        for keybind in self.status_widget.get_custom_keybinds():
            if keybind.key != key:
                continue
            new_item = self.status_widget.handle_editor_action(keybind.action, self.item)
            if new_item is None:
                return False
            old_item, self.item = self.item, new_item
            log.debug(f"{self.item.id}: {keybind.action} -> {new_item.metadata}")
            self._refresh_content()
            self.post_message(self.ItemChanged(old_item, new_item))
            return True
        return False

    def on_key(self, event: events.Key) -> None:
        """Handle the widget's custom keybinds."""
        if self.dispatch_key(event.key):
            event.prevent_default()
            event.stop()

    def _refresh_content(self) -> None:
        if self.is_mounted:
            self._update_content()

    def _update_content(self) -> None:
        text = self.render_text()
        self.set_class(not text, "hidden")
        style = ""
        if self.status_widget.supports_colors(self.item):
            style = self.item.color or self.status_widget.get_default_color()
        self.update(Text(text, style=style))
