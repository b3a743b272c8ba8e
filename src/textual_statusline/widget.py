"""Base interface for status-line widgets."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .types import CustomKeybind, RenderContext, Settings, WidgetEditorDisplay, WidgetItem


class StatusWidget(ABC):
    """One kind of status-line element.

    Widgets hold no state of their own. Everything configurable lives in the
    ``WidgetItem`` the host passes in, and editor actions return a new item
    rather than touching the old one.
    """

    @abstractmethod
    def get_default_color(self) -> str: ...

    @abstractmethod
    def get_description(self) -> str: ...

    @abstractmethod
    def get_display_name(self) -> str: ...

    @abstractmethod
    def render(self, item: WidgetItem, context: RenderContext, settings: Settings) -> str | None:
        """Render the widget, or return None to hide it."""

    def get_editor_display(self, item: WidgetItem) -> WidgetEditorDisplay:
        return WidgetEditorDisplay(display_text=self.get_display_name())

    def handle_editor_action(self, action: str, item: WidgetItem) -> WidgetItem | None:
        """Apply an editor action. Returns None if the action isn't handled."""
        return None

    def get_custom_keybinds(self) -> list[CustomKeybind]:
        return []

    def supports_raw_value(self) -> bool:
        return False

    def supports_colors(self, item: WidgetItem) -> bool:
        return True
