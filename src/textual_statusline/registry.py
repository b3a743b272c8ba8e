"""Widget registry - lookup of status-line widgets by type name."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from .widget import StatusWidget
from .widgets.context_percentage_usable import ContextPercentageUsableWidget

log = logging.getLogger(__name__)

WidgetClass = type[StatusWidget]


@dataclass
class WidgetRegistry:
    """Maps item type names (``WidgetItem.type``) to widget instances."""

    _widgets: dict[str, StatusWidget] = field(default_factory=dict)

    def add(self, type_name: str, widget: StatusWidget) -> None:
        """Add a widget, replacing any existing one with the same type name."""
        if type_name in self._widgets:
            log.debug(f"Replacing widget for type {type_name}")
        self._widgets[type_name] = widget

    def remove(self, type_name: str) -> bool:
        """Remove a widget by type name. Returns True if removed."""
        return self._widgets.pop(type_name, None) is not None

    def get(self, type_name: str) -> StatusWidget | None:
        return self._widgets.get(type_name)

    def all(self) -> list[tuple[str, StatusWidget]]:
        """All registered widgets, sorted by type name."""
        return sorted(self._widgets.items(), key=lambda entry: entry[0])

    def register(self, type_name: str) -> Callable[[WidgetClass], WidgetClass]:
        """Class decorator registering one instance of the decorated widget.

        Usage:
            @registry.register("git-branch")
            class GitBranchWidget(StatusWidget):
                ...
        """

        def decorator(cls: WidgetClass) -> WidgetClass:
            self.add(type_name, cls())
            return cls

        return decorator


# =============================================================================
# Default registry with built-in widgets
# =============================================================================

_default_registry = WidgetRegistry()
_default_registry.register("context-percentage-usable")(ContextPercentageUsableWidget)


def create_default_registry() -> WidgetRegistry:
    """Create a new WidgetRegistry with all built-in widgets registered."""
    registry = WidgetRegistry()
    for type_name, widget in _default_registry.all():
        registry.add(type_name, widget)
    return registry


def get_widget(type_name: str) -> StatusWidget | None:
    """Look up a built-in widget by type name."""
    return _default_registry.get(type_name)
