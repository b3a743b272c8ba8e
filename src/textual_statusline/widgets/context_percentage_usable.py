"""Context % (usable) widget.

Shows how much of the model's usable context window is consumed, or with
``inverse`` how much is left. Usable means 80% of the maximum, the point
where the host auto-compacts.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from decimal import ROUND_HALF_UP, Decimal

from ..types import (
    CustomKeybind,
    DisplayMode,
    RenderContext,
    Settings,
    WidgetEditorDisplay,
    WidgetItem,
)
from ..utils.model_context import get_context_config
from ..widget import StatusWidget

log = logging.getLogger(__name__)

FILLED_GLYPH = "█"
EMPTY_GLYPH = "░"

PROGRESS_BAR_WIDTH = 32
SHORT_PROGRESS_BAR_WIDTH = 16

# Sample values shown in editors when there is no live data
PREVIEW_PERCENTAGE = 11.6
PREVIEW_INVERSE_PERCENTAGE = 88.4

LABEL = "Ctx(u)"

TOGGLE_INVERSE = "toggle-inverse"
TOGGLE_PROGRESS = "toggle-progress"

_NEXT_MODE = {
    DisplayMode.TEXT: DisplayMode.PROGRESS,
    DisplayMode.PROGRESS: DisplayMode.PROGRESS_SHORT,
    DisplayMode.PROGRESS_SHORT: DisplayMode.TEXT,
}


@dataclass(frozen=True)
class ContextDisplayOptions:
    """Typed view of the widget's metadata."""

    inverse: bool = False
    """Show remaining instead of used."""

    display: DisplayMode = DisplayMode.TEXT

    @classmethod
    def from_metadata(cls, metadata: dict[str, str] | None) -> ContextDisplayOptions:
        metadata = metadata or {}
        try:
            display = DisplayMode(metadata.get("display", DisplayMode.TEXT.value))
        except ValueError:
            display = DisplayMode.TEXT
        return cls(inverse=metadata.get("inverse") == "true", display=display)

    def to_metadata(self) -> dict[str, str]:
        return {
            "inverse": "true" if self.inverse else "false",
            "display": self.display.value,
        }


def render_progress_bar(percentage: float, bar_width: int) -> str:
    """Draw ``bar_width`` glyphs, filled in proportion to ``percentage`` (0-100)."""
    filled = math.floor(percentage / 100 * bar_width)
    return FILLED_GLYPH * filled + EMPTY_GLYPH * (bar_width - filled)


def used_percentage(context_length: int, usable_tokens: int) -> float:
    """Percent of usable tokens consumed, capped at 100."""
    return min(100.0, context_length / usable_tokens * 100)


def format_percentage(percentage: float) -> str:
    """One decimal place, ties rounded up (0.25 -> "0.3%")."""
    rounded = Decimal(percentage).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{rounded}%"


class ContextPercentageUsableWidget(StatusWidget):
    """Percentage of the usable context window used or remaining."""

    def get_default_color(self) -> str:
        return "green"

    def get_description(self) -> str:
        return (
            "Shows percentage of usable context window used or remaining "
            "(80% of max before auto-compact)"
        )

    def get_display_name(self) -> str:
        return "Context % (usable)"

    def get_editor_display(self, item: WidgetItem) -> WidgetEditorDisplay:
        options = ContextDisplayOptions.from_metadata(item.metadata)
        modifiers = []
        if options.inverse:
            modifiers.append("remaining")
        if options.display is DisplayMode.PROGRESS:
            modifiers.append("progress bar")
        elif options.display is DisplayMode.PROGRESS_SHORT:
            modifiers.append("short bar")

        return WidgetEditorDisplay(
            display_text=self.get_display_name(),
            modifier_text=f"({', '.join(modifiers)})" if modifiers else None,
        )

    def handle_editor_action(self, action: str, item: WidgetItem) -> WidgetItem | None:
        metadata = item.metadata or {}
        if action == TOGGLE_INVERSE:
            inverse = metadata.get("inverse") == "true"
            return replace(item, metadata={**metadata, "inverse": "false" if inverse else "true"})

        if action == TOGGLE_PROGRESS:
            # Anything that isn't text or progress counts as progress-short,
            # so a corrupt value goes back to text on the next toggle
            current = metadata.get("display", DisplayMode.TEXT.value)
            if current == DisplayMode.TEXT.value:
                current_mode = DisplayMode.TEXT
            elif current == DisplayMode.PROGRESS.value:
                current_mode = DisplayMode.PROGRESS
            else:
                current_mode = DisplayMode.PROGRESS_SHORT
            return replace(item, metadata={**metadata, "display": _NEXT_MODE[current_mode].value})

        log.debug(f"Unhandled editor action: {action}")
        return None

    def _resolve_percentage(self, options: ContextDisplayOptions, context: RenderContext) -> float | None:
        if context.is_preview:
            return PREVIEW_INVERSE_PERCENTAGE if options.inverse else PREVIEW_PERCENTAGE

        if context.token_metrics is None:
            return None

        config = get_context_config(context.model_id)
        if config.usable_tokens <= 0:
            log.warning(f"Invalid usable context size {config.usable_tokens} for {context.model_id!r}")
            return None

        used = used_percentage(context.token_metrics.context_length, config.usable_tokens)
        return 100 - used if options.inverse else used

    def render(self, item: WidgetItem, context: RenderContext, settings: Settings) -> str | None:
        options = ContextDisplayOptions.from_metadata(item.metadata)
        percentage = self._resolve_percentage(options, context)
        if percentage is None:
            return None

        value = format_percentage(percentage)
        if options.display is DisplayMode.TEXT:
            return value if item.raw_value else f"{LABEL}: {value}"

        width = PROGRESS_BAR_WIDTH if options.display is DisplayMode.PROGRESS else SHORT_PROGRESS_BAR_WIDTH
        bar = f"[{render_progress_bar(percentage, width)}] {value}"
        return bar if item.raw_value else f"{LABEL} {bar}"

    def get_custom_keybinds(self) -> list[CustomKeybind]:
        return [
            CustomKeybind(key="l", label="(l)eft/remaining", action=TOGGLE_INVERSE),
            CustomKeybind(key="p", label="(p)rogress toggle", action=TOGGLE_PROGRESS),
        ]

    def supports_raw_value(self) -> bool:
        return True

    def supports_colors(self, item: WidgetItem) -> bool:
        return True
