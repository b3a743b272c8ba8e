"""Shared types for status-line widgets.

Everything here is plain data passed between the host renderer and a widget.
The host owns and persists ``WidgetItem`` records; widgets only ever return
new ones.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

# JSON type for the host's status payload
JSON = Union[dict[str, "JSON"], list["JSON"], str, int, float, bool, None]

# Host settings are opaque to individual widgets
Settings = dict[str, JSON]


class DisplayMode(str, Enum):
    """How a percentage widget draws its value."""

    TEXT = "text"
    PROGRESS = "progress"
    PROGRESS_SHORT = "progress-short"


@dataclass(frozen=True)
class WidgetItem:
    """One configured widget on the status line."""

    id: str
    type: str
    color: str | None = None
    raw_value: bool = False
    """Compact output: drop the label prefix."""
    metadata: dict[str, str] = field(default_factory=dict)
    """Free-form per-widget settings, string keys and values."""


@dataclass
class TokenMetrics:
    """Token usage for the current session."""

    context_length: int = 0
    """Tokens currently in the context window."""


@dataclass
class RenderContext:
    """What the host knows at render time."""

    is_preview: bool = False
    token_metrics: TokenMetrics | None = None
    data: dict[str, JSON] | None = None

    @property
    def model_id(self) -> str | None:
        """Active model id from ``data["model"]["id"]``, if present."""
        if not isinstance(self.data, dict):
            return None
        model = self.data.get("model")
        if not isinstance(model, dict):
            return None
        model_id = model.get("id")
        return model_id if isinstance(model_id, str) else None


@dataclass(frozen=True)
class ContextConfig:
    """Context window size for a model."""

    max_tokens: int
    usable_tokens: int


@dataclass(frozen=True)
class CustomKeybind:
    key: str
    label: str
    action: str


@dataclass(frozen=True)
class WidgetEditorDisplay:
    display_text: str
    modifier_text: str | None = None
