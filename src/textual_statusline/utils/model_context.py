"""Context window sizes per model.

Sizes for non-Claude models come from litellm's bundled model map, loaded once
with ``load_model_windows()`` off the render path. ``get_context_config()``
only reads what has been loaded and never imports or fetches anything.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from ..types import JSON, ContextConfig

log = logging.getLogger(__name__)

# Hosts auto-compact at 80% of the window
USABLE_CONTEXT_RATIO = 0.8

DEFAULT_MAX_TOKENS = 200_000
EXTENDED_MAX_TOKENS = 1_000_000

# Suffix marking the 1M-token beta, e.g. "claude-sonnet-4-5[1m]"
EXTENDED_CONTEXT_MARKER = "[1m]"

# Input window per model id, filled by load_model_windows()
_model_windows: dict[str, int] = {}


def _config_for(max_tokens: int) -> ContextConfig:
    return ContextConfig(
        max_tokens=max_tokens,
        usable_tokens=int(max_tokens * USABLE_CONTEXT_RATIO),
    )


DEFAULT_CONTEXT_CONFIG = _config_for(DEFAULT_MAX_TOKENS)


def load_model_windows(model_cost: Mapping[str, Mapping[str, JSON]] | None = None) -> int:
    """Load input window sizes, by default from litellm's bundled model map.

    Blocking: importing litellm is slow, so call this from a worker thread.
    Returns the number of models with a usable window size.
    """
    global _model_windows

    if model_cost is None:
        # Use the map shipped with the package instead of fetching it
        os.environ.setdefault("LITELLM_LOCAL_MODEL_COST_MAP", "True")
        import litellm

        model_cost = litellm.model_cost

    windows: dict[str, int] = {}
    for model_id, info in model_cost.items():
        if not isinstance(info, Mapping):
            continue
        max_tokens = info.get("max_input_tokens") or info.get("max_tokens")
        if isinstance(max_tokens, int) and max_tokens > 0:
            windows[model_id.lower()] = max_tokens

    # Swap in whole so readers on other threads never see a partial map
    _model_windows = windows
    log.debug(f"Loaded context windows for {len(windows)} models")
    return len(windows)


def clear_model_windows() -> None:
    global _model_windows
    _model_windows = {}


def model_windows_loaded() -> bool:
    return bool(_model_windows)


def get_context_config(model_id: str | None = None) -> ContextConfig:
    """Get the context window config for a model.

    Never raises or blocks. Claude models get the default 200k window unless
    flagged ``[1m]``; other models use the loaded window map and fall back to
    the default when unknown or not loaded yet.
    """
    if not model_id:
        return DEFAULT_CONTEXT_CONFIG

    lowered = model_id.lower()
    if EXTENDED_CONTEXT_MARKER in lowered:
        return _config_for(EXTENDED_MAX_TOKENS)

    # The marker decides Claude windows; the model map lists some at 1M
    if "claude" in lowered:
        return DEFAULT_CONTEXT_CONFIG

    max_tokens = _model_windows.get(lowered)
    if max_tokens is None:
        return DEFAULT_CONTEXT_CONFIG
    return _config_for(max_tokens)
