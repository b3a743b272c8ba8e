"""Utility modules for textual-statusline."""

from .model_context import (
    DEFAULT_CONTEXT_CONFIG,
    USABLE_CONTEXT_RATIO,
    get_context_config,
    load_model_windows,
    model_windows_loaded,
)

__all__ = [
    "DEFAULT_CONTEXT_CONFIG",
    "USABLE_CONTEXT_RATIO",
    "get_context_config",
    "load_model_windows",
    "model_windows_loaded",
]
