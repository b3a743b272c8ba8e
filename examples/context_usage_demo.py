#!/usr/bin/env python3
"""Demo showing context window usage in a status line.

Press + to add tokens, l to toggle used/remaining, p to cycle text and bars.
"""

from textual.app import App, ComposeResult
from textual.widgets import Footer, Static

from textual_statusline import RenderContext, StatusItem, TokenMetrics, WidgetItem


class ContextUsageDemo(App):
    """Demo app showing context window usage display."""

    CSS = """
    Screen {
        background: $surface;
    }
    #editor-label {
        color: $text-muted;
        padding: 0 1;
    }
    """

    BINDINGS = [("q", "quit", "Quit"), ("+", "add_tokens", "Add tokens")]

    def __init__(self) -> None:
        super().__init__()
        self.context_length = 0

    def compose(self) -> ComposeResult:
        yield Static("", id="editor-label")
        yield StatusItem(WidgetItem(id="ctx", type="context-percentage-usable"), id="ctx")
        yield Footer()

    def on_mount(self) -> None:
        status = self.query_one("#ctx", StatusItem)
        status.focus()
        self._update()

    def action_add_tokens(self) -> None:
        self.context_length += 12_000
        self._update()

    def on_status_item_item_changed(self, event: StatusItem.ItemChanged) -> None:
        self._update()

    def _update(self) -> None:
        status = self.query_one("#ctx", StatusItem)
        status.set_context(
            RenderContext(
                token_metrics=TokenMetrics(context_length=self.context_length),
                data={"model": {"id": "claude-sonnet-4-5"}},
            )
        )
        self.query_one("#editor-label", Static).update(status.editor_label())


if __name__ == "__main__":
    ContextUsageDemo().run()
