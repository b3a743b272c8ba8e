"""Tests for the StatusItem Textual widget."""

import asyncio

import pytest
from textual.app import App, ComposeResult

from textual_statusline import RenderContext, StatusItem, TokenMetrics, WidgetItem
from textual_statusline.utils import model_context
from textual_statusline.widgets import status_item


class TestStatusItemConfig:
    """Unit tests that don't need a running app."""

    def test_resolves_widget_from_registry(self, item: WidgetItem) -> None:
        status = StatusItem(item)
        assert status.status_widget.get_display_name() == "Context % (usable)"

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError):
            StatusItem(WidgetItem(id="x", type="no-such-widget"))

    def test_render_text_hidden_without_metrics(self, item: WidgetItem) -> None:
        assert StatusItem(item).render_text() == ""

    def test_render_text_preview(self, item: WidgetItem) -> None:
        status = StatusItem(item, context=RenderContext(is_preview=True))
        assert status.render_text() == "Ctx(u): 11.6%"

    def test_set_context(self, item: WidgetItem) -> None:
        status = StatusItem(item)
        status.set_context(RenderContext(token_metrics=TokenMetrics(context_length=16_000)))
        assert status.render_text() == "Ctx(u): 10.0%"

    def test_editor_label(self, item: WidgetItem) -> None:
        status = StatusItem(item)
        assert status.editor_label() == "Context % (usable)"
        status.dispatch_key("l")
        assert status.editor_label() == "Context % (usable) (remaining)"

    def test_dispatch_key(self, item: WidgetItem) -> None:
        status = StatusItem(item)
        assert status.dispatch_key("p") is True
        assert status.item.metadata["display"] == "progress"
        assert item.metadata == {}

    def test_dispatch_unknown_key(self, item: WidgetItem) -> None:
        status = StatusItem(item)
        assert status.dispatch_key("x") is False
        assert status.item is item


class StatusApp(App):
    def __init__(self, item: WidgetItem, model_id: str | None = None, load_models: bool = False) -> None:
        super().__init__()
        self.item = item
        self.model_id = model_id
        self.load_models = load_models
        self.changes: list[StatusItem.ItemChanged] = []

    def compose(self) -> ComposeResult:
        yield StatusItem(
            self.item,
            context=RenderContext(
                token_metrics=TokenMetrics(context_length=16_000),
                data={"model": {"id": self.model_id}} if self.model_id else None,
            ),
            load_models=self.load_models,
            id="ctx",
        )

    def on_status_item_item_changed(self, event: StatusItem.ItemChanged) -> None:
        self.changes.append(event)


def test_keypress_posts_item_changed(item: WidgetItem) -> None:
    """Pressing a keybind updates the item and notifies the app."""

    async def run() -> StatusApp:
        app = StatusApp(item)
        async with app.run_test() as pilot:
            app.query_one("#ctx", StatusItem).focus()
            await pilot.press("l")
            await pilot.pause()
        return app

    app = asyncio.run(run())
    assert len(app.changes) == 1
    assert app.changes[0].old is item
    assert app.changes[0].new.metadata["inverse"] == "true"


def test_mount_loads_model_windows_in_worker(
    item: WidgetItem, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Mounting loads the model map off the render path, then redraws."""
    loaded: list[bool] = []

    def fake_load() -> int:
        loaded.append(True)
        return model_context.load_model_windows({"gpt-4o": {"max_input_tokens": 20_000}})

    monkeypatch.setattr(status_item, "load_model_windows", fake_load)

    async def run() -> str:
        app = StatusApp(item, model_id="gpt-4o", load_models=True)
        async with app.run_test() as pilot:
            status = app.query_one("#ctx", StatusItem)
            await app.workers.wait_for_complete()
            await pilot.pause()
            return status.render_text()

    text = asyncio.run(run())
    assert loaded == [True]
    # 16k of a 16k usable window
    assert text == "Ctx(u): 100.0%"


def test_render_does_not_load_model_windows(item: WidgetItem) -> None:
    status = StatusItem(
        item,
        context=RenderContext(
            token_metrics=TokenMetrics(context_length=16_000),
            data={"model": {"id": "gpt-4o"}},
        ),
    )
    assert status.render_text() == "Ctx(u): 10.0%"
    assert not model_context.model_windows_loaded()
