"""Tests for UI event handling - verifies button clicks and dialog results reach the view-model.

These tests catch wiring problems where event decorators don't register properly.
"""

import pytest

from textual.widgets import Button, Input

from app import LocalConfigApp
from controller import Browsing, EditDialog, SelectConfiguration
from errors import RemoteUnavailable
from model import ConfigItem
from store import JsonConfigStore
from ui import (
    ActionsModal,
    ConfigNameItem,
    ConfigScreen,
    ConfigSelector,
    ConfirmModal,
    EditParameterModal,
    InputModal,
    ParameterRow,
    SelectorModal,
)
import ui.ids as ids
from ui.ids import css


async def settle(pilot, rounds: int = 5) -> None:
    """Let workers and message queues drain."""
    for _ in range(rounds):
        await pilot.pause(0.01)


def make_app(store, remote, selection=None, notices=None):
    app = LocalConfigApp(store, remote, initial_selection=selection)
    if notices is not None:
        app.notify = lambda message, **kwargs: notices.append((message, kwargs.get("severity")))
    return app


def row_texts(screen):
    return [(row.item.parameter, row.item.value) for row in screen.query(ParameterRow)]


class TestRendering:
    """Screen reflects what the view-model emits."""

    @pytest.mark.asyncio
    async def test_empty_store(self, store, remote):
        app = make_app(store, remote)
        async with app.run_test() as pilot:
            await settle(pilot)
            screen = app.screen
            assert isinstance(screen, ConfigScreen)
            assert screen.query_one(css(ids.SELECTOR_BTN), Button).disabled is True
            assert screen.query_one(css(ids.ACTIONS_BTN), Button).disabled is False
            assert screen.query_one(ConfigSelector).selected_name == ""
            assert row_texts(screen) == []
            assert len(screen.query(css(ids.EMPTY_HINT))) == 1

    @pytest.mark.asyncio
    async def test_selected_configuration_rows(self, seeded_store, remote):
        app = make_app(seeded_store, remote, selection="main")
        async with app.run_test() as pilot:
            await settle(pilot)
            screen = app.screen
            assert screen.query_one(css(ids.SELECTOR_BTN), Button).disabled is False
            assert screen.query_one(ConfigSelector).selected_name == "main"
            assert row_texts(screen) == [("timeout", "30"), ("retries", "3")]
            assert len(screen.query(css(ids.EMPTY_HINT))) == 0

    @pytest.mark.asyncio
    async def test_store_change_re_renders(self, seeded_store, remote):
        app = make_app(seeded_store, remote, selection="main")
        async with app.run_test() as pilot:
            await settle(pilot)
            seeded_store.upsert_item("main", ConfigItem("main", "endpoint", "x"))
            await settle(pilot)
            assert row_texts(app.screen)[-1] == ("endpoint", "x")


class TestSelector:
    @pytest.mark.asyncio
    async def test_pick_name_selects(self, seeded_store, remote):
        app = make_app(seeded_store, remote, selection="main")
        async with app.run_test() as pilot:
            await settle(pilot)
            await pilot.click(css(ids.SELECTOR_BTN))
            await settle(pilot)
            assert isinstance(app.screen, SelectorModal)

            item = next(i for i in app.screen.query(ConfigNameItem) if i.config_name == "staging")
            item.on_click()
            await settle(pilot)

            assert app.view_model.selection == "staging"
            assert isinstance(app.screen, ConfigScreen)
            assert app.screen.workflow.state == Browsing()

    @pytest.mark.asyncio
    async def test_dismiss_changes_nothing(self, seeded_store, remote):
        app = make_app(seeded_store, remote, selection="main")
        async with app.run_test() as pilot:
            await settle(pilot)
            await pilot.click(css(ids.SELECTOR_BTN))
            await settle(pilot)
            await pilot.press("escape")
            await settle(pilot)
            assert app.view_model.selection == "main"
            assert app.screen.workflow.state == Browsing()


class TestActionsMenu:
    @pytest.mark.asyncio
    async def test_add_configuration(self, store, remote):
        app = make_app(store, remote)
        async with app.run_test() as pilot:
            await settle(pilot)
            await pilot.click(css(ids.ACTIONS_BTN))
            await settle(pilot)
            assert isinstance(app.screen, ActionsModal)

            await pilot.click(css(ids.ADD_CONFIG_BTN))
            await settle(pilot)
            assert isinstance(app.screen, InputModal)

            app.screen.query_one(css(ids.CONFIG_NAME_INPUT), Input).value = "staging"
            await pilot.click(css(ids.OK_BTN))
            await settle(pilot)

            assert store.list_names() == ["staging"]
            assert app.view_model.selection == "staging"
            assert app.screen.query_one(ConfigSelector).selected_name == "staging"

    @pytest.mark.asyncio
    async def test_add_blank_name_keeps_dialog_open(self, store, remote):
        app = make_app(store, remote)
        async with app.run_test() as pilot:
            await settle(pilot)
            await pilot.click(css(ids.ACTIONS_BTN))
            await settle(pilot)
            await pilot.click(css(ids.ADD_CONFIG_BTN))
            await settle(pilot)

            app.screen.query_one(css(ids.CONFIG_NAME_INPUT), Input).value = "   "
            await pilot.click(css(ids.OK_BTN))
            await settle(pilot)

            assert isinstance(app.screen, InputModal)
            assert store.list_names() == []

    @pytest.mark.asyncio
    async def test_remove_configuration(self, seeded_store, remote):
        app = make_app(seeded_store, remote, selection="main")
        async with app.run_test() as pilot:
            await settle(pilot)
            await pilot.click(css(ids.ACTIONS_BTN))
            await settle(pilot)
            await pilot.click(css(ids.REMOVE_CONFIG_BTN))
            await settle(pilot)
            assert isinstance(app.screen, ConfirmModal)

            await pilot.click(css(ids.CONFIRM_BTN))
            await settle(pilot)

            assert seeded_store.list_names() == ["staging"]
            assert app.view_model.selection is None
            assert row_texts(app.screen) == []

    @pytest.mark.asyncio
    async def test_remove_cancel_keeps_configuration(self, seeded_store, remote):
        app = make_app(seeded_store, remote, selection="main")
        async with app.run_test() as pilot:
            await settle(pilot)
            await pilot.click(css(ids.ACTIONS_BTN))
            await settle(pilot)
            await pilot.click(css(ids.REMOVE_CONFIG_BTN))
            await settle(pilot)
            await pilot.click(css(ids.CANCEL_BTN))
            await settle(pilot)

            assert seeded_store.list_names() == ["main", "staging"]
            assert app.screen.workflow.state == Browsing()

    @pytest.mark.asyncio
    async def test_reset_configuration(self, seeded_store, remote):
        app = make_app(seeded_store, remote, selection="main")
        async with app.run_test() as pilot:
            await settle(pilot)
            await pilot.click(css(ids.ACTIONS_BTN))
            await settle(pilot)
            await pilot.click(css(ids.RESET_CONFIG_BTN))
            await settle(pilot)
            await pilot.click(css(ids.CONFIRM_BTN))
            await settle(pilot, rounds=20)

            assert seeded_store.get("main").parameters() == {
                "timeout": "60",
                "endpoint": "https://example.com",
            }

    @pytest.mark.asyncio
    async def test_reset_failure_notifies(self, seeded_store, remote, main_config):
        remote.fail = RemoteUnavailable("Could not reach remote")
        notices = []
        app = make_app(seeded_store, remote, selection="main", notices=notices)
        async with app.run_test() as pilot:
            await settle(pilot)
            await pilot.click(css(ids.ACTIONS_BTN))
            await settle(pilot)
            await pilot.click(css(ids.RESET_CONFIG_BTN))
            await settle(pilot)
            await pilot.click(css(ids.CONFIRM_BTN))
            await settle(pilot, rounds=20)

            assert seeded_store.get("main") == main_config
            assert notices == [("Could not reach remote", "error")]


class TestEditDialog:
    @pytest.mark.asyncio
    async def test_row_opens_prefilled_editor(self, seeded_store, remote):
        app = make_app(seeded_store, remote, selection="main")
        async with app.run_test() as pilot:
            await settle(pilot)
            row = app.screen.query(ParameterRow).first()
            row.on_click()
            await settle(pilot)

            modal = app.screen
            assert isinstance(modal, EditParameterModal)
            assert modal.item.parameter == "timeout"
            assert modal.query_one(css(ids.EDIT_VALUE_INPUT), Input).value == "30"

    @pytest.mark.asyncio
    async def test_submit_value(self, seeded_store, remote):
        app = make_app(seeded_store, remote, selection="main")
        async with app.run_test() as pilot:
            await settle(pilot)
            config_screen = app.screen
            await pilot.click(".parameter-edit-btn")
            await settle(pilot)
            assert config_screen.workflow.state == EditDialog(ConfigItem("main", "timeout", "30"))

            app.screen.query_one(css(ids.EDIT_VALUE_INPUT), Input).value = "45"
            await pilot.click(css(ids.OK_BTN))
            await settle(pilot)

            assert seeded_store.get("main").get("timeout").value == "45"
            assert row_texts(app.screen)[0] == ("timeout", "45")

    @pytest.mark.asyncio
    async def test_blank_value_is_silent_cancel(self, seeded_store, remote, main_config):
        app = make_app(seeded_store, remote, selection="main")
        async with app.run_test() as pilot:
            await settle(pilot)
            await pilot.click(".parameter-edit-btn")
            await settle(pilot)

            app.screen.query_one(css(ids.EDIT_VALUE_INPUT), Input).value = ""
            await pilot.click(css(ids.OK_BTN))
            await settle(pilot)

            assert isinstance(app.screen, ConfigScreen)
            assert app.screen.workflow.state == Browsing()
            assert seeded_store.get("main") == main_config


class TestStatusBar:
    @pytest.mark.asyncio
    async def test_pending_then_cleared(self, seeded_store, remote):
        remote.blocking = True
        app = make_app(seeded_store, remote, selection="main")
        try:
            async with app.run_test() as pilot:
                await settle(pilot)
                config_screen = app.screen
                await pilot.click(css(ids.ACTIONS_BTN))
                await settle(pilot)
                await pilot.click(css(ids.RESET_CONFIG_BTN))
                await settle(pilot)
                await pilot.click(css(ids.CONFIRM_BTN))
                await settle(pilot)
                assert config_screen.status_text == "Resetting main..."

                remote.release.set()
                await settle(pilot, rounds=20)
                assert config_screen.status_text == ""
        finally:
            remote.release.set()

    @pytest.mark.asyncio
    async def test_rejected_command_leaves_no_pending_text(self, store, remote):
        notices = []
        app = make_app(store, remote, notices=notices)
        async with app.run_test() as pilot:
            await settle(pilot)
            await app.screen._execute(SelectConfiguration("   "))
            assert app.screen.status_text == ""
            assert notices[0][1] == "error"


class TestStartupErrors:
    @pytest.mark.asyncio
    async def test_unreadable_initial_selection_notifies(self, tmp_path, remote):
        store = JsonConfigStore(tmp_path)
        store.create_empty("main")
        store.path_for("main").write_text("{not json")
        notices = []
        app = make_app(store, remote, selection="main", notices=notices)
        async with app.run_test() as pilot:
            await settle(pilot)
            assert isinstance(app.screen, ConfigScreen)
            assert app.view_model.selection is None
            assert [severity for _, severity in notices] == ["error"]
