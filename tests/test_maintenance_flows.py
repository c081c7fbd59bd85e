# -*- coding: utf-8 -*-
"""Main menu, sync, backup, revert, reset and purge flows."""

from __future__ import annotations

from conftest import PNG_1X1_BYTES, make_theme
from thememanager.config import SettingsStore
from thememanager.core.controller import ScreenController
from thememanager.models.screen import Screen
from thememanager.models.selection import Selection
from thememanager.workflows.registry import build_handlers


def _controller(ctx, start: Screen = Screen.MAIN_MENU) -> ScreenController:
    return ScreenController(build_handlers(ctx), initial=start)


def test_every_screen_has_a_handler(flow_ctx) -> None:
    assert set(build_handlers(flow_ctx)) == set(Screen)


def test_main_menu_cancel_quits(flow_ctx, presenter) -> None:
    presenter.queue(Selection("", 2))
    assert _controller(flow_ctx).run() == 0


def test_main_menu_entry_resets_selection(flow_ctx, presenter) -> None:
    flow_ctx.selection.selected_theme = "Dark"
    presenter.queue(Selection("Purge", 0))

    assert _controller(flow_ctx).step() is Screen.PURGE_CONFIRM
    assert flow_ctx.selection.selected_theme == ""


def test_main_menu_unknown_exit_code_stays(flow_ctx, presenter) -> None:
    presenter.queue(Selection("", 124))
    assert _controller(flow_ctx).step() is Screen.MAIN_MENU


def test_sync_catalog_reports_success(flow_ctx, presenter, app_paths) -> None:
    make_theme(app_paths.catalog_source / "Themes", "Dark")

    assert _controller(flow_ctx, Screen.SYNC_CATALOG).step() is Screen.MAIN_MENU
    assert presenter.messages == ["Catalog synced successfully!"]
    assert flow_ctx.themes.catalog_names() == ["Dark"]


def test_sync_catalog_reports_missing_source(flow_ctx, presenter) -> None:
    assert _controller(flow_ctx, Screen.SYNC_CATALOG).step() is Screen.MAIN_MENU
    assert presenter.messages[0].startswith("Error syncing catalog: Catalog source not found")


def test_purge_defaults_to_no_and_keeps_data(flow_ctx, presenter, app_paths) -> None:
    make_theme(app_paths.themes_dir, "Dark")
    presenter.queue(Selection("No", 0))

    assert _controller(flow_ctx, Screen.PURGE_CONFIRM).step() is Screen.MAIN_MENU
    assert presenter.calls[0] == ("confirm", {"message": "WARNING: Erase everything?", "default_yes": False})
    assert (app_paths.themes_dir / "Dark.theme").is_dir()


def test_purge_cancel_keeps_data(flow_ctx, presenter, app_paths) -> None:
    make_theme(app_paths.themes_dir, "Dark")
    presenter.queue(Selection("", 2))

    assert _controller(flow_ctx, Screen.PURGE_CONFIRM).step() is Screen.MAIN_MENU
    assert (app_paths.themes_dir / "Dark.theme").is_dir()


def test_purge_yes_erases_packs(flow_ctx, presenter, supervisor, app_paths) -> None:
    make_theme(app_paths.themes_dir, "Dark")
    presenter.queue(Selection("Yes", 0))
    controller = _controller(flow_ctx, Screen.PURGE_CONFIRM)

    assert controller.step() is Screen.PURGING
    assert controller.step() is Screen.MAIN_MENU
    assert supervisor.messages == ["Purging..."]
    assert presenter.messages == ["Purge complete!"]
    assert list(app_paths.themes_dir.glob("*.theme")) == []


def test_manual_backup_returns_to_backup_menu(flow_ctx, presenter, supervisor, app_paths) -> None:
    media = app_paths.sdcard_root / ".media"
    media.mkdir(parents=True)
    (media / "bg.png").write_bytes(PNG_1X1_BYTES)
    presenter.queue(Selection("Backup Theme", 0), Selection("Yes", 0))
    controller = _controller(flow_ctx, Screen.BACKUP_MENU)

    assert controller.step() is Screen.BACKUP_THEME_CONFIRM
    assert controller.step() is Screen.BACKUP_THEME_CREATING
    assert controller.step() is Screen.BACKUP_MENU
    assert supervisor.messages == ["Creating theme backup..."]
    assert presenter.messages == ["Theme backup created successfully!"]
    (backup,) = flow_ctx.themes.list_backups()
    assert backup.startswith("manual_")
    assert (flow_ctx.themes.backup_dir / backup / "Wallpapers" / ".media" / "bg.png").is_file()


def test_backup_confirm_no_returns_to_backup_menu(flow_ctx, presenter) -> None:
    presenter.queue(Selection("No", 0))
    assert _controller(flow_ctx, Screen.BACKUP_OVERLAY_CONFIRM).step() is Screen.BACKUP_MENU
    assert flow_ctx.overlays.list_backups() == []


def test_auto_backup_toggle_writes_through(flow_ctx, presenter, app_paths) -> None:
    presenter.queue(Selection("Yes", 0))

    assert _controller(flow_ctx, Screen.AUTO_BACKUP_TOGGLE).step() is Screen.BACKUP_MENU
    assert presenter.calls[0][1]["default_yes"] is False
    assert presenter.messages == ["Auto-backup enabled"]
    assert SettingsStore(app_paths.settings_file).auto_backup is True


def test_auto_backup_toggle_cancel_changes_nothing(flow_ctx, presenter, app_paths) -> None:
    presenter.queue(Selection("", 2))

    assert _controller(flow_ctx, Screen.AUTO_BACKUP_TOGGLE).step() is Screen.BACKUP_MENU
    assert presenter.messages == []
    assert SettingsStore(app_paths.settings_file).auto_backup is False


def test_revert_without_backups_returns_to_revert_menu(flow_ctx, presenter) -> None:
    assert _controller(flow_ctx, Screen.REVERT_THEME_GALLERY).step() is Screen.REVERT_MENU
    assert presenter.messages == ["No theme backups found"]


def test_revert_restores_wallpapers(flow_ctx, presenter, app_paths) -> None:
    media = app_paths.sdcard_root / ".media"
    media.mkdir(parents=True)
    (media / "bg.png").write_bytes(PNG_1X1_BYTES)
    backup = flow_ctx.themes.create_backup("manual")

    (media / "bg.png").write_bytes(b"changed")
    extra = app_paths.sdcard_root / "Roms" / "GBA (GBA)" / ".media" / "bg.png"
    extra.parent.mkdir(parents=True)
    extra.write_bytes(PNG_1X1_BYTES)

    presenter.queue(Selection(backup, 0), Selection("Yes", 0))
    controller = _controller(flow_ctx, Screen.REVERT_THEME_GALLERY)

    assert controller.step() is Screen.REVERT_THEME_CONFIRM
    assert controller.step() is Screen.REVERT_THEME_APPLYING
    assert controller.step() is Screen.MAIN_MENU
    assert presenter.calls[1][1]["message"] == f"Revert to theme backup '{backup}'?"
    assert presenter.messages == ["Theme reverted successfully!"]
    assert (media / "bg.png").read_bytes() == PNG_1X1_BYTES
    assert not extra.exists()


def test_reset_confirm_defaults_to_no_and_no_keeps_files(flow_ctx, presenter, supervisor, app_paths) -> None:
    media = app_paths.sdcard_root / ".media"
    media.mkdir(parents=True)
    (media / "Collections.png").write_bytes(PNG_1X1_BYTES)
    presenter.queue(Selection("Reset", 0), Selection("Delete all icons", 0), Selection("No", 0))
    controller = _controller(flow_ctx)

    visited = [controller.step() for _ in range(3)]

    assert visited == [Screen.RESET_MENU, Screen.RESET_CONFIRM, Screen.RESET_MENU]
    assert presenter.calls[2][1] == {"message": "Delete all icons?", "default_yes": False}
    assert supervisor.messages == []
    assert (media / "Collections.png").is_file()


def test_reset_yes_runs_supervised_and_returns_home(flow_ctx, presenter, supervisor, app_paths) -> None:
    media = app_paths.sdcard_root / ".media"
    media.mkdir(parents=True)
    (media / "bg.png").write_bytes(PNG_1X1_BYTES)
    (media / "Collections.png").write_bytes(PNG_1X1_BYTES)
    presenter.queue(Selection("Delete all backgrounds", 0), Selection("Yes", 0))
    controller = _controller(flow_ctx, Screen.RESET_MENU)

    visited = [controller.step() for _ in range(3)]

    assert visited == [Screen.RESET_CONFIRM, Screen.RESETTING, Screen.MAIN_MENU]
    assert supervisor.messages == ["Resetting..."]
    assert presenter.messages == ["Reset complete!"]
    assert not (media / "bg.png").exists()
    assert (media / "Collections.png").is_file()
    assert flow_ctx.selection.reset_option == ""


def test_reset_menu_back_returns_home(flow_ctx, presenter) -> None:
    presenter.queue(Selection("", 2))

    assert _controller(flow_ctx, Screen.RESET_MENU).step() is Screen.MAIN_MENU
