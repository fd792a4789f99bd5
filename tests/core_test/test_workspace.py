# tests/core_test/test_workspace.py
from condonery.config import UserPrefs, WindowSettings
from condonery.models import EntityKind, show_all
from condonery.services import NameContainsKeywordsPredicate
from condonery.workspace import Workspace


# ── Construction ─────────────────────────────────────────────────

def test_workspace_copies_the_portfolio(stub_portfolio):
    ws = Workspace(stub_portfolio)
    stub_portfolio.clear()
    assert len(ws.properties) == 3
    assert len(ws.clients) == 3


def test_workspace_defaults(empty_workspace):
    assert len(empty_workspace.properties) == 0
    assert empty_workspace.user_prefs == UserPrefs()
    assert empty_workspace.history_depth == 0


# ── Filters ──────────────────────────────────────────────────────

def test_filtered_shows_everything_by_default(workspace):
    assert len(workspace.filtered_properties) == 3
    assert len(workspace.filtered_clients) == 3
    assert workspace.active_filter(EntityKind.PROPERTY) is show_all


def test_filters_are_per_kind(workspace):
    workspace.update_filter(EntityKind.CLIENT, NameContainsKeywordsPredicate(["carl"]))
    assert [c.name.value for c in workspace.filtered_clients] == ["Carl Kurz"]
    assert len(workspace.filtered_properties) == 3


def test_filtered_view_follows_directory_changes(workspace, make_client):
    workspace.update_filter(EntityKind.CLIENT, NameContainsKeywordsPredicate(["carl"]))
    workspace.clients.add(make_client("Carl Sagan"))
    assert [c.name.value for c in workspace.filtered_clients] == ["Carl Kurz", "Carl Sagan"]


# ── History ──────────────────────────────────────────────────────

def test_undo_without_history(workspace):
    assert workspace.undo() is False


def test_push_history_and_undo(workspace):
    before = workspace.snapshot()
    workspace.push_history(before)
    workspace.portfolio.clear()

    assert workspace.undo() is True
    assert workspace.portfolio == before
    assert workspace.history_depth == 0


def test_snapshot_is_detached(workspace):
    snapshot = workspace.snapshot()
    workspace.clients.remove("Alice Pauline")
    assert len(snapshot.clients) == 3


def test_history_is_bounded(stub_portfolio):
    ws = Workspace(stub_portfolio, max_history=2)
    for _ in range(3):
        ws.push_history(ws.snapshot())
    assert ws.history_depth == 2
    assert ws.undo() and ws.undo()
    assert ws.undo() is False


# ── Preferences ──────────────────────────────────────────────────

def test_window_settings_setter(workspace):
    workspace.window_settings = WindowSettings(100, 50, 1, 2)
    assert workspace.user_prefs.window == WindowSettings(100, 50, 1, 2)


def test_equality(stub_portfolio):
    assert Workspace(stub_portfolio) == Workspace(stub_portfolio)
    other = Workspace(stub_portfolio)
    other.update_filter(EntityKind.PROPERTY, NameContainsKeywordsPredicate(["villa"]))
    assert Workspace(stub_portfolio) != other
