import pytest
from textual.events import Key, Paste

from fuzzy_rank.models import Match
from fuzzy_rank.tui import FuzzyFinderTui

CANDIDATES = ["moduleNameResolver.ts", "my name is_Ramsey", "README.md"]


@pytest.fixture
def finder(monkeypatch) -> tuple[FuzzyFinderTui, list[Match | None]]:
    app = FuzzyFinderTui(CANDIDATES)
    shown: list[Match | None] = []

    monkeypatch.setattr(app, "_render_result_options", lambda: None)
    monkeypatch.setattr(app, "_update_status", lambda: None)
    monkeypatch.setattr(app, "_update_filter_indicator", lambda: None)
    monkeypatch.setattr(app, "_show_match_details", shown.append)
    monkeypatch.setattr(app, "_show_placeholder", lambda: shown.append(None))
    return app, shown


def test_typing_filters_candidates(finder) -> None:
    app, shown = finder

    for character in "mnr":
        app.on_key(Key(character, character))

    assert app.pattern == "mnr"
    assert [match.text for match in app._visible_matches] == [
        "my name is_Ramsey",
        "moduleNameResolver.ts",
    ]
    assert shown[-1] == app._visible_matches[0]


def test_backspace_and_escape_edit_query(finder) -> None:
    app, shown = finder

    app._set_search_query("mnrx")
    assert app._visible_matches == []

    app.on_key(Key("backspace", "\x08"))
    assert app._search_query == "mnr"
    assert len(app._visible_matches) == 2

    app.action_escape()
    assert app._search_query == ""
    assert app._visible_matches == []
    assert shown[-1] is None


def test_escape_with_empty_query_exits(finder, monkeypatch) -> None:
    app, _ = finder
    exited: list[bool] = []
    monkeypatch.setattr(app, "exit", lambda: exited.append(True))

    app.action_escape()

    assert exited == [True]


def test_pattern_ignores_surrounding_whitespace(finder) -> None:
    app, _ = finder

    app.on_key(Key("space", " "))
    app.on_paste(Paste("read\n"))

    assert app._search_query == " read"
    assert [match.text for match in app._visible_matches] == ["README.md"]


def test_status_text_reports_counts(monkeypatch) -> None:
    app = FuzzyFinderTui(CANDIDATES, limit=1)
    for name in (
        "_render_result_options",
        "_update_status",
        "_update_filter_indicator",
        "_show_match_details",
        "_show_placeholder",
    ):
        monkeypatch.setattr(app, name, lambda *args: None)

    assert app._status_text() == "3 candidates loaded."

    app._set_search_query("mnr")

    assert len(app._visible_matches) == 1
    status = app._status_text()
    assert status.startswith("found 2 matches in ")
    assert status.endswith("(showing first 1)")
